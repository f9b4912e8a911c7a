"""Integration tests that parse complete AFM files from disk."""

from pathlib import Path

import pytest

from afmkit.config import ParserConfig
from afmkit.core import parse_afm
from afmkit.domain import BoundingBox, CompositePart, KernPair, Ligature, TrackKern
from afmkit.exceptions import AfmLoadError, StructuralError
from afmkit.io import AfmReader, MetricsCatalog

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def sample_metrics():
    """Parsed metrics of the full sample font."""
    return AfmReader(FIXTURES_DIR / "TestSans-Regular.afm").load()


class TestFullDocument:
    """Tests for a document using every section."""

    def test_header(self, sample_metrics):
        """Test header values of the sample font."""
        m = sample_metrics
        assert m.afm_version == pytest.approx(4.1)
        assert m.font_name == "TestSans-Regular"
        assert m.full_name == "Test Sans Regular"
        assert m.family_name == "Test Sans"
        assert m.weight == "Regular"
        assert m.font_bbox == BoundingBox(-166, -225, 1000, 931)
        assert m.font_version == "001.007"
        assert m.encoding_scheme == "AdobeStandardEncoding"
        assert m.character_set == "ExtendedRoman"
        assert m.cap_height == 718
        assert m.x_height == 523
        assert m.ascender == 718
        assert m.descender == -207
        assert m.standard_horizontal_width == 76
        assert m.standard_vertical_width == 88
        assert m.underline_position == -100
        assert m.is_fixed_pitch is False
        assert m.italic_angle == 0
        assert m.comments == (
            "Synthetic metrics for the afmkit test suite",
            "Creation Date: Mon Jan 15 10:00:00 2024",
        )

    def test_char_metrics(self, sample_metrics):
        """Test char metrics of the sample font."""
        m = sample_metrics
        assert [c.name for c in m.char_metrics] == ["space", "A", "V", "f", "i", "l", "fi", "Aacute"]
        assert m.character_width("A") == 667
        assert m.get_char_metric("f").ligatures == (Ligature("i", "fi"), Ligature("l", "fl"))
        assert m.get_char_metric_by_code(174).name == "fi"
        assert not m.get_char_metric("Aacute").is_encoded
        assert m.character_height("Aacute") == 929

    def test_kerning(self, sample_metrics):
        """Test kern pairs and track kerns of the sample font."""
        m = sample_metrics
        assert m.kern_pairs == (
            KernPair("A", "V", -70),
            KernPair("A", "space", -55),
            KernPair("V", "A", 0, 12),
            KernPair("f", "i", -20, 5),
            KernPair("A", "V", -80, 0),
        )
        assert m.kerning("A", "V") == -70
        assert m.track_kerns == (TrackKern(-1, 6, 0, 72, -1.5), TrackKern(-2, 6, -0.5, 72, -3))
        assert m.kern_pairs0 == ()
        assert m.kern_pairs1 == ()

    def test_composites(self, sample_metrics):
        """Test composites of the sample font."""
        composite = sample_metrics.composites[0]
        assert composite.name == "Aacute"
        assert composite.parts == (CompositePart("A", 0, 0), CompositePart("acute", 167, 211))

    def test_reparse_is_equal(self, sample_metrics):
        """Test that parsing the same file twice gives equal models."""
        data = (FIXTURES_DIR / "TestSans-Regular.afm").read_bytes()
        assert parse_afm(data) == sample_metrics
        assert parse_afm(data, config=ParserConfig(read_size=1)) == sample_metrics

    def test_reduced_skips_kerning(self):
        """Test reduced mode on a complete file."""
        path = FIXTURES_DIR / "TestSans-Regular.afm"
        metrics = AfmReader(path, config=ParserConfig(reduced_dataset=True)).load()
        assert len(metrics.char_metrics) == 8
        assert metrics.kern_pairs == ()
        assert metrics.composites == ()


class TestTruncatedDocument:
    """Tests for a file with vendor data and no EndFontMetrics."""

    def test_full_mode_fails(self):
        """Test that full mode rejects the unknown keyword."""
        data = (FIXTURES_DIR / "Truncated-Reduced.afm").read_bytes()
        with pytest.raises(StructuralError, match="VendorExtension"):
            parse_afm(data)

    def test_reduced_mode_succeeds(self):
        """Test that reduced mode returns what was read before the vendor data."""
        data = (FIXTURES_DIR / "Truncated-Reduced.afm").read_bytes()
        metrics = parse_afm(data, reduced_dataset=True)
        assert metrics.afm_version == 2.0
        assert metrics.font_name == "Truncated-Reduced"
        assert metrics.weight == "Bold"
        assert metrics.character_width("A") == 722
        assert len(metrics.char_metrics) == 2


class TestCatalogOnFixtures:
    """Tests for loading the fixture directory into a catalog."""

    def test_directory_stops_at_broken_file(self):
        """Test that a broken file aborts a directory load."""
        catalog = MetricsCatalog()
        with pytest.raises(AfmLoadError, match="Broken-Terminator"):
            catalog.add_directory(FIXTURES_DIR)
        assert len(catalog) == 0

    def test_directory_reduced(self, tmp_path):
        """Test loading valid fixtures in reduced mode."""
        for name in ("TestSans-Regular.afm", "Truncated-Reduced.afm"):
            (tmp_path / name).write_bytes((FIXTURES_DIR / name).read_bytes())
        catalog = MetricsCatalog(config=ParserConfig(reduced_dataset=True))
        catalog.add_directory(tmp_path)
        assert catalog.names() == ["TestSans-Regular", "Truncated-Reduced"]
        assert catalog.parse_logger.stats.files_parsed == 2
