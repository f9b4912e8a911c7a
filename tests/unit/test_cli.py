"""Unit tests for the command-line interface."""

import json
from pathlib import Path

from typer.testing import CliRunner

from afmkit import __version__
from afmkit.cli.app import app

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
SAMPLE = FIXTURES_DIR / "TestSans-Regular.afm"
TRUNCATED = FIXTURES_DIR / "Truncated-Reduced.afm"
BROKEN = FIXTURES_DIR / "Broken-Terminator.afm"

runner = CliRunner()


class TestVersion:
    """Tests for the --version option."""

    def test_version(self):
        """Test that --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self):
        """Test the summary of a valid file."""
        result = runner.invoke(app, ["info", str(SAMPLE)])
        assert result.exit_code == 0
        assert "TestSans-Regular" in result.output
        assert "8 glyphs" in result.output
        assert "5 kern pairs" in result.output
        assert "1 composites" in result.output

    def test_info_quiet(self):
        """Test that quiet mode prints only the font name."""
        result = runner.invoke(app, ["info", "--quiet", str(SAMPLE)])
        assert result.exit_code == 0
        assert result.output.strip() == "TestSans-Regular"

    def test_info_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        result = runner.invoke(app, ["info", str(tmp_path / "missing.afm")])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_info_directory(self, tmp_path):
        """Test a path that is a directory."""
        result = runner.invoke(app, ["info", str(tmp_path)])
        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_info_parse_error(self):
        """Test that a malformed file exits with code 1."""
        result = runner.invoke(app, ["info", str(BROKEN)])
        assert result.exit_code == 1
        assert "Could not parse AFM file" in result.output
        assert "EndCharMetrics" in result.output

    def test_info_reduced(self):
        """Test that --reduced accepts a file with trailing vendor data."""
        assert runner.invoke(app, ["info", str(TRUNCATED)]).exit_code == 1

        result = runner.invoke(app, ["info", "--reduced", str(TRUNCATED)])
        assert result.exit_code == 0
        assert "2 glyphs" in result.output

    def test_info_log_file(self, tmp_path):
        """Test that --log-file writes a log."""
        log_file = tmp_path / "afmkit.log"
        result = runner.invoke(app, ["info", "--quiet", "--log-file", str(log_file), str(SAMPLE)])
        assert result.exit_code == 0
        assert log_file.exists()
        assert "AFM file parsed" in log_file.read_text(encoding="utf-8")

    def test_info_log_level_any_case(self, tmp_path):
        """Test that --log-level accepts a known level in lower case."""
        log_file = tmp_path / "afmkit.log"
        result = runner.invoke(
            app, ["info", "-q", "--log-file", str(log_file), "--log-level", "error", str(SAMPLE)]
        )
        assert result.exit_code == 0

    def test_info_unknown_log_level(self, tmp_path):
        """Test that an unknown --log-level is a usage error, not a crash."""
        result = runner.invoke(
            app,
            ["info", "--log-file", str(tmp_path / "l.log"), "--log-level", "LOUD", str(SAMPLE)],
        )
        assert result.exit_code == 2
        assert not isinstance(result.exception, AttributeError)
        assert not (tmp_path / "l.log").exists()


class TestCharsCommand:
    """Tests for the chars command."""

    def test_chars(self):
        """Test listing all glyphs."""
        result = runner.invoke(app, ["chars", "--limit", "0", str(SAMPLE)])
        assert result.exit_code == 0
        assert "Aacute" in result.output
        assert "more" not in result.output

    def test_chars_limit(self):
        """Test that --limit hides the remaining glyphs."""
        result = runner.invoke(app, ["chars", "-n", "2", str(SAMPLE)])
        assert result.exit_code == 0
        assert "(+6 more)" in result.output
        assert "Aacute" not in result.output


class TestKerningCommand:
    """Tests for the kerning command."""

    def test_kerning(self):
        """Test listing kern pairs and track kerns."""
        result = runner.invoke(app, ["kerning", str(SAMPLE)])
        assert result.exit_code == 0
        assert "KernPairs" in result.output
        assert "TrackKern -1" in result.output

    def test_kerning_glyph(self):
        """Test filtering by first glyph."""
        result = runner.invoke(app, ["kerning", "--glyph", "A", str(SAMPLE)])
        assert result.exit_code == 0
        assert "-70" in result.output
        assert "-55" in result.output

    def test_kerning_unknown_glyph(self):
        """Test a glyph without kern pairs."""
        result = runner.invoke(app, ["kerning", "-g", "Z", str(SAMPLE)])
        assert result.exit_code == 0
        assert "No kern pairs for 'Z'" in result.output

    def test_no_kerning(self, tmp_path):
        """Test a file without kern data."""
        path = tmp_path / "plain.afm"
        path.write_bytes(b"StartFontMetrics 4.1\nFontName Plain\nEndFontMetrics\n")
        result = runner.invoke(app, ["kerning", str(path)])
        assert result.exit_code == 0
        assert "No kerning data" in result.output


class TestDumpCommand:
    """Tests for the dump command."""

    def test_dump_json(self):
        """Test that dump prints the model as JSON."""
        result = runner.invoke(app, ["dump", str(SAMPLE)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["font_name"] == "TestSans-Regular"
        assert len(data["char_metrics"]) == 8
        assert data["kern_pairs"][4] == {"first": "A", "second": "V", "x": -80.0, "y": 0.0}
        assert data["composites"][0]["parts"][1] == {"name": "acute", "dx": 167, "dy": 211}
