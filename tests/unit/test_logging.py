"""Unit tests for logging setup and parse statistics."""

import logging
from unittest.mock import MagicMock

import pytest

from afmkit.domain import CharMetric, FontMetrics, KernPair
from afmkit.utils import LOG_LEVELS, ParseLogger, configure_logging, resolve_level
from afmkit.utils import logging as afm_logging


@pytest.fixture
def package_logger():
    """The "afmkit" logger, with configure_logging() handlers removed afterwards."""
    logger = logging.getLogger("afmkit")
    yield logger
    for handler in afm_logging._installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    afm_logging._installed_handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestResolveLevel:
    """Tests for resolve_level."""

    @pytest.mark.parametrize("name", LOG_LEVELS)
    def test_known_levels(self, name):
        """Test that every listed level resolves."""
        assert resolve_level(name) == getattr(logging, name)

    def test_case_insensitive(self):
        """Test lower-case level names."""
        assert resolve_level("warning") == logging.WARNING

    def test_unknown_level(self):
        """Test that unknown names raise ValueError, not AttributeError."""
        with pytest.raises(ValueError, match="LOUD"):
            resolve_level("LOUD")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def _installed(self, logger):
        return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]

    def test_file_handler_on_package_logger(self, package_logger, tmp_path):
        """Test that handlers go on the package logger, not the root logger."""
        root_handlers = list(logging.getLogger().handlers)
        log_file = tmp_path / "run.log"
        configure_logging(log_file=log_file, quiet=True)

        assert len(self._installed(package_logger)) == 1
        assert logging.getLogger().handlers == root_handlers
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    def test_console_handler_unless_quiet(self, package_logger, tmp_path):
        """Test that a console handler is added when not quiet."""
        configure_logging(log_file=tmp_path / "run.log", console_level="ERROR")
        handlers = self._installed(package_logger)
        assert len(handlers) == 2
        assert any(h.level == logging.ERROR for h in handlers)

    def test_reconfigure_replaces_handlers(self, package_logger, tmp_path):
        """Test that a second call does not stack handlers."""
        configure_logging(log_file=tmp_path / "first.log", quiet=True)
        configure_logging(log_file=tmp_path / "second.log", quiet=True)
        handlers = self._installed(package_logger)
        assert len(handlers) == 1
        assert handlers[0].baseFilename.endswith("second.log")

    def test_invalid_level_leaves_setup_alone(self, package_logger, tmp_path):
        """Test that a bad level fails before any handler is touched."""
        configure_logging(log_file=tmp_path / "run.log", quiet=True)
        with pytest.raises(ValueError):
            configure_logging(log_file=tmp_path / "other.log", file_level="LOUD")
        assert len(self._installed(package_logger)) == 1
        assert not (tmp_path / "other.log").exists()


class TestParseLogger:
    """Tests for ParseLogger statistics."""

    def test_complete_updates_stats(self):
        """Test that a parsed file adds to the totals."""
        metrics = FontMetrics(font_name="X")
        metrics.add_char_metric(CharMetric(name="A"))
        metrics.add_kern_pair(KernPair("A", "A", -5))
        metrics.add_kern_pair1(KernPair("A", "A", -6))

        parse_logger = ParseLogger(MagicMock())
        parse_logger.log_file_complete("x.afm", metrics, 1.5)

        stats = parse_logger.stats
        assert stats.files_parsed == 1
        assert stats.char_metrics == 1
        assert stats.kern_pairs == 2

    def test_error_recorded(self):
        """Test that failures are counted with their message."""
        parse_logger = ParseLogger(MagicMock())
        parse_logger.log_file_error("bad.afm", ValueError("boom"))
        assert parse_logger.stats.files_failed == 1
        assert parse_logger.stats.errors == [("bad.afm", "boom")]

    def test_default_logger_is_silent(self, capsys):
        """Test that the default logger prints nothing without configuration."""
        ParseLogger().log_file_start("x.afm")
        captured = capsys.readouterr()
        assert captured.out == ""
