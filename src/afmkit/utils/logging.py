"""Logging utilities for afmkit."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

from afmkit.domain import FontMetrics


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Handlers installed by the last configure_logging() call
_installed_handlers: list[logging.Handler] = []


@dataclass
class ParseStats:
    """Statistics from loading one or more AFM files."""

    files_parsed: int = 0
    files_failed: int = 0
    char_metrics: int = 0
    kern_pairs: int = 0
    composites: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate loading duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def resolve_level(name: str) -> int:
    """Convert a level name such as "debug" to its logging constant.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    upper = name.upper()
    if upper not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{name}', expected one of {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(upper)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging on the "afmkit" logger.

    Handlers go on the package logger rather than the root logger, so an
    application embedding afmkit keeps its own logging setup. Calling this
    again replaces the handlers of the previous call instead of adding more.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger

    Raises:
        ValueError: If a level is not one of LOG_LEVELS
    """
    file_level_no = resolve_level(file_level)
    console_level_no = resolve_level(console_level)

    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"afmkit_{timestamp}.log")

    package_logger = logging.getLogger("afmkit")
    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level_no)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level_no)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    for handler in _installed_handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(min(handler.level for handler in _installed_handlers))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("afmkit")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level.upper())

    return logger


class ParseLogger:
    """Logger for tracking AFM loading progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize the parse logger.

        Args:
            logger: Logger from configure_logging(); if None, events go through
                the stdlib "afmkit" logger and its handlers, if any
        """
        if logger is None:
            logger = structlog.wrap_logger(
                logging.getLogger("afmkit"),
                processors=[
                    structlog.stdlib.filter_by_level,
                    structlog.processors.KeyValueRenderer(key_order=["event"]),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        self._logger = logger
        self._stats = ParseStats()

    def log_file_start(self, path: str) -> None:
        """Log start of parsing a file."""
        self._logger.debug("Parsing AFM file", path=path)

    def log_file_complete(
        self,
        path: str,
        metrics: FontMetrics,
        duration_ms: float,
    ) -> None:
        """Log successful parse of a file."""
        kern_pairs = (
            len(metrics.kern_pairs) + len(metrics.kern_pairs0) + len(metrics.kern_pairs1)
        )
        self._logger.info(
            "AFM file parsed",
            path=path,
            font=metrics.font_name,
            char_metrics=len(metrics.char_metrics),
            kern_pairs=kern_pairs,
            composites=len(metrics.composites),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.files_parsed += 1
        self._stats.char_metrics += len(metrics.char_metrics)
        self._stats.kern_pairs += kern_pairs
        self._stats.composites += len(metrics.composites)

    def log_file_skipped(self, path: str, reason: str) -> None:
        """Log a file that was not loaded."""
        self._logger.debug("AFM file skipped", path=path, reason=reason)

    def log_file_error(self, path: str, error: Exception) -> None:
        """Log a file that failed to parse."""
        self._logger.error(
            "AFM parsing failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.files_failed += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> ParseStats:
        """Get current parse statistics."""
        return self._stats
