"""Utility functions for afmkit.

This module provides utility functions including:

- Logging setup and configuration
- Parse statistics tracking
"""

from afmkit.utils.logging import (
    LOG_LEVELS,
    ParseLogger,
    ParseStats,
    configure_logging,
    resolve_level,
)

__all__ = [
    "LOG_LEVELS",
    "ParseLogger",
    "ParseStats",
    "configure_logging",
    "resolve_level",
]
