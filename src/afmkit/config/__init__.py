"""Configuration management for afmkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ParserConfig: Parse mode and read buffering
- LoggingConfig: Logging settings
- AfmSettings: Main application settings
"""

from afmkit.config.settings import (
    AfmSettings,
    LoggingConfig,
    ParserConfig,
    get_default_settings,
)

__all__ = [
    "AfmSettings",
    "LoggingConfig",
    "ParserConfig",
    "get_default_settings",
]
