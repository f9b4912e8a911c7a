"""Configuration settings for afmkit."""

from pathlib import Path

from pydantic import BaseModel, Field


class ParserConfig(BaseModel):
    """Configuration for the AFM grammar parser."""

    reduced_dataset: bool = Field(
        default=False,
        description=(
            "Stop at the first unknown keyword once character metrics have been read, "
            "instead of failing. Kerning and composites are skipped in this mode."
        ),
    )
    read_size: int = Field(
        default=8192,
        ge=1,
        le=1024 * 1024,
        description="Number of bytes pulled from the source per read",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AfmSettings(BaseModel):
    """Main application settings."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AfmSettings:
    """Get default application settings."""
    return AfmSettings()
