"""Configuration settings for Geointersect."""

from pathlib import Path

from pydantic import BaseModel, Field


class BatchConfig(BaseModel):
    """Configuration for batch intersection processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto, 1 = run inline)",
    )
    chunk_size: int = Field(
        default=64,
        ge=1,
        le=10_000,
        description="Number of geometry pairs sent to a worker per task",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file output)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GeointersectSettings(BaseModel):
    """Main application settings."""

    batch: BatchConfig = Field(default_factory=BatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GeointersectSettings:
    """Get default application settings."""
    return GeointersectSettings()
