"""Configuration management for geointersect.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults. The
intersection engine itself takes no settings and has no tolerance option.

Key classes:
- BatchConfig: Batch processing settings
- LoggingConfig: Logging settings
- GeointersectSettings: Main application settings
"""

from geointersect.config.settings import (
    BatchConfig,
    GeointersectSettings,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BatchConfig",
    "GeointersectSettings",
    "LoggingConfig",
    "get_default_settings",
]
