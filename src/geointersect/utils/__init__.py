"""Utility functions for geointersect.

This module provides:

- Logging setup and configuration
- Batch statistics tracking
"""

from geointersect.utils.logging import (
    BatchLogger,
    BatchStats,
    configure_logging,
)

__all__ = [
    "BatchLogger",
    "BatchStats",
    "configure_logging",
]
