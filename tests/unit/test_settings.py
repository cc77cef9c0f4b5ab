"""Tests for configuration models and batch logging utilities."""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from geointersect.config import (
    BatchConfig,
    GeointersectSettings,
    LoggingConfig,
    get_default_settings,
)
from geointersect.utils import BatchLogger, BatchStats, configure_logging


class TestBatchConfig:
    """Tests for BatchConfig."""

    def test_defaults(self) -> None:
        """Test default batch settings."""
        config = BatchConfig()
        assert config.max_workers is None
        assert config.chunk_size == 64

    @pytest.mark.parametrize("chunk_size", [0, 10_001])
    def test_chunk_size_bounds(self, chunk_size: int) -> None:
        """Test that chunk size is range checked."""
        with pytest.raises(ValidationError):
            BatchConfig(chunk_size=chunk_size)

    def test_max_workers_positive(self) -> None:
        """Test that zero workers is rejected."""
        with pytest.raises(ValidationError):
            BatchConfig(max_workers=0)


class TestSettings:
    """Tests for the top-level settings model."""

    def test_default_settings(self) -> None:
        """Test the default settings factory."""
        settings = get_default_settings()
        assert isinstance(settings, GeointersectSettings)
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.file_log_level == "DEBUG"

    def test_nested_from_dict(self) -> None:
        """Test building settings from plain data."""
        settings = GeointersectSettings.model_validate(
            {"batch": {"chunk_size": 8}, "logging": {"log_file": "run.log"}}
        )
        assert settings.batch.chunk_size == 8
        assert settings.logging.log_file == Path("run.log")

    def test_model_dump_round_trip(self) -> None:
        """Test that settings survive model_dump()."""
        settings = GeointersectSettings(logging=LoggingConfig(log_level="INFO"))
        assert GeointersectSettings.model_validate(settings.model_dump()) == settings


class TestBatchStats:
    """Tests for BatchStats."""

    def test_empty(self) -> None:
        """Test derived values of an empty run."""
        stats = BatchStats()
        assert stats.processed_count == 0
        assert stats.duration_seconds == 0.0
        assert stats.avg_pair_time_ms is None

    def test_derived_values(self) -> None:
        """Test counts, duration and average timing."""
        stats = BatchStats(
            intersecting_count=2,
            disjoint_count=1,
            pair_timings_ms=[1.0, 2.0, 3.0],
            start_time=10.0,
            end_time=12.5,
        )
        assert stats.processed_count == 3
        assert stats.duration_seconds == 2.5
        assert stats.avg_pair_time_ms == 2.0


class TestBatchLogger:
    """Tests for BatchLogger."""

    def test_counts_outcomes(self) -> None:
        """Test that completions and errors update the statistics."""
        logger = Mock()
        batch_logger = BatchLogger(logger)

        batch_logger.log_pair_start(0, "LineString", "Point")
        batch_logger.log_pair_complete(0, "Point", 0.5)
        batch_logger.log_pair_complete(1, None, 0.25)
        batch_logger.log_pair_error(2, ValueError("bad"), traceback="tb")

        stats = batch_logger.stats
        assert stats.intersecting_count == 1
        assert stats.disjoint_count == 1
        assert stats.error_count == 1
        assert stats.errors == [(2, "bad")]
        assert stats.pair_timings_ms == [0.5, 0.25]

    def test_error_logged_with_type(self) -> None:
        """Test that errors are logged with their exception type."""
        logger = Mock()
        BatchLogger(logger).log_pair_error(4, ValueError("bad"))

        logger.error.assert_called_once()
        kwargs = logger.error.call_args.kwargs
        assert kwargs["index"] == 4
        assert kwargs["error_type"] == "ValueError"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path: Path) -> None:
        """Test that a log file is created when requested."""
        log_file = tmp_path / "geointersect.log"
        logger = configure_logging(log_file=log_file, quiet=True)

        logger.info("Test message", pair=1)

        assert log_file.exists()
        assert "Test message" in log_file.read_text(encoding="utf-8")

    def test_repeated_calls_replace_handlers(self, tmp_path: Path) -> None:
        """Test that reconfiguring swaps handlers instead of stacking them."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "first.log")
        handler_count = len(root.handlers)

        configure_logging(log_file=tmp_path / "second.log")

        assert len(root.handlers) == handler_count
        file_names = [
            Path(h.baseFilename).name for h in root.handlers if isinstance(h, logging.FileHandler)
        ]
        assert file_names == ["second.log"]

        configure_logging(quiet=True)
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
