"""Logging utilities for Geointersect."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Root handlers installed by the last configure_logging() call
_installed_handlers: list[logging.Handler] = []


@dataclass
class BatchStats:
    """Statistics from a batch intersection run."""

    total_count: int = 0
    intersecting_count: int = 0
    disjoint_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    pair_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def processed_count(self) -> int:
        """Number of pairs that produced a result (intersecting or not)."""
        return self.intersecting_count + self.disjoint_count

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_pair_time_ms(self) -> float | None:
        """Average time spent per pair, None if nothing was timed."""
        if not self.pair_timings_ms:
            return None
        return sum(self.pair_timings_ms) / len(self.pair_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers from a previous call are removed and closed first, so repeated
    calls in one process replace the configuration instead of stacking it.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("geointersect")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BatchLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BatchStats()

    def log_pair_start(self, index: int, left_type: str, right_type: str) -> None:
        """Log start of one pair."""
        self._logger.debug("Intersecting pair", index=index, left=left_type, right=right_type)

    def log_pair_complete(
        self,
        index: int,
        result_type: str | None,
        duration_ms: float,
    ) -> None:
        """Log a pair that produced a result."""
        self._logger.debug(
            "Pair intersected",
            index=index,
            result=result_type,
            duration_ms=round(duration_ms, 3),
        )
        if result_type is None:
            self._stats.disjoint_count += 1
        else:
            self._stats.intersecting_count += 1
        self._stats.pair_timings_ms.append(duration_ms)

    def log_pair_error(
        self,
        index: int,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log a pair that failed."""
        self._logger.error(
            "Pair intersection failed",
            index=index,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((index, str(error)))

    @property
    def stats(self) -> BatchStats:
        """Get current batch statistics."""
        return self._stats
