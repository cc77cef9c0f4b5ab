"""Parallel evaluation of many intersection pairs.

The intersection functions are pure, so independent pairs can be evaluated in
worker processes without coordination. Geometries cross the process boundary
in their to_dict() form.

Key components:
- process_pair: Top-level picklable function intersecting one serialized pair
- process_chunk: Picklable wrapper evaluating a list of serialized pairs
- BatchIntersector: Orchestrator that fans pairs out to a process pool
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from geointersect.config import GeointersectSettings
from geointersect.core.intersection import intersect
from geointersect.domain import Geometry, LineString, Point, geometry_from_dict
from geointersect.exceptions import UnsupportedGeometryError
from geointersect.utils import BatchLogger, BatchStats, configure_logging


def process_pair(pair_dict: dict[str, Any]) -> dict[str, Any]:
    """Intersect a single serialized geometry pair.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        pair_dict: {"index": int, "left": geometry dict, "right": geometry dict}

    Returns:
        Dictionary containing either:
        - Success: {"index": int, "result": geometry dict or None, "duration_ms": float}
        - Error: {"index": int, "error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        left = geometry_from_dict(pair_dict["left"])
        right = geometry_from_dict(pair_dict["right"])
        result = intersect(left, right)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": pair_dict["index"],
            "result": result.to_dict() if result is not None else None,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": pair_dict.get("index", -1),
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


def process_chunk(chunk: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Intersect a list of serialized pairs in one worker task."""
    return [process_pair(pair_dict) for pair_dict in chunk]


@dataclass
class BatchResult:
    """Outcome of a batch run.

    Attributes:
        results: One entry per input pair, in input order. None for disjoint
            pairs and for pairs that failed (see stats.errors).
        stats: Counts, timings and error details
    """

    results: list[Geometry | None] = field(default_factory=list)
    stats: BatchStats = field(default_factory=BatchStats)


class BatchIntersector:
    """Intersects many geometry pairs, optionally across worker processes.

    Example:
        settings = GeointersectSettings()
        batch = BatchIntersector(settings)
        outcome = batch.run([(line, point), (line, other_line)], max_workers=4)
        for result in outcome.results:
            ...
    """

    def __init__(self, config: GeointersectSettings, quiet: bool = False) -> None:
        """Initialize the batch intersector with configuration.

        Args:
            config: Settings containing batch and logging config
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.batch_logger = BatchLogger(self.logger)

    def run(
        self,
        pairs: Sequence[tuple[Geometry, Geometry]],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> BatchResult:
        """Intersect every pair.

        Args:
            pairs: (left, right) geometry pairs
            max_workers: Maximum worker processes (None = config default,
                1 = evaluate inline without a pool)
            progress_callback: Optional callback(completed, total) called as
                pairs finish

        Returns:
            BatchResult with per-pair results in input order and statistics

        Raises:
            UnsupportedGeometryError: If an operand is not a Point or LineString
            KeyboardInterrupt: If processing is cancelled by user
        """
        self.batch_logger = BatchLogger(self.logger)
        stats = self.batch_logger.stats
        stats.start_time = time.time()
        stats.total_count = len(pairs)

        if max_workers is None:
            max_workers = self.config.batch.max_workers

        tasks: list[dict[str, Any]] = []
        for index, (left, right) in enumerate(pairs):
            for operand in (left, right):
                if not isinstance(operand, Point | LineString):
                    raise UnsupportedGeometryError(left, right)
            self.batch_logger.log_pair_start(index, type(left).__name__, type(right).__name__)
            tasks.append({"index": index, "left": left.to_dict(), "right": right.to_dict()})

        chunk_size = self.config.batch.chunk_size
        chunks = [tasks[i : i + chunk_size] for i in range(0, len(tasks), chunk_size)]

        self.logger.info(
            "Starting batch",
            pair_count=len(tasks),
            chunk_count=len(chunks),
            max_workers=max_workers,
        )

        outcome = BatchResult(results=[None] * len(tasks), stats=stats)

        if max_workers == 1:
            completed = 0
            for chunk in chunks:
                completed = self._collect(process_chunk(chunk), outcome, completed)
                if progress_callback is not None:
                    progress_callback(completed, len(tasks))
        elif chunks:
            self._run_parallel(chunks, outcome, max_workers, progress_callback)

        stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            total=stats.total_count,
            intersecting=stats.intersecting_count,
            disjoint=stats.disjoint_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return outcome

    def _run_parallel(
        self,
        chunks: list[list[dict[str, Any]]],
        outcome: BatchResult,
        max_workers: int | None,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        """Evaluate chunks in a ProcessPoolExecutor.

        Args:
            chunks: Serialized pairs grouped into worker tasks
            outcome: Result container to fill in
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total)
        """
        total = sum(len(chunk) for chunk in chunks)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for chunk in chunks:
                future = executor.submit(process_chunk, chunk)
                pending_futures[future] = [pair["index"] for pair in chunk]

            try:
                for future in as_completed(pending_futures):
                    indices = pending_futures.pop(future)

                    try:
                        completed = self._collect(future.result(), outcome, completed)
                    except Exception as e:
                        # Executor-level error, the whole chunk is lost
                        tb = traceback.format_exc()
                        for index in indices:
                            self.batch_logger.log_pair_error(index, e, traceback=tb)
                        completed += len(indices)

                    if progress_callback is not None:
                        progress_callback(completed, total)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                outcome.stats.was_cancelled = True
                outcome.stats.cancelled_count = sum(
                    len(indices) for indices in pending_futures.values()
                )

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _collect(
        self,
        results: list[dict[str, Any]],
        outcome: BatchResult,
        completed: int,
    ) -> int:
        """Record worker results into the outcome.

        Returns:
            Updated count of completed pairs
        """
        for result in results:
            index = result["index"]
            if "error" in result:
                self.batch_logger.log_pair_error(
                    index,
                    Exception(result["error"]),
                    traceback=result.get("traceback"),
                )
            else:
                geometry = (
                    geometry_from_dict(result["result"])
                    if result["result"] is not None
                    else None
                )
                outcome.results[index] = geometry
                self.batch_logger.log_pair_complete(
                    index,
                    type(geometry).__name__ if geometry is not None else None,
                    result.get("duration_ms", 0.0),
                )
            completed += 1
        return completed
