"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables and formatted messages.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from geointersect.domain import Geometry, LineString, Point
from geointersect.utils import BatchStats

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Intersection found
SYM_NONE = "∅"  # Disjoint
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_geometry(geometry: Geometry) -> str:
    """Format a geometry in the CLI's own "x,y x,y" input syntax.

    Args:
        geometry: Point or LineString

    Returns:
        Whitespace-separated coordinate pairs
    """
    points = [geometry] if isinstance(geometry, Point) else list(geometry)
    return " ".join(",".join(str(c) for c in p.to_tuple()) for p in points)


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Geointersect[/bold] v{version}")
    console.print("─" * 44)


def print_result(geometry: Geometry | None) -> None:
    """Print a single intersection result.

    Args:
        geometry: The shared geometry, or None if disjoint
    """
    if geometry is None:
        console.print(f"[yellow]{SYM_NONE}[/yellow] no intersection")
        return

    kind = "Point" if isinstance(geometry, Point) else "LineString"
    line = Text(f"{SYM_OK} ", style="green")
    line.append(kind, style="bold")
    line.append(f" {format_geometry(geometry)}")
    console.print(line)


def print_parts(parts: list[Geometry]) -> None:
    """Print every intersection component as a table.

    Args:
        parts: Components from intersection_parts()
    """
    if not parts:
        print_result(None)
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Coordinates")

    for index, part in enumerate(parts, start=1):
        kind = "LineString" if isinstance(part, LineString) else "Point"
        table.add_row(str(index), kind, format_geometry(part))

    console.print(table)
    overlaps = sum(1 for p in parts if isinstance(p, LineString))
    console.print(
        f"  {overlaps} overlaps {SYM_DOT} {len(parts) - overlaps} points"
    )


def print_json(payload: Any) -> None:
    """Print a JSON document; non-float coordinates are written as strings.

    Args:
        payload: JSON-compatible data (geometry dicts, lists, None)
    """
    console.print_json(json.dumps(payload, default=str))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")


def create_progress() -> Progress:
    """Create a rich progress bar for batch runs.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins = int(seconds // 60)
    return f"{mins}m {seconds % 60:.1f}s"


def print_batch_results(results: list[Geometry | None], errors: list[tuple[int, str]]) -> None:
    """Print one row per pair of a batch run.

    Args:
        results: Per-pair results in input order
        errors: (index, message) for pairs that failed
    """
    failed = dict(errors)
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("Result")

    for index, result in enumerate(results):
        if index in failed:
            cell = f"[red]{SYM_ERR} {escape(failed[index])}[/red]"
        elif result is None:
            cell = f"[yellow]{SYM_NONE}[/yellow]"
        else:
            kind = "Point" if isinstance(result, Point) else "LineString"
            cell = f"[green]{SYM_OK}[/green] {kind} {format_geometry(result)}"
        table.add_row(str(index), cell)

    console.print(table)


def print_batch_summary(stats: BatchStats) -> None:
    """Print counts and timings of a finished batch run.

    Args:
        stats: Statistics from BatchIntersector.run()
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.total_count} pairs {SYM_DOT} {stats.intersecting_count} intersecting "
        f"{SYM_DOT} {stats.disjoint_count} disjoint {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )

    if stats.avg_pair_time_ms is not None:
        console.print(f"  {stats.avg_pair_time_ms:.3f}ms avg per pair")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of pairs evaluated before cancellation
        cancelled: Number of pending pairs that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} pairs completed {SYM_DOT} {cancelled} pairs cancelled")
