"""CLI application entry point for geointersect.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from geointersect import __version__
from geointersect.cli.output import (
    console,
    create_progress,
    print_batch_results,
    print_batch_summary,
    print_cancellation_summary,
    print_error,
    print_header,
    print_json,
    print_parts,
    print_result,
)
from geointersect.cli.parsing import load_pairs, parse_geometry
from geointersect.config import BatchConfig, GeointersectSettings, LoggingConfig
from geointersect.core import BatchIntersector, intersect, intersection_parts
from geointersect.domain import Geometry, LineString
from geointersect.exceptions import GeointersectError
from geointersect.utils import configure_logging

# Exit codes
EXIT_INTERSECTS = 0
EXIT_DISJOINT = 1
EXIT_BAD_INPUT = 2
EXIT_PAIR_ERRORS = 1
EXIT_CANCELLED = 130

# Operands such as "-1,0 2,0" start with a dash; pass them through as arguments
OPERAND_CONTEXT = {"ignore_unknown_options": True}

# Create the Typer app
app = typer.Typer(
    name="geointersect",
    help="Intersect planar points and line strings.",
    add_completion=False,
    no_args_is_help=True,
)

LeftArg = Annotated[
    str,
    typer.Argument(
        help='First geometry as "x,y" pairs, e.g. "1,1 3,3"',
        show_default=False,
    ),
]
RightArg = Annotated[
    str,
    typer.Argument(
        help='Second geometry as "x,y" pairs, e.g. "2,2"',
        show_default=False,
    ),
]
ExactOpt = Annotated[
    bool,
    typer.Option(
        "--exact",
        "-x",
        help="Use exact rational coordinates instead of floats",
    ),
]
JsonOpt = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the result as JSON",
    ),
]
VerboseOpt = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Verbose console output",
    ),
]
LogFileOpt = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Geointersect[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Intersect planar points and line strings.

    Geometries are written as whitespace-separated "x,y" pairs: one pair is a
    point, two or more pairs are a line string.

    For intersect and parts, exit status is 0 when the geometries intersect,
    1 when they are disjoint and 2 on invalid input. Run "batch" on a JSON
    file of pairs to intersect many at once.
    """


def _parse_operands(left: str, right: str, exact: bool) -> tuple[Geometry, Geometry]:
    """Parse both operands, exiting with EXIT_BAD_INPUT on failure."""
    try:
        return parse_geometry(left, exact=exact), parse_geometry(right, exact=exact)
    except GeointersectError as e:
        print_error(str(e), details='Write geometries as "x,y" pairs, e.g. "1,1 3,3"')
        raise typer.Exit(code=EXIT_BAD_INPUT) from e


def _setup_logging(log_file: Path | None, verbose: bool):
    """Configure logging from CLI flags."""
    config = LoggingConfig(
        log_file=log_file,
        log_level="DEBUG" if verbose else "WARNING",
    )
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
        quiet=not verbose,
    )


@app.command("intersect", context_settings=OPERAND_CONTEXT)
def intersect_command(
    left: LeftArg,
    right: RightArg,
    exact: ExactOpt = False,
    as_json: JsonOpt = False,
    verbose: VerboseOpt = False,
    log_file: LogFileOpt = None,
) -> None:
    """Intersect two geometries and print the shared geometry.

    Example:
        geointersect intersect "1,1 3,3" "2,2"

    When two line strings share several separate pieces, the first overlap
    along the first line string is printed; use "parts" to see them all.
    """
    logger = _setup_logging(log_file, verbose)
    a, b = _parse_operands(left, right, exact)

    if verbose and not as_json:
        print_header(__version__)

    result = intersect(a, b)
    logger.info(
        "Intersection computed",
        left=type(a).__name__,
        right=type(b).__name__,
        result=type(result).__name__ if result is not None else None,
    )

    if as_json:
        print_json(result.to_dict() if result is not None else None)
    else:
        print_result(result)

    if result is None:
        raise typer.Exit(code=EXIT_DISJOINT)


@app.command("parts", context_settings=OPERAND_CONTEXT)
def parts_command(
    left: LeftArg,
    right: RightArg,
    exact: ExactOpt = False,
    as_json: JsonOpt = False,
    verbose: VerboseOpt = False,
    log_file: LogFileOpt = None,
) -> None:
    """List every intersection component of two line strings.

    Example:
        geointersect parts "0,0 4,0 4,4" "2,-1 2,1 5,1"
    """
    logger = _setup_logging(log_file, verbose)
    a, b = _parse_operands(left, right, exact)

    if not (isinstance(a, LineString) and isinstance(b, LineString)):
        print_error(
            "parts needs two line strings",
            details="Give at least two x,y pairs for each operand",
        )
        raise typer.Exit(code=EXIT_BAD_INPUT)

    if verbose and not as_json:
        print_header(__version__)

    parts = intersection_parts(a, b)
    logger.info("Intersection parts computed", count=len(parts))

    if as_json:
        print_json([part.to_dict() for part in parts])
    else:
        print_parts(parts)

    if not parts:
        raise typer.Exit(code=EXIT_DISJOINT)


@app.command("batch")
def batch_command(
    pairs_file: Annotated[
        Path,
        typer.Argument(
            help='JSON file with a list of {"left": ..., "right": ...} geometry pairs',
            show_default=False,
        ),
    ],
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker pool)",
            min=1,
        ),
    ] = None,
    chunk_size: Annotated[
        int,
        typer.Option(
            "--chunk-size",
            help="Pairs sent to a worker per task",
            min=1,
            max=10_000,
        ),
    ] = 64,
    as_json: JsonOpt = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the results, without progress or summary",
        ),
    ] = False,
    verbose: VerboseOpt = False,
    log_file: LogFileOpt = None,
) -> None:
    """Intersect every geometry pair listed in a JSON file.

    Example:
        geointersect batch pairs.json --workers 4

    Exit status is 0 when every pair was evaluated, 1 when some pairs failed,
    2 when the file cannot be read and 130 when cancelled.
    """
    try:
        pairs = load_pairs(pairs_file)
    except GeointersectError as e:
        print_error(str(e), details='Expected [{"left": {...}, "right": {...}}, ...]')
        raise typer.Exit(code=EXIT_BAD_INPUT) from e

    settings = GeointersectSettings(
        batch=BatchConfig(max_workers=workers, chunk_size=chunk_size),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else "WARNING",
        ),
    )
    show_progress = not (quiet or as_json)

    if show_progress:
        print_header(__version__)

    batch = BatchIntersector(settings, quiet=not verbose)

    try:
        if show_progress:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Intersecting {len(pairs)} pairs",
                    total=len(pairs),
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                outcome = batch.run(pairs, progress_callback=update_progress)
        else:
            outcome = batch.run(pairs)
    except KeyboardInterrupt:
        stats = batch.batch_logger.stats
        print_cancellation_summary(
            processed=stats.processed_count,
            cancelled=stats.cancelled_count,
        )
        raise typer.Exit(code=EXIT_CANCELLED) from None

    stats = outcome.stats
    if as_json:
        print_json(
            {
                "results": [r.to_dict() if r is not None else None for r in outcome.results],
                "errors": [{"index": index, "error": message} for index, message in stats.errors],
            }
        )
    else:
        print_batch_results(outcome.results, stats.errors)
        if not quiet:
            print_batch_summary(stats)

    if stats.error_count:
        raise typer.Exit(code=EXIT_PAIR_ERRORS)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
