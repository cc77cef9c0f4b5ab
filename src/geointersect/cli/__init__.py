"""Command-line interface for geointersect.

This module provides the CLI using Typer with rich output.

Key features:
- Intersect two geometries given as coordinate lists
- List every intersection component of two line strings
- Exact rational coordinates with --exact
- Batch runs over a JSON file of pairs, with progress and a worker pool
- JSON output with --json
"""

from geointersect.cli.app import cli, main

__all__ = ["cli", "main"]
