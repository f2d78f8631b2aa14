"""Command line interface for filesearch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from filesearch import __version__
from filesearch.config import SearchConfig
from filesearch.errors import FileSearchError
from filesearch.models import SearchWarning
from filesearch.output.sink import emit
from filesearch.pipeline import run_search


console = Console()
app = typer.Typer(help="filesearch - a command line utility for searching for files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_warning(warning: SearchWarning) -> None:
    console.print(
        f"[bold yellow]warning[/bold yellow][bold]: {escape(warning.message)}[/bold]",
        soft_wrap=True,
        highlight=False,
    )
    console.print(escape(warning.skipping), soft_wrap=True, highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"filesearch {__version__}", highlight=False)
        raise typer.Exit()


@app.command()
def find(
    dirs: Optional[List[Path]] = typer.Option(
        None, "--dirs", "-d", help="Directory to search (repeatable)."
    ),
    patterns: Optional[List[str]] = typer.Option(
        None, "--patterns", "-p", help="Regular expression matched against file names (repeatable)."
    ),
    size_min: Optional[int] = typer.Option(None, "--size-min", min=0, help="Minimum size on disk in bytes"),
    size_max: Optional[int] = typer.Option(None, "--size-max", min=0, help="Maximum size on disk in bytes"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write paths to this file"),
    strict: bool = typer.Option(False, "--strict", help="Abort when a subdirectory cannot be read"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Search directories for files by name pattern and size."""
    _setup_logging(verbose)
    config = SearchConfig(
        dirs=list(dirs or []),
        patterns=list(patterns) if patterns else None,
        size_min=size_min,
        size_max=size_max,
        output=output,
        strict=strict,
    )

    try:
        result = run_search(config)
        for warning in result.warnings:
            _print_warning(warning)
        emit(result.files, config.resolve_output(Path.cwd()))
    except FileSearchError as exc:
        console.print(f"[bold red]error[/bold red]: {escape(str(exc))}", soft_wrap=True, highlight=False)
        raise typer.Exit(code=1) from exc
