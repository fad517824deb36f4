"""Main analysis command."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..api import analyze_paths
from ..exceptions import JsComplexityError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"js-complexity {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: List[Path] = typer.Argument(
        ...,
        help="JavaScript or TypeScript source files to analyse",
        dir_okay=True,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (default), json, rich",
    ),
    tolerant: Optional[bool] = typer.Option(
        None,
        "--tolerant/--strict",
        help="Analyse files with syntax errors instead of failing",
    ),
    fail_above: Optional[int] = typer.Option(
        None,
        "--fail-above",
        help="Exit 1 if any function's cyclomatic complexity exceeds this (for CI gating)",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Report complexity metrics for each file and each named function.

    [bold cyan]Examples:[/bold cyan]

      js-complexity app.js

      js-complexity src/index.ts --format rich

      js-complexity lib.js --fail-above 10
    """
    try:
        settings = resolve_config(
            config=config,
            fmt=fmt,
            tolerant=tolerant,
            fail_above=fail_above,
            verbose=verbose,
            quiet=quiet,
        )
    except JsComplexityError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet"
    )

    try:
        results = analyze_paths(files, settings)
    except JsComplexityError as e:
        logger.debug("Analysis aborted", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    get_formatter(settings.output_format).render(results)

    if settings.fail_above is not None:
        worst = max((r.max_complexity for r in results), default=0)
        if worst > settings.fail_above:
            err_console.print(
                f"[red]Cyclomatic complexity {worst} exceeds --fail-above {settings.fail_above}[/red]"
            )
            raise typer.Exit(1)
