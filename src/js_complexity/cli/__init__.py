"""CLI entry point."""

import typer

app = typer.Typer(
    name="js-complexity",
    help="js-complexity - complexity metrics for JavaScript and TypeScript",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .analyze import main as _main  # noqa: F401, E402
