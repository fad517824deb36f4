"""Rich terminal formatter for js-complexity."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.models import AnalysisResult
from .base import BaseFormatter


def _complexity_label(value: int) -> str:
    if value > 20:
        return f"[red bold]{value}[/red bold]"
    elif value > 10:
        return f"[yellow]{value}[/yellow]"
    else:
        return f"[green]{value}[/green]"


class RichFormatter(BaseFormatter):
    """One table per file, functions as rows."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, results: List[AnalysisResult]) -> None:
        for result in results:
            self.console.print(self._build_table(result))
            self.console.print()

    def format(self, results: List[AnalysisResult]) -> str:
        with self.console.capture() as capture:
            self.render(results)
        return capture.get()

    def _build_table(self, result: AnalysisResult) -> Table:
        file = result.file
        table = Table(
            title=f"[bold]{escape(file.path)}[/bold]",
            caption=(
                f"imports {file.package_complexity} · strings {file.strings} "
                f"· conditions {file.all_conditions}"
            ),
            show_lines=False,
        )
        table.add_column("Function", style="cyan")
        table.add_column("Line", justify="right")
        table.add_column("Complexity", justify="right")
        table.add_column("Nesting", justify="right")
        table.add_column("Conditions", justify="right")
        table.add_column("Params", justify="right")
        table.add_column("Returns", justify="right")
        table.add_column("Chains", justify="right")

        for fn in result.functions.values():
            table.add_row(
                escape(fn.name),
                str(fn.start_line),
                _complexity_label(fn.cyclomatic_complexity),
                str(fn.max_nesting_depth),
                str(fn.max_conditions),
                str(fn.parameter_count),
                str(fn.returns),
                str(fn.max_message_chains),
            )
        return table
