"""Plain-text report: one block per file and per function."""

from typing import List

from ..analysis.models import AnalysisResult, FileMetrics, FunctionMetrics, MetricsRecord
from .base import BaseFormatter

FUNCTION_RULE = "============"
FILE_RULE = "~~~~~~~~~~~~"


def format_function(metrics: FunctionMetrics) -> str:
    fields = [
        ("SimpleCyclomaticComplexity", metrics.cyclomatic_complexity),
        ("MaxNestingDepth", metrics.max_nesting_depth),
        ("MaxConditions", metrics.max_conditions),
        ("Parameters", metrics.parameter_count),
        ("Returns", metrics.returns),
        ("MaxMessageChains", metrics.max_message_chains),
    ]
    return f"{metrics.name}(): {metrics.start_line}\n{FUNCTION_RULE}\n{_field_line(fields)}\n"


def format_file(metrics: FileMetrics) -> str:
    fields = [
        ("PackageComplexity", metrics.package_complexity),
        ("Strings", metrics.strings),
        ("AllConditions", metrics.all_conditions),
    ]
    return f"{metrics.path}\n{FILE_RULE}\n{_field_line(fields)}\n"


def format_record(record: MetricsRecord) -> str:
    if isinstance(record, FunctionMetrics):
        return format_function(record)
    return format_file(record)


def _field_line(fields: list) -> str:
    return "\t".join(f"{name}: {value}" for name, value in fields)


class TextFormatter(BaseFormatter):
    """Fixed-layout report, entries separated by a blank line."""

    def render(self, results: List[AnalysisResult]) -> None:
        print(self.format(results), end="")

    def format(self, results: List[AnalysisResult]) -> str:
        blocks = [
            format_record(record) for result in results for record in result.registry.values()
        ]
        return "\n".join(blocks)
