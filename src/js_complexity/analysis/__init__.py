"""Complexity metric collection."""

from .collectors import (
    FileMetricCollector,
    analyze_tree,
    collect_function_metrics,
    function_name,
    max_message_chains,
)
from .engine import ComplexityAnalyzer, analyze_file, analyze_source
from .models import AnalysisResult, FileMetrics, FunctionMetrics, MetricsRecord

__all__ = [
    "AnalysisResult",
    "ComplexityAnalyzer",
    "FileMetricCollector",
    "FileMetrics",
    "FunctionMetrics",
    "MetricsRecord",
    "analyze_file",
    "analyze_source",
    "analyze_tree",
    "collect_function_metrics",
    "function_name",
    "max_message_chains",
]
