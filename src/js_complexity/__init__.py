"""
js-complexity - static complexity metrics for JavaScript and TypeScript.

Walks tree-sitter syntax trees and reports, per named function, cyclomatic
complexity, decision nesting, compound conditions, returns and member-access
chains, plus per-file string, import and condition counts.
"""

__version__ = "0.1.0"

from .analysis import AnalysisResult, FileMetrics, FunctionMetrics, analyze_file, analyze_source
from .api import analyze

__all__ = [
    "analyze",
    "analyze_file",
    "analyze_source",
    "AnalysisResult",
    "FileMetrics",
    "FunctionMetrics",
]
