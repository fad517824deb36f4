"""Metric records produced by the analysis.

FunctionMetrics and FileMetrics are frozen: the collectors accumulate into
local counters and build the record once their pass has finished.
AnalysisResult is the per-file result object handed to the formatters.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union


@dataclass(frozen=True)
class FunctionMetrics:
    """Metrics for one named function declaration.

    Attributes:
        name: Declared identifier, or "anon function @<line>" when absent
        start_line: 1-indexed line the declaration starts on
        parameter_count: Length of the parameter list
        cyclomatic_complexity: 1 + number of decision nodes in the subtree
        max_nesting_depth: Largest number of decision nodes found under any
            single decision node
        max_conditions: Largest number of logical sub-expressions inside any
            single if statement
        returns: Number of return statements in the subtree
        max_message_chains: Largest number of member accesses found within
            any single member access expression of the body
    """

    name: str
    start_line: int
    parameter_count: int = 0
    cyclomatic_complexity: int = 1
    max_nesting_depth: int = 0
    max_conditions: int = 0
    returns: int = 0
    max_message_chains: int = 0

    def __post_init__(self) -> None:
        if self.cyclomatic_complexity < 1:
            raise ValueError("cyclomatic_complexity must be at least 1")
        for name in (
            "parameter_count",
            "max_nesting_depth",
            "max_conditions",
            "returns",
            "max_message_chains",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FileMetrics:
    """File-scoped counters.

    Attributes:
        path: Path the file was read from
        strings: Number of string literals (import specifiers excluded)
        package_complexity: Number of calls to the import primitive
        all_conditions: Sum over if statements of max(logical sub-expressions, 1)
    """

    path: str
    strings: int = 0
    package_complexity: int = 0
    all_conditions: int = 0

    def __post_init__(self) -> None:
        for name in ("strings", "package_complexity", "all_conditions"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


MetricsRecord = Union[FunctionMetrics, FileMetrics]

# Registry keys are ("file", path) or ("function", name) so the two never collide
RegistryKey = Tuple[str, str]


@dataclass
class AnalysisResult:
    """Everything computed for one source file.

    ``functions`` is keyed by function name; a later declaration with the
    same name replaces the earlier record but keeps its position.
    """

    file: FileMetrics
    language: str = "javascript"
    functions: dict[str, FunctionMetrics] = field(default_factory=dict)

    @property
    def registry(self) -> Mapping[RegistryKey, MetricsRecord]:
        """Read-only view of every record: the file first, then functions."""
        entries: dict[RegistryKey, MetricsRecord] = {("file", self.file.path): self.file}
        for name, metrics in self.functions.items():
            entries[("function", name)] = metrics
        return MappingProxyType(entries)

    @property
    def max_complexity(self) -> int:
        """Highest cyclomatic complexity among the functions (0 when there are none)."""
        return max((f.cyclomatic_complexity for f in self.functions.values()), default=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file.to_dict(),
            "language": self.language,
            "functions": [f.to_dict() for f in self.functions.values()],
        }
