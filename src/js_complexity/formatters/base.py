"""Base formatter interface for js-complexity output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..analysis.models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, results: List[AnalysisResult]) -> None:
        """Write the report for `results` to stdout."""

    @abstractmethod
    def format(self, results: List[AnalysisResult]) -> str:
        """Return formatted string representation of results."""
