"""JSON formatter for js-complexity."""

import json
from typing import List

from ..analysis.models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render results as a JSON list, one object per file."""

    def render(self, results: List[AnalysisResult]) -> None:
        print(self.format(results))

    def format(self, results: List[AnalysisResult]) -> str:
        return json.dumps([r.to_dict() for r in results], indent=2)
