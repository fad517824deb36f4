"""Exception hierarchy for js-complexity."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
    UnsupportedLanguageError,
)
from .base import JsComplexityError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "JsComplexityError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidConfigError",
]
