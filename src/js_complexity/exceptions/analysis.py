"""Analysis-related exceptions: reading and parsing a source unit."""

from pathlib import Path
from typing import List, Optional

from .base import JsComplexityError


class AnalysisError(JsComplexityError):
    """Base class for errors that abort the analysis of a file."""

    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot read file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when source text cannot be turned into a syntax tree."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when no grammar is available for a file."""

    def __init__(
        self,
        language: str,
        supported_languages: List[str],
        filepath: Optional[Path] = None,
    ):
        details = {"language": language, "supported": ", ".join(supported_languages)}
        if filepath is None:
            message = f"Unsupported language: {language}"
        else:
            message = f"Unsupported language for file {filepath}: {language}"
            details["filepath"] = str(filepath)
        super().__init__(message, details=details)
        self.language = language
        self.supported_languages = supported_languages
        self.filepath = filepath
