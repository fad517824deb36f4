"""Read, parse and analyse one source file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import AnalysisConfig
from ..exceptions import ParsingError, UnsupportedLanguageError
from ..scanning import (
    TreeSitterParser,
    detect_language,
    first_error_line,
    get_supported_languages,
    read_source,
)
from .collectors import analyze_tree
from .models import AnalysisResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ComplexityAnalyzer:
    """Analyses JavaScript-family source files one at a time.

    Each call returns a fresh AnalysisResult; nothing is shared between
    files apart from the cached tree-sitter parsers.

    Usage:
        analyzer = ComplexityAnalyzer(config)
        result = analyzer.analyze_file("app.js")
    """

    def __init__(
        self, config: Optional[AnalysisConfig] = None, parser: Optional[TreeSitterParser] = None
    ) -> None:
        self.config = config or AnalysisConfig()
        self._parser = parser or TreeSitterParser()

    def analyze_file(self, path: PathLike) -> AnalysisResult:
        """Read `path` from disk and analyse it.

        Raises:
            FileAccessError: If the file cannot be read
            UnsupportedLanguageError: If the extension has no grammar
            ParsingError: If the file has syntax errors and tolerant mode is off
        """
        path = Path(path)
        language = self._language_for(path)
        source = read_source(path, self.config.max_file_size_bytes)
        return self.analyze_source(source, str(path), language)

    def analyze_source(
        self, source: str, path: str = "<source>", language: Optional[str] = None
    ) -> AnalysisResult:
        """Parse `source` and analyse it under the label `path`."""
        if language is None:
            language = self._language_for(Path(path))

        tree = self._parser.parse(source.encode("utf-8"), language)

        error_line = first_error_line(tree)
        if error_line is not None:
            if not self.config.tolerant:
                raise ParsingError(Path(path), language, f"syntax error near line {error_line}")
            logger.warning(f"{path}: syntax error near line {error_line}, analysing recovered tree")

        result = analyze_tree(
            tree.root_node, path, language=language, import_callee=self.config.import_callee
        )
        logger.info(
            f"{path}: {len(result.functions)} functions, "
            f"{result.file.package_complexity} imports, {result.file.strings} strings"
        )
        return result

    def _language_for(self, path: Path) -> str:
        language = detect_language(path)
        if language is None:
            raise UnsupportedLanguageError(
                path.suffix or path.name, get_supported_languages(), filepath=path
            )
        return language


def analyze_source(
    source: str,
    path: str = "<source>",
    language: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Analyse source text. `language` defaults to detection from `path`."""
    if language is None and detect_language(Path(path)) is None:
        language = "javascript"
    return ComplexityAnalyzer(config).analyze_source(source, path, language)


def analyze_file(path: PathLike, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Analyse one file on disk."""
    return ComplexityAnalyzer(config).analyze_file(path)
