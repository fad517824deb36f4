"""Public API for js-complexity.

Example:
    >>> from js_complexity import analyze
    >>>
    >>> results = analyze(["src/app.js"])
    >>> results[0].functions["main"].cyclomatic_complexity
    3
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .analysis import AnalysisResult, ComplexityAnalyzer
from .config import AnalysisConfig, load_config
from .exceptions import FileAccessError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def analyze_paths(
    paths: Iterable[Union[str, Path]], config: Optional[AnalysisConfig] = None
) -> list[AnalysisResult]:
    """Analyse each file independently and return one result per file.

    Every file is analysed before anything is returned, so the first input
    error aborts the whole run without a partial report.

    Raises:
        FileAccessError: If a path is a directory or cannot be read
        UnsupportedLanguageError: If a file extension has no grammar
        ParsingError: If a file has syntax errors and tolerant mode is off
    """
    analyzer = ComplexityAnalyzer(config)
    results: list[AnalysisResult] = []
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            raise FileAccessError(path, "is a directory; pass source files explicitly")
        results.append(analyzer.analyze_file(path))
    return results


def analyze(
    paths: Iterable[Union[str, Path]],
    config_file: Optional[Path] = None,
    **overrides,
) -> list[AnalysisResult]:
    """Analyse source files and return their metrics.

    Args:
        paths: Source files to analyse
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., tolerant=True, verbose=True)

    Returns:
        One AnalysisResult per input file, in input order

    Raises:
        JsComplexityError: If configuration is invalid or a file cannot be
            read or parsed
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(verbose=config.verbosity == "verbose", quiet=config.verbosity == "quiet")

    paths = list(paths)
    logger.info(f"Analysing {len(paths)} file(s)")
    return analyze_paths(paths, config)
