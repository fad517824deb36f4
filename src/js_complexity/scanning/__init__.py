"""Source reading and tree-sitter parsing."""

from .languages import LANGUAGE_EXTENSIONS, detect_language
from .source import read_source
from .treesitter_parser import TreeSitterParser, first_error_line, get_supported_languages

__all__ = [
    "LANGUAGE_EXTENSIONS",
    "TreeSitterParser",
    "detect_language",
    "first_error_line",
    "get_supported_languages",
    "read_source",
]
