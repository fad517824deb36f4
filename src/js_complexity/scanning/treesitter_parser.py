"""Tree-sitter parser wrapper.

Builds one parser per grammar on first use and reuses it afterwards.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "javascript")
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from ..exceptions import UnsupportedLanguageError

logger = logging.getLogger(__name__)

# Grammar name -> function returning the raw language capsule
_GRAMMARS: dict[str, Callable[[], Any]] = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}


def get_supported_languages() -> list[str]:
    """Get list of grammar names the parser can handle."""
    return list(_GRAMMARS.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for the JavaScript family of grammars."""

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}

    def parse(self, code: bytes, language: str) -> tree_sitter.Tree:
        """Parse code and return syntax tree.

        Args:
            code: Source code as UTF-8 bytes
            language: Grammar name (e.g., "javascript")

        Raises:
            UnsupportedLanguageError: If no grammar is registered for language
        """
        return self._parser_for(language).parse(code)

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in _GRAMMARS

    def _parser_for(self, language: str) -> tree_sitter.Parser:
        parser = self._parsers.get(language)
        if parser is not None:
            return parser

        grammar = _GRAMMARS.get(language)
        if grammar is None:
            raise UnsupportedLanguageError(language, get_supported_languages())

        # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
        parser = tree_sitter.Parser(tree_sitter.Language(grammar()))
        self._parsers[language] = parser
        logger.debug(f"Initialised tree-sitter grammar: {language}")
        return parser


def first_error_line(tree: tree_sitter.Tree) -> int | None:
    """Return the 1-indexed line of the first ERROR or MISSING node, if any."""
    if not tree.root_node.has_error:
        return None
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return tree.root_node.start_point[0] + 1
