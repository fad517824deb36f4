"""Tests for grammar detection and the tree-sitter wrapper."""

from pathlib import Path

import pytest

from js_complexity.exceptions import UnsupportedLanguageError
from js_complexity.scanning import (
    TreeSitterParser,
    detect_language,
    first_error_line,
    get_supported_languages,
)


class TestDetectLanguage:
    @pytest.mark.parametrize(
        "name, language",
        [
            ("a.js", "javascript"),
            ("a.mjs", "javascript"),
            ("a.cjs", "javascript"),
            ("a.jsx", "javascript"),
            ("a.ts", "typescript"),
            ("a.mts", "typescript"),
            ("a.tsx", "tsx"),
            ("A.JS", "javascript"),
        ],
    )
    def test_known_extensions(self, name, language):
        assert detect_language(Path(name)) == language

    @pytest.mark.parametrize("name", ["a.py", "Makefile", "a.json"])
    def test_unknown_extensions(self, name):
        assert detect_language(Path(name)) is None


class TestTreeSitterParser:
    def test_supported_languages(self):
        assert set(get_supported_languages()) == {"javascript", "typescript", "tsx"}

    def test_parse_returns_tree(self):
        parser = TreeSitterParser()
        tree = parser.parse(b"function foo() {}", "javascript")
        assert tree.root_node.type == "program"
        assert not tree.root_node.has_error

    def test_parser_is_cached(self):
        parser = TreeSitterParser()
        parser.parse(b"x;", "javascript")
        first = parser._parsers["javascript"]
        parser.parse(b"y;", "javascript")
        assert parser._parsers["javascript"] is first

    def test_unknown_language(self):
        parser = TreeSitterParser()
        assert not parser.is_language_supported("python")
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            parser.parse(b"x", "python")
        assert "javascript" in exc_info.value.supported_languages


class TestFirstErrorLine:
    def test_clean_tree(self, ts_parser):
        tree = ts_parser.parse(b"function f() {}\n", "javascript")
        assert first_error_line(tree) is None

    def test_reports_error_line(self, ts_parser):
        tree = ts_parser.parse(b"var a = 1;\nvar b = 2;\nvar = ;\n", "javascript")
        assert first_error_line(tree) == 3
