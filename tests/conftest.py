"""Shared test fixtures for js-complexity."""

from pathlib import Path

import pytest

from js_complexity.analysis import analyze_source
from js_complexity.scanning import TreeSitterParser


@pytest.fixture(scope="session")
def ts_parser():
    """One parser for the whole session; grammars are cached inside it."""
    return TreeSitterParser()


@pytest.fixture
def parse(ts_parser):
    """Parse source text and return the root node."""

    def _parse(source: str, language: str = "javascript"):
        return ts_parser.parse(source.encode("utf-8"), language).root_node

    return _parse


@pytest.fixture
def analyze():
    """Analyse source text labelled as a JavaScript file."""

    def _analyze(source: str, path: str = "sample.js", **kwargs):
        return analyze_source(source, path, **kwargs)

    return _analyze


@pytest.fixture
def write_source(tmp_path):
    """Write a source file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and JSCX_* variables out of a test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in ("TOLERANT", "IMPORT_CALLEE", "MAX_FILE_SIZE_MB", "OUTPUT_FORMAT", "FAIL_ABOVE", "VERBOSITY"):
        monkeypatch.delenv(f"JSCX_{key}", raising=False)
    return tmp_path


@pytest.fixture
def find_node():
    """Depth-first search for the first node of a grammar type."""

    def _find(node, node_type: str):
        if node.type == node_type:
            return node
        for child in node.children:
            found = _find(child, node_type)
            if found is not None:
                return found
        return None

    return _find
