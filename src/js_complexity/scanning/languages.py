"""Grammar selection by file extension."""

from pathlib import Path
from typing import Optional

# Extension -> tree-sitter grammar name
LANGUAGE_EXTENSIONS: dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def detect_language(path: Path) -> Optional[str]:
    """Return the grammar name for a file, or None for unknown extensions."""
    return LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower())
