"""Reading source files from disk."""

import logging
from pathlib import Path

from ..exceptions import FileAccessError

logger = logging.getLogger(__name__)


def read_source(path: Path, max_bytes: int) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        FileAccessError: If the file is missing, not a regular file, larger
            than max_bytes, unreadable, or not valid UTF-8
    """
    path = Path(path)
    if not path.exists():
        raise FileAccessError(path, "file does not exist")
    if not path.is_file():
        raise FileAccessError(path, "not a regular file")

    try:
        size = path.stat().st_size
        if size > max_bytes:
            raise FileAccessError(path, f"file is {size} bytes, limit is {max_bytes}")
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"not valid UTF-8: {e.reason}")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e))

    logger.debug(f"Read {path} ({size} bytes)")
    return content
