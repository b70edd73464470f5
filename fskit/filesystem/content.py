"""Module: content.py

Author: Michael Economou
Date: 2026-09-10

content.py
Whole-file text helpers: read, search and write.

Files are read and written in one piece with no streaming, which suits
small text payloads only. Line endings are kept as they are on disk.
"""

import os

from fskit.config import TEXT_FILE_ENCODING
from fskit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _read_text(filename: str | os.PathLike) -> str | None:
    try:
        with open(filename, encoding=TEXT_FILE_ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("[Content] Could not read %s: %s", filename, e)
        return None


def file_contains_string(file_name: str | os.PathLike, x: str) -> bool:
    """Tests if the text of 'file_name' contains 'x' (False if it can't be read)."""
    text = _read_text(file_name)
    return text is not None and x in text


def read_file_to_string(filename: str | os.PathLike) -> str:
    """Reads the whole file as text ("" if it can't be read)."""
    text = _read_text(filename)
    return "" if text is None else text


def write_string_to_file(data: str, filename: str | os.PathLike) -> bool:
    """Writes 'data' to 'filename', replacing any previous contents.

    Missing parent directories are not created.

    Returns:
        True if the whole string was written.

    """
    try:
        with open(filename, "w", encoding=TEXT_FILE_ENCODING, newline="") as f:
            f.write(data)
    except OSError as e:
        logger.warning("[Content] Could not write %s: %s", filename, e)
        return False

    logger.debug(
        "[Content] Wrote %d characters to %s", len(data), filename, extra={"dev_only": True}
    )
    return True
