"""Module: path_style.py

Author: Michael Economou
Date: 2026-09-05

path_style.py
Conversion between Windows-style (backslash) and Unix-style (forward slash)
path separators, and detection of the separator native to the running
platform. Pure string functions: nothing here touches the filesystem.
"""

import os
import platform

from fskit.config import UNIX_SEPARATOR, WINDOWS_SEPARATOR


def convert_to_windows_style(path: str | os.PathLike) -> str:
    """Converts forward slashes (/) to back slashes (\\)."""
    return os.fspath(path).replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def convert_to_unix_style(path: str | os.PathLike) -> str:
    """Converts back slashes (\\) to forward slashes (/)."""
    return os.fspath(path).replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


def native_path_separator() -> str:
    """Get the path separator for the current platform."""
    if platform.system() == "Windows":
        return WINDOWS_SEPARATOR
    return UNIX_SEPARATOR


def is_native_style(path: str | os.PathLike) -> bool:
    """Check if the path contains only the current platform's path separators."""
    foreign = UNIX_SEPARATOR if native_path_separator() == WINDOWS_SEPARATOR else WINDOWS_SEPARATOR
    return foreign not in os.fspath(path)


def convert_to_native_style(path: str | os.PathLike) -> str:
    """Convert the path to contain only the current platform's path separators."""
    if native_path_separator() == WINDOWS_SEPARATOR:
        return convert_to_windows_style(path)
    return convert_to_unix_style(path)


def paths_equal(path1: str | os.PathLike, path2: str | os.PathLike) -> bool:
    """Compare two paths for equality regardless of separator style.

    Duplicate and trailing separators are ignored. Paths carrying a drive
    letter are compared case-insensitively, so Windows paths compare
    correctly even on Linux.

    Args:
        path1: First path to compare
        path2: Second path to compare

    Returns:
        bool: True if the normalized paths are equal, False otherwise

    Example:
        >>> paths_equal("C:/folder\\\\file.txt", "c:\\\\folder/file.txt")
        True
        >>> paths_equal("/home/user/file.txt", "/home/user\\\\file.txt")
        True

    """
    norm1 = _normalize_separators(os.fspath(path1))
    norm2 = _normalize_separators(os.fspath(path2))

    if not norm1 or not norm2:
        return norm1 == norm2

    if ":" in norm1 or ":" in norm2:  # Likely Windows paths
        return norm1.lower() == norm2.lower()
    return norm1 == norm2


def _normalize_separators(path: str) -> str:
    normalized = convert_to_unix_style(path)
    while "//" in normalized:
        normalized = normalized.replace("//", "/")

    # Keep a bare root intact
    if len(normalized) > 1 and normalized.endswith("/"):
        normalized = normalized.rstrip("/") or "/"
    return normalized
