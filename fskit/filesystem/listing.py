"""Module: listing.py

Author: Michael Economou
Date: 2026-09-09

listing.py
Directory enumeration, optionally recursive.

Entries are sorted by name within each directory, and the children of a
subdirectory directly follow it. Missing or unreadable directories yield an
empty list. Recursion never descends into symbolic links to directories.

Prefix conventions differ per function:
- get_directory_entries: results do NOT contain the queried directory
- get_files, get_sub_directories: results DO contain the queried directory
"""

import os

from fskit.config import PATH_SEPARATORS, UNIX_SEPARATOR
from fskit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _scan(directory: str) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.debug("[Listing] Cannot read directory %s: %s", directory, e)
        return []


def _join(directory: str, name: str) -> str:
    if directory.endswith(tuple(PATH_SEPARATORS)):
        return directory + name
    return directory + UNIX_SEPARATOR + name


def _descends(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir() and not entry.is_symlink()
    except OSError:
        return False


def get_directory_entries(directory: str | os.PathLike, recursive: bool = False) -> list[str]:
    """List files and subdirectories of 'directory', relative to it.

    Args:
        directory: Directory to list
        recursive: Also list the contents of subdirectories ("sub/file.txt")

    Returns:
        list[str]: Entry paths without the 'directory' part

    """
    directory = os.fspath(directory)
    entries: list[str] = []
    for entry in _scan(directory):
        entries.append(entry.name)
        if recursive and _descends(entry):
            children = get_directory_entries(_join(directory, entry.name), recursive=True)
            entries.extend(entry.name + UNIX_SEPARATOR + child for child in children)
    return entries


def get_files(directory: str | os.PathLike, recursive: bool = False) -> list[str]:
    """List the files in 'directory'.

    Args:
        directory: Directory to list
        recursive: Also list files in subdirectories

    Returns:
        list[str]: File paths including the 'directory' part

    """
    directory = os.fspath(directory)
    files: list[str] = []
    for entry in _scan(directory):
        path = _join(directory, entry.name)
        if _descends(entry):
            if recursive:
                files.extend(get_files(path, recursive=True))
        elif entry.is_file():
            files.append(path)
    return files


def get_sub_directories(directory: str | os.PathLike, recursive: bool = False) -> list[str]:
    """List the subdirectories of 'directory'.

    Args:
        directory: Directory to list
        recursive: Also list nested subdirectories

    Returns:
        list[str]: Directory paths including the 'directory' part

    """
    directory = os.fspath(directory)
    subs: list[str] = []
    for entry in _scan(directory):
        if not entry.is_dir():
            continue
        path = _join(directory, entry.name)
        subs.append(path)
        if recursive and not entry.is_symlink():
            subs.extend(get_sub_directories(path, recursive=True))
    return subs
