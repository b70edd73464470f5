"""Module: environment.py

Author: Michael Economou
Date: 2026-09-10

environment.py
Process and file metadata accessors: working directory, home directory,
running executable, modification time and file size.

Nothing is cached, each call queries the OS again. Missing paths give
neutral values (0 or an empty string) rather than errors.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import psutil

from fskit.config import TIME_STRING_FORMAT
from fskit.filesystem.path_names import dir_name
from fskit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def current_working_directory() -> str:
    """Gets the working directory of the process ("" if it no longer exists)."""
    try:
        return os.getcwd()
    except OSError as e:
        logger.warning("[Environment] Cannot read working directory: %s", e)
        return ""


def set_current_working_directory(path: str | os.PathLike) -> bool:
    """Changes the working directory of the process.

    Returns:
        True if the working directory is now 'path'.

    """
    try:
        os.chdir(path)
    except OSError as e:
        logger.warning("[Environment] Cannot change working directory to %s: %s", path, e)
        return False
    return True


def home_directory() -> str:
    """Determines the home path for the current user."""
    try:
        return str(Path.home())
    except RuntimeError as e:
        logger.warning("[Environment] Cannot determine home directory: %s", e)
        return ""


def executable() -> str:
    """Gets the executable file of the running process, e.g. C:/a/b/c.exe.

    PyInstaller Support:
    When frozen, sys.executable is the bundled executable itself. Otherwise the
    OS is asked through psutil, which falls back to sys.executable when access
    is denied.
    """
    if getattr(sys, "frozen", False):
        return sys.executable

    try:
        exe = psutil.Process().exe()
    except psutil.Error as e:
        logger.debug("[Environment] psutil cannot resolve executable: %s", e)
        exe = ""

    return exe or sys.executable


def executable_directory() -> str:
    """Gets the directory where the executable file is located."""
    return dir_name(executable())


def time_stamp(file_or_dir: str | os.PathLike) -> int:
    """Gets the last modification time in whole seconds since the epoch (0 if missing)."""
    try:
        return int(os.path.getmtime(file_or_dir))
    except OSError as e:
        logger.debug("[Environment] No time stamp for %s: %s", file_or_dir, e)
        return 0


def time_string(file_or_dir: str | os.PathLike) -> str:
    """Gets the last modification time as local time text, e.g. 'Mon Oct 19 14:03:55 2026'.

    Returns an empty string if 'file_or_dir' doesn't exist.
    """
    try:
        mtime = os.path.getmtime(file_or_dir)
    except OSError as e:
        logger.debug("[Environment] No time string for %s: %s", file_or_dir, e)
        return ""
    return datetime.fromtimestamp(mtime).strftime(TIME_STRING_FORMAT)


def file_size(filename: str | os.PathLike) -> int:
    """Gets the size of a file in bytes (0 if missing or not a file)."""
    if not os.path.isfile(filename):
        return 0

    try:
        return os.path.getsize(filename)
    except OSError as e:
        logger.debug("[Environment] No size for %s: %s", filename, e)
        return 0
