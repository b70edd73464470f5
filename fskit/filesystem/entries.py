"""Module: entries.py

Author: Michael Economou
Date: 2026-09-08

entries.py
Existence checks and create/delete/rename/copy primitives for files and
directories.

Every mutating function returns a plain success flag. Failure causes
(permission denied, missing path, target exists) are logged and collapse to
False; nothing is raised for OS errors. There is no rollback: a recursive
delete that fails partway leaves whatever the OS already removed.

Read-only entries:
    delete_directory and delete_contents clear the read-only flag of an entry
    the OS refuses to remove, together with the read-only flag of its parent
    directory inside the tree, and retry once. Entries that are still held
    open (Windows), or whose removal the OS refuses for other reasons, stay in
    place and the call returns False.
"""

import os
import shutil
import stat
from functools import partial

from fskit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_file(name: str | os.PathLike) -> bool:
    """Tests if 'name' is an existing file."""
    return os.path.isfile(name)


def is_directory(name: str | os.PathLike) -> bool:
    """Tests if 'name' is an existing directory."""
    return os.path.isdir(name)


def create_file(name: str | os.PathLike) -> bool:
    """Creates an empty file entitled 'name'.

    Missing parent directories are not created.

    Args:
        name: The full path of the file to be created.

    Returns:
        True if the file has been successfully created or already exists.

    """
    if os.path.isfile(name):
        return True

    try:
        with open(name, "xb"):
            pass
    except FileExistsError:
        # Lost a race, or 'name' is a directory
        return os.path.isfile(name)
    except OSError as e:
        logger.warning("[FileSystem] Could not create file %s: %s", name, e)
        return False

    logger.debug("[FileSystem] Created file %s", name, extra={"dev_only": True})
    return True


def create_directory(name: str | os.PathLike) -> bool:
    """Creates a directory entitled 'name', including missing parents.

    Args:
        name: The full path of the directory to be created.

    Returns:
        True if the directory has been successfully created or already exists.

    """
    if os.path.isdir(name):
        return True

    try:
        os.makedirs(name, exist_ok=True)
    except OSError as e:
        logger.warning("[FileSystem] Could not create directory %s: %s", name, e)
        return False

    logger.debug("[FileSystem] Created directory %s", name, extra={"dev_only": True})
    return True


def delete_file(name: str | os.PathLike) -> bool:
    """Deletes the file 'name'.

    Args:
        name: The full path of a file.

    Returns:
        True if the file has been successfully deleted or doesn't exist.
        False if 'name' is a directory.

    """
    if not os.path.lexists(name):
        return True

    if os.path.isdir(name) and not os.path.islink(name):
        logger.warning("[FileSystem] Not deleting %s: it is a directory", name)
        return False

    try:
        os.remove(name)
    except OSError as e:
        logger.warning("[FileSystem] Could not delete file %s: %s", name, e)
        return False

    logger.debug("[FileSystem] Deleted file %s", name, extra={"dev_only": True})
    return True


def _within(path: str, top: str) -> bool:
    top = os.path.normpath(top)
    return os.path.commonpath([top, os.path.normpath(path)]) == top


def _clear_readonly_and_retry(func, path, exc, top=None):
    """shutil.rmtree error handler: make 'path' writable and retry 'func' once.

    Removing an entry needs write access to its directory, so a parent without
    the owner write bit gets it too. With 'top' set, only parents inside the
    tree being removed are changed.
    """
    if func not in (os.remove, os.unlink, os.rmdir) or not os.path.lexists(path):
        raise exc

    parent = os.path.dirname(path)
    if parent and (top is None or _within(parent, top)):
        mode = os.stat(parent).st_mode
        if not mode & stat.S_IWRITE:
            os.chmod(parent, mode | stat.S_IWRITE)

    os.chmod(path, stat.S_IWRITE | stat.S_IREAD | stat.S_IEXEC)
    func(path)


def _remove_tree(name: str | os.PathLike) -> bool:
    try:
        shutil.rmtree(name, onexc=partial(_clear_readonly_and_retry, top=os.fspath(name)))
    except OSError as e:
        logger.warning("[FileSystem] Could not delete directory %s: %s", name, e)
        return False
    return True


def delete_directory(name: str | os.PathLike) -> bool:
    """Deletes the directory 'name' and its contents, recursively.

    Args:
        name: The full path of a directory.

    Returns:
        True if the directory has been successfully deleted or doesn't exist.
        False if 'name' is a file.

    """
    if not os.path.lexists(name):
        return True

    if not os.path.isdir(name) or os.path.islink(name):
        logger.warning("[FileSystem] Not deleting %s: it is not a directory", name)
        return False

    if not _remove_tree(name):
        return False

    logger.debug("[FileSystem] Deleted directory %s", name, extra={"dev_only": True})
    return True


def delete_contents(path: str | os.PathLike) -> bool:
    """Deletes the contents of the directory 'path' (the directory itself is kept).

    A failing entry does not stop the others from being deleted.

    Args:
        path: The full path of a directory.

    Returns:
        True if the contents have been successfully deleted or the directory
        doesn't exist. False if any entry could not be deleted, or 'path' is
        not a directory.

    """
    if not os.path.lexists(path):
        return True

    if not os.path.isdir(path):
        logger.warning("[FileSystem] Not clearing %s: it is not a directory", path)
        return False

    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        logger.warning("[FileSystem] Could not list directory %s: %s", path, e)
        return False

    failed = 0
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            removed = _remove_tree(entry.path)
        else:
            removed = delete_file(entry.path)
        if not removed:
            failed += 1

    if failed:
        logger.warning(
            "[FileSystem] %d of %d entries in %s could not be deleted",
            failed,
            len(entries),
            path,
        )
        return False

    logger.debug(
        "[FileSystem] Deleted %d entries in %s", len(entries), path, extra={"dev_only": True}
    )
    return True


def rename_file(old_name: str | os.PathLike, new_name: str | os.PathLike) -> bool:
    """Renames (or moves) the file or directory 'old_name' to 'new_name'.

    Returns:
        True on success. False if 'old_name' doesn't exist or 'new_name'
        already exists.

    """
    if not os.path.lexists(old_name):
        logger.debug("[FileSystem] Cannot rename %s: it does not exist", old_name)
        return False

    if os.path.lexists(new_name):
        logger.warning("[FileSystem] Cannot rename %s: %s already exists", old_name, new_name)
        return False

    try:
        os.rename(old_name, new_name)
    except OSError as e:
        logger.warning("[FileSystem] Could not rename %s -> %s: %s", old_name, new_name, e)
        return False

    logger.debug("[FileSystem] Renamed %s -> %s", old_name, new_name, extra={"dev_only": True})
    return True


def copy_file(original: str | os.PathLike, copy: str | os.PathLike) -> bool:
    """Copies the contents and permission bits of file 'original' to 'copy'.

    An existing file at 'copy' is overwritten.

    Returns:
        True on success. False if 'original' is not a file or the copy failed.

    """
    if not os.path.isfile(original):
        logger.debug("[FileSystem] Cannot copy %s: not a file", original)
        return False

    try:
        shutil.copyfile(original, copy)
        shutil.copymode(original, copy)
    except OSError as e:
        logger.warning("[FileSystem] Could not copy %s -> %s: %s", original, copy, e)
        return False

    logger.debug("[FileSystem] Copied %s -> %s", original, copy, extra={"dev_only": True})
    return True
