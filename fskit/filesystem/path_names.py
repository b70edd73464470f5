"""Module: path_names.py

Author: Michael Economou
Date: 2026-09-05

path_names.py
Path decomposition and construction: directory part, file name, stem,
extension(s), root, relative and absolute forms.

These are pure string functions. Both "/" and "\\" act as separators on every
platform, so "C:\\data\\scan.ply" and "C:/data/scan.ply" decompose the same way.
Empty input yields an empty result, and a name without a dot has no extension.
A leading dot counts as an extension dot (".bashrc" has extension "bashrc").

Examples:
    >>> dir_name("/a/b/c.Ext")
    '/a/b'
    >>> extension("/a/b/c.Ext")
    'ext'
    >>> stripped_name("c:/file.ext1.ext2")
    'file.ext1'
"""

import os

from fskit.config import PATH_SEPARATORS, UNIX_SEPARATOR
from fskit.filesystem.path_style import convert_to_unix_style


def _last_separator(path: str) -> int:
    """Index of the last separator in path, -1 if there is none."""
    return max(path.rfind(separator) for separator in PATH_SEPARATORS)


def _extension_dot(path: str) -> int:
    """Index of the dot starting the last extension, -1 if there is none."""
    dot = path.rfind(".")
    if dot < _last_separator(path):
        return -1
    return dot


def _segments(path: str) -> list[str]:
    """Split path into its named segments, dropping empty and '.' ones."""
    return [seg for seg in convert_to_unix_style(path).split(UNIX_SEPARATOR) if seg not in ("", ".")]


def parent_directory(path: str | os.PathLike) -> str:
    """Gets the directory containing path, ignoring trailing separators (Ex: /a/b/ => /a)."""
    path = os.fspath(path)
    stripped = path.rstrip(PATH_SEPARATORS)
    if not stripped:
        return ""
    return dir_name(stripped)


def dir_name(file_name: str | os.PathLike) -> str:
    """Gets the parent path from full name (Ex: /a/b/c.Ext => /a/b).

    Returns an empty string when there is no directory part, and the root
    separator itself for entries directly under the root (/a => /).
    """
    file_name = os.fspath(file_name)
    slash = _last_separator(file_name)
    if slash < 0:
        return ""
    if slash == 0:
        return file_name[0]
    return file_name[:slash]


def extension(file_name: str | os.PathLike, lower_case: bool = True) -> str:
    """Gets the extension without dot (Ex: /a/b/c.Ext => ext, or Ext with lower_case=False)."""
    file_name = os.fspath(file_name)
    dot = _extension_dot(file_name)
    if dot < 0:
        return ""
    result = file_name[dot + 1 :]
    return result.lower() if lower_case else result


def simple_name(file_name: str | os.PathLike) -> str:
    """Gets file name without path but with extension (Ex: /a/b/c.Ext => c.Ext)."""
    file_name = os.fspath(file_name)
    return file_name[_last_separator(file_name) + 1 :]


def stripped_name(file_name: str | os.PathLike) -> str:
    """Gets file name without path and last extension.

    Ex: c:/file.ext1.ext2 => file.ext1; /a/b/c.Ext => c
    """
    return name_less_extension(simple_name(file_name))


def name_less_extension(file_name: str | os.PathLike) -> str:
    """Gets file path without last extension (Ex: /a/b/c.Ext => /a/b/c ; file.ext1.ext2 => file.ext1)."""
    file_name = os.fspath(file_name)
    dot = _extension_dot(file_name)
    if dot < 0:
        return file_name
    return file_name[:dot]


def name_less_all_extensions(file_name: str | os.PathLike) -> str:
    """Gets file path without all extensions (Ex: /a/b/c.Ext => /a/b/c ; file.ext1.ext2 => file)."""
    file_name = os.fspath(file_name)
    dot = file_name.find(".", _last_separator(file_name) + 1)
    if dot < 0:
        return file_name
    return file_name[:dot]


def replace_extension(file_name: str | os.PathLike, ext: str) -> str:
    """Replaces extension of the given file with 'ext'.

    If the file name does not have an extension, the given extension is
    appended. A leading dot on 'ext' is optional.

    Args:
        file_name: Path whose last extension is replaced
        ext: New extension, e.g. "md" or ".md"

    Returns:
        str: The new path, or "" for an empty file name

    """
    file_name = os.fspath(file_name)
    if not file_name:
        return ""
    return f"{name_less_extension(file_name)}.{ext.lstrip('.')}"


def path_root(path: str | os.PathLike) -> str:
    """Gets root part of a path ("/", "\\" or a drive like "C:"), or an empty string if none found."""
    path = os.fspath(path)
    if not path:
        return ""
    if path[0] in PATH_SEPARATORS:
        return path[0]
    if len(path) >= 2 and path[1] == ":" and path[0].isalpha():
        return path[:2]
    return ""


def is_absolute_path(path: str | os.PathLike) -> bool:
    """Tests if path is absolute, i.e. it has a root."""
    return path_root(path) != ""


def relative_path(from_path: str | os.PathLike, to_path: str | os.PathLike) -> str:
    """Gets the path of 'to_path' relative to the directory 'from_path'.

    If 'to_path' lies in (a subdirectory of) 'from_path' the subpath is
    returned. Otherwise, including when the two paths have different roots
    (e.g. different drives, or one absolute and one relative), only the file
    name of 'to_path' is returned.

    Nothing is resolved against the filesystem, so pass canonical paths.
    Slashes and backslashes are treated as equal, and the result always uses
    forward slashes.

    Args:
        from_path: Reference directory
        to_path: Target path

    Returns:
        str: The relative path, "" when both name the same location

    Example:
        >>> relative_path("/a/b", "/a/b/c/d.txt")
        'c/d.txt'
        >>> relative_path("/a/b", "/a/x/y.txt")
        'y.txt'

    """
    from_path = os.fspath(from_path)
    to_path = os.fspath(to_path)

    from_root = path_root(from_path)
    to_root = path_root(to_path)
    if convert_to_unix_style(from_root).lower() != convert_to_unix_style(to_root).lower():
        return simple_name(to_path)

    from_parts = _segments(from_path[len(from_root) :])
    to_parts = _segments(to_path[len(to_root) :])

    common = 0
    for from_seg, to_seg in zip(from_parts, to_parts):
        if from_seg != to_seg:
            break
        common += 1

    if common < len(from_parts):
        return simple_name(to_path)

    return UNIX_SEPARATOR.join(to_parts[common:])


def absolute_path(path: str | os.PathLike, cwd: str | os.PathLike | None = None) -> str:
    """Makes path absolute and removes '..' and '.' segments.

    Relative paths are joined onto 'cwd' (the process working directory when
    omitted). The '.' and '..' segments are then collapsed lexically, without
    asking the OS to canonicalize the path, so symbolic links are not
    followed. '..' segments that would climb above the root are dropped.
    The result uses forward slashes.

    Args:
        path: Path to make absolute
        cwd: Directory that relative paths are relative to

    Returns:
        str: The absolute path, or "" for an empty path

    """
    path = convert_to_unix_style(os.fspath(path))
    if not path:
        return ""

    if not is_absolute_path(path):
        base = convert_to_unix_style(os.getcwd() if cwd is None else os.fspath(cwd))
        path = f"{base.rstrip(UNIX_SEPARATOR)}{UNIX_SEPARATOR}{path}" if base else path

    root = path_root(path)
    parts: list[str] = []
    for seg in _segments(path[len(root) :]):
        if seg == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not root:
                parts.append(seg)
            continue
        parts.append(seg)

    if root == UNIX_SEPARATOR:
        return UNIX_SEPARATOR + UNIX_SEPARATOR.join(parts)
    if root:
        return f"{root}{UNIX_SEPARATOR}{UNIX_SEPARATOR.join(parts)}"
    return UNIX_SEPARATOR.join(parts)
