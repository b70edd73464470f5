"""Filesystem utilities package.

A flat namespace of stateless functions over path strings and the real
filesystem: existence checks, create/delete, directory listing, path
decomposition, separator conversion and small metadata/content helpers.

Usage:
    from fskit import file_system

    if file_system.is_file(name):
        size = file_system.file_size(name)
"""

from fskit.filesystem.content import (
    file_contains_string,
    read_file_to_string,
    write_string_to_file,
)
from fskit.filesystem.entries import (
    copy_file,
    create_directory,
    create_file,
    delete_contents,
    delete_directory,
    delete_file,
    is_directory,
    is_file,
    rename_file,
)
from fskit.filesystem.environment import (
    current_working_directory,
    executable,
    executable_directory,
    file_size,
    home_directory,
    set_current_working_directory,
    time_stamp,
    time_string,
)
from fskit.filesystem.listing import get_directory_entries, get_files, get_sub_directories
from fskit.filesystem.path_names import (
    absolute_path,
    dir_name,
    extension,
    is_absolute_path,
    name_less_all_extensions,
    name_less_extension,
    parent_directory,
    path_root,
    relative_path,
    replace_extension,
    simple_name,
    stripped_name,
)
from fskit.filesystem.path_style import (
    convert_to_native_style,
    convert_to_unix_style,
    convert_to_windows_style,
    is_native_style,
    native_path_separator,
    paths_equal,
)

__all__ = [
    # entries
    "is_file",
    "is_directory",
    "create_file",
    "create_directory",
    "delete_file",
    "delete_directory",
    "delete_contents",
    "rename_file",
    "copy_file",
    # listing
    "get_directory_entries",
    "get_files",
    "get_sub_directories",
    # path names
    "parent_directory",
    "dir_name",
    "extension",
    "simple_name",
    "stripped_name",
    "name_less_extension",
    "name_less_all_extensions",
    "replace_extension",
    "path_root",
    "is_absolute_path",
    "relative_path",
    "absolute_path",
    # path style
    "convert_to_windows_style",
    "convert_to_unix_style",
    "native_path_separator",
    "is_native_style",
    "convert_to_native_style",
    "paths_equal",
    # environment
    "current_working_directory",
    "set_current_working_directory",
    "home_directory",
    "executable",
    "executable_directory",
    "time_stamp",
    "time_string",
    "file_size",
    # content
    "file_contains_string",
    "read_file_to_string",
    "write_string_to_file",
]
