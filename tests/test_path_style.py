"""
Module: test_path_style.py

Author: Michael Economou
Date: 2026-09-12

Tests for separator conversion and path comparison.
"""

import platform

import pytest

from fskit.filesystem.path_style import (
    convert_to_native_style,
    convert_to_unix_style,
    convert_to_windows_style,
    is_native_style,
    native_path_separator,
    paths_equal,
)


class TestConversion:
    """Test Windows/Unix separator conversion."""

    def test_to_windows(self):
        assert convert_to_windows_style("a/b/c.txt") == "a\\b\\c.txt"

    def test_to_unix(self):
        assert convert_to_unix_style("C:\\a\\b") == "C:/a/b"

    def test_mixed(self):
        assert convert_to_unix_style("a\\b/c") == "a/b/c"
        assert convert_to_windows_style("a\\b/c") == "a\\b\\c"

    @pytest.mark.parametrize("path", ["a/b/c", "/abc/def1/x2", "a\\b\\c", "", "abc"])
    def test_round_trip_is_idempotent(self, path):
        once = convert_to_unix_style(convert_to_windows_style(path))
        assert convert_to_unix_style(convert_to_windows_style(once)) == once
        assert once == convert_to_unix_style(path)


class TestNativeStyle:
    """Test native separator handling on each platform."""

    def test_linux(self, monkeypatch):
        monkeypatch.setattr(platform, "system", lambda: "Linux")
        assert native_path_separator() == "/"
        assert is_native_style("/a/b")
        assert not is_native_style("a\\b")
        assert convert_to_native_style("a\\b/c") == "a/b/c"

    def test_macos(self, monkeypatch):
        monkeypatch.setattr(platform, "system", lambda: "Darwin")
        assert native_path_separator() == "/"

    def test_windows(self, monkeypatch):
        monkeypatch.setattr(platform, "system", lambda: "Windows")
        assert native_path_separator() == "\\"
        assert is_native_style("C:\\a\\b")
        assert not is_native_style("C:/a")
        assert convert_to_native_style("C:/a\\b") == "C:\\a\\b"

    def test_path_without_separators_is_native(self):
        assert is_native_style("file.txt")
        assert is_native_style("")


class TestPathsEqual:
    """Test separator-insensitive path comparison."""

    def test_mixed_separators(self):
        assert paths_equal("C:/folder\\sub/f.txt", "C:\\folder/sub/f.txt")
        assert paths_equal("/home/user/file.txt", "/home/user\\file.txt")

    def test_drive_paths_ignore_case(self):
        assert paths_equal("C:/Folder/File.txt", "c:\\folder\\file.txt")

    def test_posix_paths_keep_case(self):
        assert not paths_equal("/Home/a", "/home/a")

    def test_trailing_and_duplicate_separators(self):
        assert paths_equal("/a/b/", "/a/b")
        assert paths_equal("/a//b", "/a/b")
        assert paths_equal("/", "//")

    def test_empty(self):
        assert paths_equal("", "")
        assert not paths_equal("", "/a")
