"""
Module: test_environment.py

Author: Michael Economou
Date: 2026-09-15

Tests for process and file metadata accessors.
"""

import os
import sys
import time
from datetime import datetime
from unittest.mock import patch

import psutil

from fskit.config import TIME_STRING_FORMAT
from fskit.filesystem import environment
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


class TestWorkingDirectory:
    """Test reading and changing the working directory."""

    def test_current_matches_os(self, restore_cwd):
        assert current_working_directory() == restore_cwd

    def test_set_and_read_back(self, workspace, restore_cwd):
        assert set_current_working_directory(workspace)
        assert os.path.samefile(current_working_directory(), workspace)

    def test_set_missing_directory_fails(self, workspace, restore_cwd):
        assert not set_current_working_directory(os.path.join(workspace, "missing"))
        assert current_working_directory() == restore_cwd

    def test_unreadable_working_directory(self):
        with patch.object(environment.os, "getcwd", side_effect=FileNotFoundError("gone")):
            assert current_working_directory() == ""


class TestHomeDirectory:
    """Test home directory lookup."""

    def test_home(self, workspace, monkeypatch):
        monkeypatch.setenv("HOME", workspace)
        monkeypatch.setenv("USERPROFILE", workspace)
        assert home_directory() == workspace

    def test_undeterminable_home(self):
        with patch.object(environment.Path, "home", side_effect=RuntimeError("no home")):
            assert home_directory() == ""


class TestExecutable:
    """Test executable discovery."""

    def test_uses_psutil(self):
        with patch.object(environment.psutil, "Process") as process:
            process.return_value.exe.return_value = "/opt/tool/bin/tool"
            assert executable() == "/opt/tool/bin/tool"
            assert executable_directory() == "/opt/tool/bin"

    def test_access_denied_falls_back(self):
        with patch.object(environment.psutil, "Process") as process:
            process.return_value.exe.side_effect = psutil.AccessDenied()
            assert executable() == sys.executable

    def test_empty_answer_falls_back(self):
        with patch.object(environment.psutil, "Process") as process:
            process.return_value.exe.return_value = ""
            assert executable() == sys.executable

    def test_frozen_bundle(self, monkeypatch):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", "/bundle/app")
        with patch.object(environment.psutil, "Process") as process:
            assert executable() == "/bundle/app"
            process.assert_not_called()

    def test_real_process(self):
        exe = executable()
        assert exe
        assert os.path.exists(exe)


class TestFileMetadata:
    """Test time stamps and sizes."""

    def test_time_stamp(self, sample_tree):
        path = os.path.join(sample_tree, "a.txt")
        os.utime(path, (1_700_000_000, 1_700_000_000))
        assert time_stamp(path) == 1_700_000_000

    def test_time_stamp_missing(self, workspace):
        assert time_stamp(os.path.join(workspace, "missing")) == 0

    def test_time_stamp_is_recent_for_new_file(self, sample_tree):
        assert abs(time_stamp(os.path.join(sample_tree, "a.txt")) - time.time()) < 60

    def test_time_string(self, sample_tree):
        path = os.path.join(sample_tree, "docs")
        os.utime(path, (1_700_000_000, 1_700_000_000))
        expected = datetime.fromtimestamp(1_700_000_000).strftime(TIME_STRING_FORMAT)
        assert time_string(path) == expected

    def test_time_string_zero_pads_the_day(self, sample_tree):
        path = os.path.join(sample_tree, "a.txt")
        mtime = datetime(2026, 10, 9, 12, 0, 0).timestamp()
        os.utime(path, (mtime, mtime))
        assert time_string(path) == "Fri Oct 09 12:00:00 2026"

    def test_time_string_missing(self, workspace):
        assert time_string(os.path.join(workspace, "missing")) == ""

    def test_file_size(self, sample_tree):
        assert file_size(os.path.join(sample_tree, "a.txt")) == 5

    def test_file_size_of_directory_or_missing(self, sample_tree):
        assert file_size(os.path.join(sample_tree, "docs")) == 0
        assert file_size(os.path.join(sample_tree, "missing")) == 0
        assert file_size("") == 0
