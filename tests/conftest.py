"""
Module: conftest.py

Author: Michael Economou
Date: 2026-09-12

Global pytest configuration and fixtures for the fskit test suite.
"""

import os
import platform

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "posix_only: mark test as requiring a POSIX platform")
    config.addinivalue_line("markers", "windows_only: mark test as requiring Windows")


def pytest_collection_modifyitems(session, config, items):
    """Skip platform-specific tests on other platforms."""
    _ = session
    _ = config

    is_windows = platform.system() == "Windows"
    skip_posix = pytest.mark.skip(reason="POSIX-only test")
    skip_windows = pytest.mark.skip(reason="Windows-only test")

    for item in items:
        if "posix_only" in item.keywords and is_windows:
            item.add_marker(skip_posix)
        if "windows_only" in item.keywords and not is_windows:
            item.add_marker(skip_windows)


@pytest.fixture
def workspace(tmp_path):
    """Temporary directory as a plain string path, like fskit callers pass."""
    return str(tmp_path)


@pytest.fixture
def restore_cwd():
    """Restore the process working directory after the test."""
    original = os.getcwd()
    yield original
    os.chdir(original)


@pytest.fixture
def sample_tree(tmp_path):
    """Small directory tree used by listing and delete tests.

    Layout:
        a.txt
        b.log
        docs/
            readme.md
            api/
                index.html
        empty/
    """
    (tmp_path / "a.txt").write_text("alpha", encoding="utf-8")
    (tmp_path / "b.log").write_text("bravo", encoding="utf-8")
    (tmp_path / "docs" / "api").mkdir(parents=True)
    (tmp_path / "docs" / "readme.md").write_text("# docs", encoding="utf-8")
    (tmp_path / "docs" / "api" / "index.html").write_text("<html/>", encoding="utf-8")
    (tmp_path / "empty").mkdir()
    return str(tmp_path)
