"""Test configuration and fixtures for compact-path-tree."""

import os

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory structure.

    root/
        a.txt
        d/
            b.txt
            e/
                c.txt
        empty/
    """
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "b.txt").write_text("bb")
    (tmp_path / "d" / "e").mkdir()
    (tmp_path / "d" / "e" / "c.txt").write_text("ccc")
    (tmp_path / "empty").mkdir()
    return tmp_path


@pytest.fixture
def symlink_tree(tmp_path):
    """Create a structure containing a symlink to a directory and a symlink loop."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main(): pass")
    try:
        os.symlink(tmp_path / "src", tmp_path / "build")
        os.symlink(tmp_path, tmp_path / "src" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    return tmp_path


