# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from filescout.features.unique_files.domain.models import FindUniqueFilesConfig


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps finder logs visible at DEBUG when pytest captures them.
    """
    logging.getLogger("filescout").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def collected():
    """
    List that a found-file callback appends every result record to.
    """
    return []


@pytest.fixture
def make_config(collected):
    """
    Builds a config that accepts every file and records results into `collected`.
    Any field can be overridden by keyword.
    """
    def _make(root, **overrides):
        fields = {
            "target_dir_path": root,
            "include_file_fn": lambda path: True,
            "found_file_fn": collected.append,
        }
        fields.update(overrides)
        return FindUniqueFilesConfig(**fields)

    return _make


@pytest.fixture
def nested_tree(tmp_path):
    """
    Creates:
    root/
      a.txt           "hello"
      b.txt           "hello"
      empty.txt       ""
      sub/c.txt       "hello"
      sub/deep/d.txt  "world"
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b.txt").write_text("hello")
    (root / "empty.txt").write_bytes(b"")

    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("hello")

    deep = sub / "deep"
    deep.mkdir()
    (deep / "d.txt").write_text("world")

    return root
