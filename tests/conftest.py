"""Pytest configuration and fixtures."""

import pytest

from jobtree.dsl import directory, file, multiple
from jobtree.ui import console as console_module


@pytest.fixture(autouse=True)
def reset_console(monkeypatch):
    """Every test starts without a process-wide console."""
    monkeypatch.setattr(console_module, "_console", None)


@pytest.fixture
def sample_tree():
    """root/ file1.txt (10), subdir/ file2.txt (20), file3.log (5)."""
    return directory(
        "root",
        file("file1.txt", 10),
        directory("subdir", file("file2.txt", 20), file("file3.log", 5)),
    )


@pytest.fixture
def nested_jobs():
    """Outer composite: inner composite (100, 101) followed by leaf 200."""
    return multiple(multiple(100, 101), 200)
