"""Shared test fixtures for the todo list tests."""

import sys
from pathlib import Path

import pytest

# Ensure the repository root is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from todolist.store import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def abc_store():
    """Store holding A, B, C with ids 1, 2, 3."""
    s = TodoStore()
    for task in ("A", "B", "C"):
        s.add(task)
    return s
