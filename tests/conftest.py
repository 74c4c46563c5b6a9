"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

from todolist.store import TaskListStore


@pytest.fixture
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
