"""In-memory to-do list: pending and completed tasks."""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import tomli

from todolist.store import TaskListStore
from todolist.task import Change, Failure, Outcome, OutcomeStatus, TaskList

__all__ = [
    "Change",
    "Failure",
    "Outcome",
    "OutcomeStatus",
    "TaskList",
    "TaskListStore",
    "__version__",
]

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    """Version declared in pyproject.toml when running from a source tree."""
    if not PYPROJECT.is_file():
        return None
    try:
        with PYPROJECT.open("rb") as f:
            return tomli.load(f)["project"]["version"]
    except (OSError, KeyError, tomli.TOMLDecodeError):
        return None


def _get_version() -> str:
    version = _checkout_version()
    if version:
        return version
    try:
        return importlib.metadata.version("todolist")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-unknown"


__version__ = _get_version()
