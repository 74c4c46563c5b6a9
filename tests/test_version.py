"""Tests for package version lookup."""

from __future__ import annotations

import importlib.metadata

import todolist


def test_version_is_a_string() -> None:
    """__version__ should always be a non-empty string."""
    assert isinstance(todolist.__version__, str)
    assert todolist.__version__


def test_checkout_version_read_from_pyproject(tmp_path, monkeypatch) -> None:
    """A pyproject.toml next to the sources should provide the version."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "todolist"\nversion = "1.2.3"\n', encoding="utf-8")
    monkeypatch.setattr(todolist, "PYPROJECT", pyproject)
    assert todolist._get_version() == "1.2.3"


def test_broken_pyproject_is_ignored(tmp_path, monkeypatch) -> None:
    """An unparsable pyproject.toml should fall through to installed metadata."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[project\n", encoding="utf-8")
    monkeypatch.setattr(todolist, "PYPROJECT", pyproject)
    monkeypatch.setattr(importlib.metadata, "version", lambda name: "9.9.9")
    assert todolist._checkout_version() is None
    assert todolist._get_version() == "9.9.9"


def test_version_falls_back_to_metadata(tmp_path, monkeypatch) -> None:
    """Without a pyproject.toml the installed distribution version is used."""
    monkeypatch.setattr(todolist, "PYPROJECT", tmp_path / "missing.toml")
    monkeypatch.setattr(importlib.metadata, "version", lambda name: "9.9.9")
    assert todolist._get_version() == "9.9.9"


def test_version_unknown_when_not_installed(tmp_path, monkeypatch) -> None:
    """With neither source nor metadata the version is a placeholder."""

    def missing(name: str) -> str:
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(todolist, "PYPROJECT", tmp_path / "missing.toml")
    monkeypatch.setattr(importlib.metadata, "version", missing)
    assert todolist._get_version() == "0.0.0-unknown"


def test_public_api() -> None:
    """The store and its result types should be importable from the package."""
    assert {"TaskListStore", "TaskList", "Outcome", "Failure"} <= set(todolist.__all__)
