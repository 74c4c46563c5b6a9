"""Tests for task list formatting."""

from __future__ import annotations

import json

import pytest

from todolist.formatter import Formatter, FormatType, sanitize


def test_table_lists_both_sections() -> None:
    """The table shows a numbered section for each list."""
    output = Formatter(FormatType.TABLE).format(["Buy milk", "Call mom"], ["Pay rent"])
    lines = output.splitlines()

    assert lines[0] == "Pending (2)"
    assert "1    [ ]      Buy milk" in lines
    assert "2    [ ]      Call mom" in lines
    assert "Completed (1)" in lines
    assert "1    [x]      Pay rent" in lines


def test_table_marks_empty_sections() -> None:
    """Empty lists are shown as (empty)."""
    output = Formatter().format([], [])
    assert output.count("(empty)") == 2
    assert "Pending (0)" in output
    assert "Completed (0)" in output


def test_compact_format() -> None:
    """Compact output groups one line per task under each list."""
    output = Formatter(FormatType.COMPACT).format(["a", "b"], ["c"])
    assert output == "Pending:\n[1] a\n[2] b\nCompleted:\n[1] c"


def test_json_format() -> None:
    """JSON output has one key per list."""
    output = Formatter(FormatType.JSON).format(("a",), ())
    assert json.loads(output) == {"pending": ["a"], "completed": []}


def test_json_keeps_raw_text() -> None:
    """JSON output does not escape control characters itself."""
    output = Formatter(FormatType.JSON).format(["line\nbreak"], [])
    assert json.loads(output)["pending"] == ["line\nbreak"]


def test_format_type_from_string() -> None:
    """Formatter accepts the format as a string."""
    assert Formatter("compact").format_type is FormatType.COMPACT


def test_unknown_format_type() -> None:
    """An unknown format name raises ValueError."""
    with pytest.raises(ValueError):
        Formatter("xml")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("plain", "plain"),
        ("two\nlines", "two\\nlines"),
        ("tab\there", "tab\\there"),
        ("bell\x07", "bell\\x07"),
        ("esc\x1b[31m", "esc\\x1b[31m"),
    ],
)
def test_sanitize(raw, expected) -> None:
    """Control characters are escaped, everything else is kept."""
    assert sanitize(raw) == expected


def test_table_escapes_control_characters() -> None:
    """A newline in a task cannot break the table layout."""
    output = Formatter().format(["evil\nrow"], [])
    assert "evil\\nrow" in output
    assert "evil\nrow" not in output
