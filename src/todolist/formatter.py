"""Output formatter for the pending and completed lists."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from todolist.task import TaskList

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_NAMED_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}

SECTION_TITLES = {TaskList.PENDING: "Pending", TaskList.COMPLETED: "Completed"}


class FormatType(str, Enum):
    """Output format types."""

    TABLE = "table"
    JSON = "json"
    COMPACT = "compact"


def sanitize(text: str) -> str:
    """Escape control characters so a task always renders on one line."""
    return _CONTROL_RE.sub(
        lambda m: _NAMED_ESCAPES.get(m.group(), f"\\x{ord(m.group()):02x}"), text
    )


class Formatter:
    """Format task lists for display.

    Rows are numbered from 1 within each list; the console shell selects
    tasks by these numbers.
    """

    def __init__(self, format_type: FormatType = FormatType.TABLE):
        self.format_type = FormatType(format_type)

    def format(self, pending: Sequence[str], completed: Sequence[str]) -> str:
        """Format both lists for display."""
        if self.format_type == FormatType.JSON:
            return self._format_json(pending, completed)
        elif self.format_type == FormatType.COMPACT:
            return self._format_compact(pending, completed)
        return self._format_table(pending, completed)

    def _format_table(self, pending: Sequence[str], completed: Sequence[str]) -> str:
        """Format as two tables, one per list."""
        lines = []
        for task_list, tasks in ((TaskList.PENDING, pending), (TaskList.COMPLETED, completed)):
            if lines:
                lines.append("")
            lines.append(f"{SECTION_TITLES[task_list]} ({len(tasks)})")
            lines.append(f"{'#':<4} {'Status':<8} {'Task'}")
            lines.append("-" * 40)
            if not tasks:
                lines.append("(empty)")
                continue
            icon = self._status_icon(task_list)
            for number, text in enumerate(tasks, start=1):
                lines.append(f"{number:<4} {icon:<8} {sanitize(text)}")
        return "\n".join(lines)

    def _format_compact(self, pending: Sequence[str], completed: Sequence[str]) -> str:
        """Format as compact list."""
        lines = []
        for task_list, tasks in ((TaskList.PENDING, pending), (TaskList.COMPLETED, completed)):
            lines.append(f"{SECTION_TITLES[task_list]}:")
            lines.extend(f"[{n}] {sanitize(t)}" for n, t in enumerate(tasks, start=1))
        return "\n".join(lines)

    def _format_json(self, pending: Sequence[str], completed: Sequence[str]) -> str:
        """Format as JSON."""
        import json

        return json.dumps(
            {TaskList.PENDING.value: list(pending), TaskList.COMPLETED.value: list(completed)},
            indent=2,
        )

    def _status_icon(self, task_list: TaskList) -> str:
        """Get icon for the list a task is in."""
        icons = {
            TaskList.PENDING: "[ ]",
            TaskList.COMPLETED: "[x]",
        }
        return icons.get(task_list, "[?]")
