"""Task list model: list names, operation outcomes and change events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskList(str, Enum):
    """The two collections a task can live in."""

    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: TaskList | str) -> TaskList:
        """Accept a member, its value, or a one-letter alias ("p" / "c").

        Raises:
            ValueError: If the value names no list.
        """
        if isinstance(value, cls):
            return value
        raw = str(value).strip().lower()
        for member in cls:
            if raw in (member.value, member.value[0]):
                return member
        raise ValueError(f"Unknown task list: {value!r} (expected 'pending' or 'completed')")

    @property
    def other(self) -> TaskList:
        return TaskList.COMPLETED if self is TaskList.PENDING else TaskList.PENDING


class Failure(str, Enum):
    """Reasons a store operation is rejected."""

    EMPTY_INPUT = "empty_input"
    NO_SELECTION = "no_selection"
    NOT_FOUND = "not_found"


class OutcomeStatus(str, Enum):
    """What happened to the store."""

    APPLIED = "applied"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Outcome:
    """Result of a store operation.

    A rejected outcome always carries a ``failure`` and a ``message`` suitable
    for a warning dialog. Applied and cancelled outcomes carry neither.
    """

    status: OutcomeStatus
    failure: Failure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.APPLIED

    @property
    def cancelled(self) -> bool:
        return self.status is OutcomeStatus.CANCELLED

    @classmethod
    def applied(cls) -> Outcome:
        return cls(OutcomeStatus.APPLIED)

    @classmethod
    def cancel(cls) -> Outcome:
        return cls(OutcomeStatus.CANCELLED)

    @classmethod
    def reject(cls, failure: Failure, message: str) -> Outcome:
        return cls(OutcomeStatus.REJECTED, failure, message)


@dataclass(frozen=True)
class Change:
    """Notification sent to store subscribers after a mutation.

    ``task_list`` is the list that now holds ``text`` (for deletes, the list it
    was removed from). ``previous`` is only set by edits.
    """

    action: str
    task_list: TaskList
    text: str
    previous: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "action": self.action,
            "task_list": self.task_list.value,
            "text": self.text,
            "previous": self.previous,
        }
