"""In-memory task store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from todolist.task import Change, Failure, Outcome, TaskList

logger = logging.getLogger(__name__)

Listener = Callable[[Change], None]

MSG_ADD_EMPTY = "Add Task button was clicked without entering anything in text field"
MSG_EDIT_EMPTY = "Task cannot be empty."
MSG_SELECT_EDIT = "Please select an item to edit."
MSG_SELECT_REMOVE = "Please select an item to remove."
MSG_SELECT_COMPLETE = "Please select an item to mark complete"
MSG_SELECT_PENDING = "Please select an item to mark pending"

# Characters trimmed from both ends of task text: space and the C0 controls
TRIM_CHARS = "".join(chr(c) for c in range(33))


def is_blank(text: str) -> bool:
    return not text.strip(TRIM_CHARS)


def _not_found(task_list: TaskList, target: str) -> Outcome:
    return Outcome.reject(
        Failure.NOT_FOUND, f"Task '{target}' is not in the {task_list.value} list."
    )


class TaskListStore:
    """Owner of the pending and completed task lists.

    Tasks are plain strings identified by their text. When the same text occurs
    more than once in a list, edit, delete and move act on the first occurrence.

    Every operation returns an :class:`~todolist.task.Outcome` and either
    applies completely or leaves both lists untouched. Subscribers registered
    with :meth:`subscribe` receive one :class:`~todolist.task.Change` per
    applied mutation.

    The store is not thread-safe; it is meant to be driven from a single
    event loop.
    """

    def __init__(
        self,
        pending: Iterable[str] = (),
        completed: Iterable[str] = (),
    ):
        self._lists: dict[TaskList, list[str]] = {
            TaskList.PENDING: [],
            TaskList.COMPLETED: [],
        }
        self._listeners: list[Listener] = []
        for text in pending:
            self._seed(TaskList.PENDING, text)
        for text in completed:
            self._seed(TaskList.COMPLETED, text)

    def _seed(self, task_list: TaskList, text: str) -> None:
        if not isinstance(text, str) or is_blank(text):
            raise ValueError(f"Invalid initial {task_list.value} task: {text!r}")
        self._lists[task_list].append(text)

    # -------------------- queries --------------------
    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._lists[TaskList.PENDING])

    @property
    def completed(self) -> tuple[str, ...]:
        return tuple(self._lists[TaskList.COMPLETED])

    def tasks(self, task_list: TaskList | str) -> tuple[str, ...]:
        """Return a snapshot of one list."""
        return tuple(self._lists[TaskList.parse(task_list)])

    def snapshot(self) -> dict[str, list[str]]:
        """Return both lists keyed by list name."""
        return {name.value: list(items) for name, items in self._lists.items()}

    def __len__(self) -> int:
        return sum(len(items) for items in self._lists.values())

    def __contains__(self, text: object) -> bool:
        return any(text in items for items in self._lists.values())

    def __repr__(self) -> str:
        return (
            f"TaskListStore(pending={len(self._lists[TaskList.PENDING])}, "
            f"completed={len(self._lists[TaskList.COMPLETED])})"
        )

    # -------------------- subscriptions --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change notifications.

        Returns:
            A function that removes the listener again. Calling it twice is
            harmless.

        Raises:
            TypeError: If ``listener`` is not callable.
        """
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: Change) -> None:
        logger.debug(f"Change: {change.to_dict()}")
        # Copy so listeners may unsubscribe themselves while being notified
        for listener in list(self._listeners):
            listener(change)

    def _rejected(self, operation: str, outcome: Outcome) -> Outcome:
        logger.info(f"{operation} rejected ({outcome.failure.value}): {outcome.message}")
        return outcome

    # -------------------- task operations --------------------
    def add_pending(self, text: str | None) -> Outcome:
        """Append ``text`` to the end of the pending list.

        The text is stored verbatim; it is only rejected when it is missing,
        empty or made of spaces and control characters alone.
        """
        if text is None or is_blank(text):
            return self._rejected("add", Outcome.reject(Failure.EMPTY_INPUT, MSG_ADD_EMPTY))

        self._lists[TaskList.PENDING].append(text)
        logger.debug(f"Added pending task {text!r}")
        self._notify(Change("add", TaskList.PENDING, text))
        return Outcome.applied()

    def edit_task(
        self,
        task_list: TaskList | str,
        target: str | None,
        new_text: str | None,
    ) -> Outcome:
        """Replace ``target`` in ``task_list`` with ``new_text`` trimmed.

        ``new_text`` of ``None`` means the user dismissed the edit prompt; the
        result is a cancelled outcome and nothing changes. The task keeps its
        position in the list.
        """
        task_list = TaskList.parse(task_list)
        if target is None:
            return self._rejected("edit", Outcome.reject(Failure.NO_SELECTION, MSG_SELECT_EDIT))
        if new_text is None:
            logger.debug(f"Edit of {target!r} cancelled")
            return Outcome.cancel()

        replacement = new_text.strip(TRIM_CHARS)
        if not replacement:
            return self._rejected("edit", Outcome.reject(Failure.EMPTY_INPUT, MSG_EDIT_EMPTY))

        items = self._lists[task_list]
        try:
            index = items.index(target)
        except ValueError:
            return self._rejected("edit", _not_found(task_list, target))

        items[index] = replacement
        logger.debug(f"Edited {task_list.value} task #{index + 1}: {target!r} -> {replacement!r}")
        self._notify(Change("edit", task_list, replacement, previous=target))
        return Outcome.applied()

    def delete_task(self, task_list: TaskList | str, target: str | None) -> Outcome:
        """Remove the first occurrence of ``target`` from ``task_list``."""
        task_list = TaskList.parse(task_list)
        if target is None:
            return self._rejected(
                "delete", Outcome.reject(Failure.NO_SELECTION, MSG_SELECT_REMOVE)
            )

        items = self._lists[task_list]
        try:
            items.remove(target)
        except ValueError:
            return self._rejected("delete", _not_found(task_list, target))

        logger.debug(f"Deleted {task_list.value} task {target!r}")
        self._notify(Change("delete", task_list, target))
        return Outcome.applied()

    def mark_complete(self, target: str | None) -> Outcome:
        """Move ``target`` from the pending list to the end of the completed list."""
        if target is None:
            return self._rejected(
                "complete", Outcome.reject(Failure.NO_SELECTION, MSG_SELECT_COMPLETE)
            )
        return self._move("complete", TaskList.PENDING, target)

    def mark_pending(self, target: str | None) -> Outcome:
        """Move ``target`` from the completed list to the end of the pending list."""
        if target is None:
            return self._rejected(
                "pending", Outcome.reject(Failure.NO_SELECTION, MSG_SELECT_PENDING)
            )
        return self._move("pending", TaskList.COMPLETED, target)

    def _move(self, action: str, source: TaskList, target: str) -> Outcome:
        source_items = self._lists[source]
        if target not in source_items:
            return self._rejected(action, _not_found(source, target))

        destination = source.other
        # Append before removing; with duplicate text the first match in the
        # source is still the one that leaves.
        self._lists[destination].append(target)
        source_items.remove(target)
        logger.debug(f"Moved {target!r} from {source.value} to {destination.value}")
        self._notify(Change(action, destination, target))
        return Outcome.applied()
