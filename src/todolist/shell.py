"""Line-oriented console front end for :class:`~todolist.store.TaskListStore`.

The shell owns everything the store deliberately does not: which row is
selected in each list, how replacement text is asked for, and how warnings
and the lists are shown. It talks to the store only through its public
operations and re-renders whenever the store reports a change.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterable

from todolist.formatter import Formatter
from todolist.store import TaskListStore
from todolist.task import Change, Outcome, TaskList

logger = logging.getLogger(__name__)

# (label, default text) -> new text, or None when the user cancels
TextPrompt = Callable[[str, str], "str | None"]
Output = Callable[[str], None]

HELP_TEXT = """Commands:
  add <text>                       add a task to the pending list
  select <pending|completed> <n>   select row n of a list
  edit <pending|completed>         edit the selected task of a list
  delete <pending|completed>       delete the selected task of a list
  complete                         mark the selected pending task complete
  reopen                           mark the selected completed task pending
  list                             show both lists
  help                             show this help
  quit                             leave"""


class UsageError(Exception):
    """Raised for malformed shell commands."""


class TaskShell:
    """Interactive command loop over a task store."""

    def __init__(
        self,
        store: TaskListStore,
        prompt: TextPrompt,
        output: Output = print,
        formatter: Formatter | None = None,
    ):
        self.store = store
        self.prompt = prompt
        self.output = output
        self.formatter = formatter or Formatter()
        self._selection: dict[TaskList, int | None] = {
            TaskList.PENDING: None,
            TaskList.COMPLETED: None,
        }
        self._commands: dict[str, Callable[[str], None]] = {
            "add": self.do_add,
            "select": self.do_select,
            "edit": self.do_edit,
            "delete": self.do_delete,
            "complete": self.do_complete,
            "reopen": self.do_reopen,
            "list": self.do_list,
            "help": self.do_help,
        }
        self._unsubscribe = store.subscribe(self._on_change)

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()

    # -------------------- selection --------------------
    def selected(self, task_list: TaskList | str) -> str | None:
        """Return the text of the selected row of ``task_list``, if any."""
        task_list = TaskList.parse(task_list)
        index = self._selection[task_list]
        tasks = self.store.tasks(task_list)
        if index is None or index >= len(tasks):
            return None
        return tasks[index]

    def select(self, task_list: TaskList | str, number: int) -> None:
        """Select the 1-based row ``number`` of ``task_list``.

        Raises:
            UsageError: If the row does not exist.
        """
        task_list = TaskList.parse(task_list)
        count = len(self.store.tasks(task_list))
        if not 1 <= number <= count:
            raise UsageError(f"No task #{number} in {task_list.value} ({count} tasks).")
        self._selection[task_list] = number - 1

    def _on_change(self, change: Change) -> None:
        # Row numbers shift after any change, so drop selections in touched lists
        self._selection[change.task_list] = None
        if change.action in ("complete", "pending"):
            self._selection[change.task_list.other] = None
        self.render()

    # -------------------- output --------------------
    def render(self) -> None:
        self.output(self.formatter.format(self.store.pending, self.store.completed))

    def _report(self, outcome: Outcome) -> None:
        if outcome.ok or outcome.cancelled:
            return
        self.output(f"Warning: {outcome.message}")

    # -------------------- command loop --------------------
    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop.

        Only the command word is split off; each command decides how to read
        the rest of the line.
        """
        name, _, rest = line.lstrip().partition(" ")
        name = name.lower()
        if not name:
            return True
        if name in ("quit", "exit"):
            return False

        command = self._commands.get(name)
        if command is None:
            self.output(f"Unknown command: {name}. Type 'help' for a list of commands.")
            return True
        try:
            command(rest)
        except UsageError as e:
            self.output(f"Error: {e}")
        return True

    def run(self, lines: Iterable[str]) -> int:
        """Process ``lines`` until ``quit`` or until they run out.

        Returns:
            Number of lines handled, including the ``quit``.
        """
        handled = 0
        for line in lines:
            handled += 1
            if not self.handle(line):
                break
        logger.debug(f"Shell finished after {handled} commands")
        return handled

    # -------------------- commands --------------------
    def do_add(self, rest: str) -> None:
        # Task text is taken as typed, like a text field
        self._report(self.store.add_pending(rest))

    def do_select(self, rest: str) -> None:
        args = self._split(rest)
        if len(args) != 2:
            raise UsageError("usage: select <pending|completed> <n>")
        task_list = self._parse_list(args[0])
        try:
            number = int(args[1])
        except ValueError:
            raise UsageError(f"Not a row number: {args[1]!r}") from None
        self.select(task_list, number)
        self.output(f"Selected {task_list.value} #{number}: {self.selected(task_list)}")

    def do_edit(self, rest: str) -> None:
        task_list = self._single_list_arg(rest, "edit")
        target = self.selected(task_list)
        new_text = None
        if target is not None:
            new_text = self.prompt("Edit selected task:", target)
        self._report(self.store.edit_task(task_list, target, new_text))

    def do_delete(self, rest: str) -> None:
        task_list = self._single_list_arg(rest, "delete")
        self._report(self.store.delete_task(task_list, self.selected(task_list)))

    def do_complete(self, rest: str) -> None:
        self._report(self.store.mark_complete(self.selected(TaskList.PENDING)))

    def do_reopen(self, rest: str) -> None:
        self._report(self.store.mark_pending(self.selected(TaskList.COMPLETED)))

    def do_list(self, rest: str) -> None:
        self.render()

    def do_help(self, rest: str) -> None:
        self.output(HELP_TEXT)

    @staticmethod
    def _split(rest: str) -> list[str]:
        try:
            return shlex.split(rest)
        except ValueError as e:
            raise UsageError(str(e)) from None

    @staticmethod
    def _parse_list(raw: str) -> TaskList:
        try:
            return TaskList.parse(raw)
        except ValueError as e:
            raise UsageError(str(e)) from None

    def _single_list_arg(self, rest: str, command: str) -> TaskList:
        args = self._split(rest)
        if len(args) != 1:
            raise UsageError(f"usage: {command} <pending|completed>")
        return self._parse_list(args[0])
