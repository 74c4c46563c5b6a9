"""Command-line interface for the to-do list."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator

from todolist import __version__
from todolist.config import LOG_LEVELS, load_settings, parse_log_level
from todolist.formatter import Formatter, FormatType
from todolist.logging_setup import setup_logging
from todolist.shell import TaskShell
from todolist.store import TaskListStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def prompt_text(label: str, default: str) -> str | None:
    """Ask for replacement text on the terminal.

    An empty answer keeps ``default``; end-of-file or Ctrl-C cancels.
    """
    try:
        answer = input(f"{label} [{default}] ")
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return answer if answer else default


def read_lines(prompt: str) -> Iterator[str]:
    """Yield input lines until end-of-file."""
    interactive = sys.stdin.isatty()
    while True:
        try:
            line = input(prompt) if interactive else sys.stdin.readline()
        except EOFError:
            return
        if not interactive and line == "":
            return
        yield line.rstrip("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="To-do list with pending and completed tasks (kept in memory only)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-f", "--format", choices=[f.value for f in FormatType], help="List display format"
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Log level")
    parser.add_argument("tasks", nargs="*", help="Tasks to start the pending list with")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = load_settings()

    level = parse_log_level(args.log_level) if args.log_level else settings.log_level
    setup_logging(level)
    fmt = FormatType(args.format) if args.format else settings.format
    logger.debug(f"Starting shell (format={fmt.value}, log level={level})")

    store = TaskListStore()
    for text in args.tasks:
        outcome = store.add_pending(text)
        if not outcome.ok:
            print(f"Warning: {outcome.message}", file=sys.stderr)
    shell = TaskShell(store, prompt=prompt_text, formatter=Formatter(fmt))

    print(f"todolist {__version__}. Type 'help' for commands.")
    if len(store):
        shell.render()
    try:
        shell.run(read_lines(settings.prompt))
    except KeyboardInterrupt:
        print()
        return EXIT_INTERRUPTED
    finally:
        shell.close()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
