"""Read-eval-print loop for the task interpreter."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .. import __version__
from ..todo import (
    AddCommand,
    ByeCommand,
    Command,
    DoneCommand,
    HelpCommand,
    ListCommand,
    ParseError,
    ServiceError,
    TaskInfo,
    VersionCommand,
    parse_line,
)
from .service import TaskService

logger = logging.getLogger(__name__)

PROMPT = " > "
EXIT_SUCCESS = 0

HELP_ENTRIES = {
    "add": "<task desc> project:<project name> due:<YYYY-MM-DD>: adds a new task",
    "done": "<task id>: marks the given task as completed",
    "list": ": show all tasks",
    "version": ": show current version",
    "help": ": shows this help banner",
    "bye": ": exits to the OS",
}


def version_banner() -> str:
    return f"doer version {__version__}"


def format_help(query: Optional[str] = None) -> str:
    """Render the help banner, or the single entry for ``query``."""
    if query:
        lines = [f"\t{query}: {HELP_ENTRIES[query]}"]
    else:
        lines = sorted(f"\t{name}: {text}" for name, text in HELP_ENTRIES.items())
    return "\n" + "\n".join(lines) + "\n"


def format_task(info: TaskInfo) -> str:
    return f" desc: <{info.description}> project:<{info.project}> due:<{info.due}>"


class TaskConsole:
    """Interactive interpreter routing parsed commands to a task service.

    Parse errors and service errors (including an unreachable server) are
    printed and the loop goes on; only ``bye``/``quit``/``exit`` or the end
    of the input stream stop it.
    """

    def __init__(
        self,
        service: TaskService,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = PROMPT,
    ) -> None:
        self.service = service
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def run(self) -> int:
        """Process lines until told to stop; returns the exit code."""
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            try:
                line = self.stdin.readline()

                # end of stream
                if not line:
                    self._print()
                    return EXIT_SUCCESS

                if not self.handle_line(line.rstrip("\r\n")):
                    return EXIT_SUCCESS
            except KeyboardInterrupt:
                # Ctrl+C, also while a request is in flight
                self._print()
                return EXIT_SUCCESS

    def handle_line(self, line: str) -> bool:
        """Parse and execute one line. Returns False when the session ends."""
        if not line.strip():
            return True

        try:
            command = parse_line(line)
        except ParseError as exc:
            self._print(str(exc))
            return True

        return self.dispatch(command)

    def dispatch(self, command: Command) -> bool:
        """Execute a parsed command. Returns False for ``bye``."""
        try:
            match command:
                case ListCommand():
                    for info in self.service.list_tasks():
                        self._print(format_task(info))
                case DoneCommand(id=task_id):
                    self.service.done_task(task_id)
                    self._print(f" task {task_id} marked as done")
                case AddCommand(description=description, project=project, due=due):
                    task_id = self.service.add_task(description, project, due)
                    self._print(f" task {task_id} added")
                case HelpCommand(query=query):
                    self._print(format_help(query))
                case ByeCommand():
                    return False
                case VersionCommand():
                    self._print(version_banner())
                case _:
                    raise TypeError(f"unexpected command: {command!r}")
        except ServiceError as exc:
            logger.debug("Request failed: %s", exc)
            self._print(f"Error: {exc}")
        return True
