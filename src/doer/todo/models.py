from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

# names accepted as a help query, in the order they are shown
COMMAND_NAMES = ("add", "bye", "done", "help", "list", "version")


@dataclass(frozen=True, slots=True)
class ListCommand:
    """Show every stored task."""


@dataclass(frozen=True, slots=True)
class DoneCommand:
    """Mark the task with the given id as completed."""

    id: int


@dataclass(frozen=True, slots=True)
class AddCommand:
    """Create a new task."""

    description: str
    project: str
    due: date


@dataclass(frozen=True, slots=True)
class HelpCommand:
    """Show help for one command, or for all of them when query is None."""

    query: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ByeCommand:
    """Leave the interpreter."""


@dataclass(frozen=True, slots=True)
class VersionCommand:
    """Show the current version."""


Command = Union[
    ListCommand, DoneCommand, AddCommand, HelpCommand, ByeCommand, VersionCommand
]


@dataclass(slots=True)
class Task:
    """A task stored in the ledger."""

    id: int
    description: str
    project: str
    due: date
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskInfo:
    """Listing projection of a task, with the due date as YYYY-MM-DD."""

    description: str
    project: str
    due: str

    @classmethod
    def from_task(cls, task: Task) -> "TaskInfo":
        return cls(
            description=task.description,
            project=task.project,
            due=task.due.isoformat(),
        )
