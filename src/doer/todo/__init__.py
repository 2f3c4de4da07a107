"""Command grammar and task ledger shared by the server and the console."""

from .exceptions import (
    DoerError,
    InvalidArgumentError,
    InvalidDueDateError,
    InvalidTaskIdError,
    MissingDescriptionError,
    MissingDueDateError,
    MissingProjectError,
    ParseError,
    RemoteCallError,
    ServiceError,
    TaskIdOutOfBoundsError,
    TransportError,
    UnknownCommandError,
)
from .grammar import parse_due_date, parse_line
from .ledger import TaskLedger, parse_task_id
from .models import (
    COMMAND_NAMES,
    AddCommand,
    ByeCommand,
    Command,
    DoneCommand,
    HelpCommand,
    ListCommand,
    Task,
    TaskInfo,
    VersionCommand,
)

__all__ = [
    "COMMAND_NAMES",
    "AddCommand",
    "ByeCommand",
    "Command",
    "DoerError",
    "DoneCommand",
    "HelpCommand",
    "InvalidArgumentError",
    "InvalidDueDateError",
    "InvalidTaskIdError",
    "ListCommand",
    "MissingDescriptionError",
    "MissingDueDateError",
    "MissingProjectError",
    "ParseError",
    "RemoteCallError",
    "ServiceError",
    "Task",
    "TaskIdOutOfBoundsError",
    "TaskInfo",
    "TaskLedger",
    "TransportError",
    "UnknownCommandError",
    "VersionCommand",
    "parse_due_date",
    "parse_line",
    "parse_task_id",
]
