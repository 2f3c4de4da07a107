"""Command line grammar for the task interpreter.

A line is matched against the rules below in order and the first one that
matches decides the command. The rules overlap (``help list`` is not a
``list`` command), so the order matters.

The ``add`` command mixes free text with ``project:<name>`` and
``due:<YYYY-MM-DD>`` attributes which may appear anywhere in the line.
Both attributes are extracted with their own patterns and whatever remains
is the task description.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from .exceptions import (
    InvalidDueDateError,
    MissingDescriptionError,
    MissingDueDateError,
    MissingProjectError,
    UnknownCommandError,
)
from .models import (
    COMMAND_NAMES,
    AddCommand,
    ByeCommand,
    Command,
    DoneCommand,
    HelpCommand,
    ListCommand,
    VersionCommand,
)

VERSION_PATTERN = re.compile(r"^\s*version\s*$", re.ASCII)
BYE_PATTERN = re.compile(r"^\s*(bye|quit|exit)\s*$", re.ASCII)
HELP_PATTERN = re.compile(
    r"^\s*help(?:\s+(" + "|".join(COMMAND_NAMES) + r"))?\s*$",
    re.ASCII,
)
LIST_PATTERN = re.compile(r"^\s*list\s*$", re.ASCII)
DONE_PATTERN = re.compile(r"^\s*done\s+([0-9]+)\s*$", re.ASCII)

# only the command name is matched here, the args are processed separately
ADD_PATTERN = re.compile(r"^\s*add\s+(.+)$", re.DOTALL | re.ASCII)
ADD_BODY_PATTERN = re.compile(r"^\s*add\s(.*)$", re.DOTALL | re.ASCII)

PROJECT_ATTRIBUTE = re.compile(r"project:(\S+)", re.ASCII)
DUE_ATTRIBUTE = re.compile(r"due:([0-9]{4}-[0-9]{2}-[0-9]{2})")

DUE_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_due_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a date.

    Raises:
        ValueError: the value is not exactly ``YYYY-MM-DD`` or is not a
            calendar date
    """
    if not DUE_DATE_PATTERN.match(value):
        raise ValueError(f"'{value}' does not match YYYY-MM-DD")
    return datetime.strptime(value, "%Y-%m-%d").date()


def _parse_add(line: str) -> AddCommand:
    project = PROJECT_ATTRIBUTE.search(line)
    if project is None:
        raise MissingProjectError()

    due = DUE_ATTRIBUTE.search(line)
    if due is None:
        raise MissingDueDateError()
    try:
        due_date = parse_due_date(due.group(1))
    except ValueError as exc:
        raise InvalidDueDateError(due.group(1)) from exc

    # every occurrence of both attributes is dropped from the description
    remainder = PROJECT_ATTRIBUTE.sub("", line)
    remainder = DUE_ATTRIBUTE.sub("", remainder)
    body = ADD_BODY_PATTERN.match(remainder)
    description = body.group(1).strip() if body else ""
    if not description:
        raise MissingDescriptionError()

    return AddCommand(description=description, project=project.group(1), due=due_date)


def parse_line(line: str) -> Command:
    """Turn one line of user input into a command.

    Args:
        line: raw text as typed by the user

    Returns:
        Command: exactly one of the six command variants

    Raises:
        MissingProjectError: an add command without ``project:``
        MissingDueDateError: an add command without a valid ``due:``
        MissingDescriptionError: an add command with an empty description
        UnknownCommandError: no rule matched
    """
    if VERSION_PATTERN.match(line):
        return VersionCommand()

    if BYE_PATTERN.match(line):
        return ByeCommand()

    match = HELP_PATTERN.match(line)
    if match:
        return HelpCommand(query=match.group(1))

    if LIST_PATTERN.match(line):
        return ListCommand()

    match = DONE_PATTERN.match(line)
    if match:
        return DoneCommand(id=int(match.group(1)))

    if ADD_PATTERN.match(line):
        return _parse_add(line)

    raise UnknownCommandError()
