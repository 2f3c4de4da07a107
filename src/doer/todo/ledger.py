"""Thread-safe in-memory task ledger."""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Dict, List, Union

from .exceptions import InvalidArgumentError, InvalidTaskIdError, TaskIdOutOfBoundsError
from .grammar import parse_due_date
from .models import Task, TaskInfo

logger = logging.getLogger(__name__)

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_task_id(value: Union[str, int]) -> int:
    """Convert a string-encoded task id into an integer.

    Raises:
        InvalidTaskIdError: the value is not an integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not TASK_ID_PATTERN.fullmatch(text):
        raise InvalidTaskIdError(f"invalid task id: {value!r}")
    return int(text)


class TaskLedger:
    """Authoritative store of tasks.

    Ids are handed out by a counter that starts at zero and never goes back,
    so they follow insertion order and are never reused. All reads and
    writes of the collection happen under a single lock; callers only ever
    get copies of the stored records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add_task(self, description: str, project: str, due: Union[date, str]) -> int:
        """Store a new pending task and return its id.

        Args:
            description: task description, stored as given
            project: project name, stored as given
            due: due date, either a date or a ``YYYY-MM-DD`` string

        Raises:
            InvalidArgumentError: due is not a valid calendar date
        """
        if isinstance(due, datetime):
            due = due.date()
        elif not isinstance(due, date):
            try:
                due = parse_due_date(str(due))
            except ValueError as exc:
                raise InvalidArgumentError(f"invalid due date: {exc}") from exc

        with self._lock:
            task_id = self._next_id
            self._tasks[task_id] = Task(
                id=task_id,
                description=description,
                project=project,
                due=due,
            )
            self._next_id += 1
        logger.info("Task added: %d", task_id)
        return task_id

    def done_task(self, task_id: int) -> None:
        """Mark a task as completed. Completing a task twice is a no-op.

        Raises:
            TaskIdOutOfBoundsError: no task has that id
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskIdOutOfBoundsError(task_id)
            task.completed = True
        logger.info("Task completed: %d", task_id)

    def list_tasks(self) -> List[TaskInfo]:
        """Return every task in insertion order, completed ones included."""
        with self._lock:
            return [TaskInfo.from_task(task) for task in self._tasks.values()]

    def get_task(self, task_id: int) -> Task:
        """Return a copy of the stored task.

        Raises:
            TaskIdOutOfBoundsError: no task has that id
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskIdOutOfBoundsError(task_id)
            return replace(task)
