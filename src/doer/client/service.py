"""Task service interface shared by the remote client and the local ledger."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, Union

from ..todo import TaskInfo, TaskLedger


class TaskService(Protocol):
    """Operations the console dispatches commands to."""

    def add_task(self, description: str, project: str, due: Union[date, str]) -> str:
        ...

    def done_task(self, task_id: int) -> None:
        ...

    def list_tasks(self) -> List[TaskInfo]:
        ...


class LocalTaskService:
    """TaskService backed by an in-process ledger (no server needed)."""

    def __init__(self, ledger: Optional[TaskLedger] = None) -> None:
        self.ledger = ledger if ledger is not None else TaskLedger()

    def add_task(self, description: str, project: str, due: Union[date, str]) -> str:
        return str(self.ledger.add_task(description, project, due))

    def done_task(self, task_id: int) -> None:
        self.ledger.done_task(task_id)

    def list_tasks(self) -> List[TaskInfo]:
        return self.ledger.list_tasks()
