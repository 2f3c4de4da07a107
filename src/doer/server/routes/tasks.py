"""Task service endpoints: AddTask, DoneTask and ListTasks."""

from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI, HTTPException

from ...todo import InvalidArgumentError, parse_task_id
from ..dependencies import get_task_ledger
from ..schemas import (
    AddTaskRequest,
    AddTaskResponse,
    DoneTaskRequest,
    DoneTaskResponse,
    ListTasksResponse,
    TaskInfoResponse,
)

logger = logging.getLogger(__name__)


def register_task_routes(app: FastAPI) -> None:
    """Register the task service endpoints.

    Ledger calls run in worker threads, so requests may overlap; the ledger
    serializes them itself. Invalid arguments are answered with 400.
    """

    @app.post("/api/tasks", response_model=AddTaskResponse)
    async def add_task(request: AddTaskRequest) -> AddTaskResponse:
        """Add a new task and return its id."""
        ledger = get_task_ledger()
        try:
            task_id = await asyncio.to_thread(
                ledger.add_task,
                request.description,
                request.project,
                request.due,
            )
            return AddTaskResponse(id=str(task_id))
        except InvalidArgumentError as exc:
            logger.warning("AddTask rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except Exception as exc:
            logger.exception("Failed to add task: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to add task") from exc

    @app.post("/api/tasks/done", response_model=DoneTaskResponse)
    async def done_task(request: DoneTaskRequest) -> DoneTaskResponse:
        """Mark a task as completed."""
        ledger = get_task_ledger()
        try:
            task_id = parse_task_id(request.id)
            await asyncio.to_thread(ledger.done_task, task_id)
            return DoneTaskResponse()
        except InvalidArgumentError as exc:
            logger.warning("DoneTask rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except Exception as exc:
            logger.exception("Failed to complete task: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to complete task") from exc

    @app.get("/api/tasks", response_model=ListTasksResponse)
    async def list_tasks() -> ListTasksResponse:
        """List every task in insertion order."""
        ledger = get_task_ledger()
        try:
            tasks = await asyncio.to_thread(ledger.list_tasks)
            return ListTasksResponse(tasks=[TaskInfoResponse.from_info(task) for task in tasks])
        except Exception as exc:
            logger.exception("Failed to list tasks: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to list tasks") from exc
