"""Pydantic schemas for the task RPC server."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..todo import TaskInfo


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class AddTaskRequest(BaseModel):
    """Request body for AddTask."""

    description: str = Field(..., description="Task description")
    project: str = Field(..., description="Project the task belongs to")
    due: str = Field(..., description="Due date (YYYY-MM-DD)")


class AddTaskResponse(BaseModel):
    """Response body for AddTask."""

    id: str = Field(..., description="Id assigned to the new task")


class DoneTaskRequest(BaseModel):
    """Request body for DoneTask."""

    id: str = Field(..., description="Id of the task to mark as completed")


class DoneTaskResponse(BaseModel):
    """Empty response body for DoneTask."""


class TaskInfoResponse(BaseModel):
    """Serialized task in a listing."""

    description: str
    project: str
    due: str

    @classmethod
    def from_info(cls, info: TaskInfo) -> "TaskInfoResponse":
        return cls(description=info.description, project=info.project, due=info.due)


class ListTasksResponse(BaseModel):
    """Response body for ListTasks."""

    tasks: List[TaskInfoResponse]
