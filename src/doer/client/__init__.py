"""Interactive console and RPC client for the task service."""

from .console import TaskConsole
from .rpc import TaskServiceClient
from .service import LocalTaskService, TaskService

__all__ = ["LocalTaskService", "TaskConsole", "TaskService", "TaskServiceClient"]
