"""HTTP client for the task service."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

import requests

from ..todo import InvalidArgumentError, RemoteCallError, TaskInfo, TransportError

logger = logging.getLogger(__name__)


class TaskServiceClient:
    """
    Client for the AddTask, DoneTask and ListTasks operations

    Every call is bounded by ``timeout`` seconds. Connection failures and
    timeouts are raised as TransportError so a caller can report them and
    carry on with the next request.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:50051", timeout: float = 1.0):
        """
        Args:
            base_url: URL of the task server
            timeout: seconds to wait for each call
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            if method == "GET":
                response = requests.get(url, timeout=self.timeout)
            else:
                response = requests.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Server did not answer within {self.timeout}s: {url}")
            raise TransportError(f"timed out after {self.timeout}s waiting for {url}") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Connection failure: {e}")
            raise TransportError(f"connection failure: {e}") from e

        if response.status_code == 400:
            raise InvalidArgumentError(self._detail(response))
        if response.status_code >= 300:
            raise RemoteCallError(
                f"server error ({response.status_code}): {self._detail(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Malformed server response from {url}: {e}")
            raise RemoteCallError(
                f"malformed server response: {response.text!r}",
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise RemoteCallError(
                f"malformed server response: {data!r}", status_code=response.status_code
            )

        logger.debug(f"Server response: {data!r}")
        return data

    @staticmethod
    def _detail(response: requests.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        return str(detail) if detail else response.text

    def add_task(self, description: str, project: str, due: Union[date, str]) -> str:
        """
        Create a task on the server

        Args:
            description: task description
            project: project name
            due: due date, a date or a YYYY-MM-DD string

        Returns:
            id assigned by the server
        """
        due_text = due.isoformat() if isinstance(due, date) else due
        data = self._request(
            "POST",
            "/api/tasks",
            {"description": description, "project": project, "due": due_text},
        )
        try:
            return str(data["id"])
        except KeyError as e:
            raise RemoteCallError(f"malformed AddTask response: {data!r}") from e

    def done_task(self, task_id: int) -> None:
        """Mark a task as completed on the server"""
        self._request("POST", "/api/tasks/done", {"id": str(task_id)})

    def list_tasks(self) -> List[TaskInfo]:
        """Retrieve every task stored on the server"""
        data = self._request("GET", "/api/tasks")
        try:
            return [
                TaskInfo(description=item["description"], project=item["project"], due=item["due"])
                for item in data.get("tasks", [])
            ]
        except (KeyError, TypeError) as e:
            raise RemoteCallError(f"malformed ListTasks response: {data!r}") from e
