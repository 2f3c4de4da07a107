"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache

from ..todo import TaskLedger


@lru_cache(maxsize=1)
def get_task_ledger() -> TaskLedger:
    """Singleton TaskLedger shared by every request."""
    return TaskLedger()
