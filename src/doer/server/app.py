"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from .dependencies import get_task_ledger
from .routes import register_health_routes, register_task_routes

__all__ = ["app", "create_app", "get_task_ledger"]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="doer task service", version=__version__)

    register_health_routes(app)
    register_task_routes(app)

    return app


app = create_app()
