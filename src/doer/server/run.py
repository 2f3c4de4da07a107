"""CLI entry point for launching the FastAPI app with uvicorn."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn

from ..config import Config
from ..logger import setup_logger
from .app import app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="doer-server",
        description="Task service serving AddTask, DoneTask and ListTasks",
    )
    parser.add_argument("--host", type=str, default=None, help="address to bind")
    parser.add_argument("--port", type=int, default=None, help="port to listen on")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("--verbose", action="store_true", help="provides verbose output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the task server."""
    args = parse_args(argv)
    config = Config.from_yaml(args.config)

    host = args.host or config.server.host
    port = args.port or config.server.port
    log_level = "DEBUG" if args.verbose else config.log_level
    setup_logger(log_level=log_level, log_file=config.log_file)

    logging.getLogger(__name__).info("Servicing requests on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
