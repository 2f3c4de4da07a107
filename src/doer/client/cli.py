"""
Interactive task client

Usage:
    doer-client                      # talk to the server named in the settings
    doer-client --url http://host:50051 --timeout 2
    doer-client --local              # keep tasks in this process, no server
    doer-client --version
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from ..config import Config
from ..logger import setup_logger
from .console import EXIT_SUCCESS, TaskConsole, version_banner
from .rpc import TaskServiceClient
from .service import LocalTaskService, TaskService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="doer-client",
        description="Interactive task list manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s --url http://127.0.0.1:50051
  %(prog)s --local
        """,
    )
    parser.add_argument("--url", type=str, default=None, help="task server URL")
    parser.add_argument(
        "--timeout", type=float, default=None, help="seconds to wait for each request"
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="keep tasks in an in-process ledger instead of a server",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("--verbose", action="store_true", help="provides verbose output")
    parser.add_argument(
        "--version", action="store_true", help="shows version info and exits"
    )
    return parser.parse_args(argv)


def build_service(args: argparse.Namespace, config: Config) -> TaskService:
    """Pick the task service the console talks to"""
    if args.local:
        return LocalTaskService()
    return TaskServiceClient(
        base_url=args.url or config.client.url,
        timeout=args.timeout if args.timeout is not None else config.client.timeout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    args = parse_args(argv)

    if args.version:
        print(version_banner())
        return EXIT_SUCCESS

    config = Config.from_yaml(args.config)
    setup_logger(
        log_level="DEBUG" if args.verbose else config.log_level,
        log_file=config.log_file,
    )

    service = build_service(args, config)
    logging.getLogger(__name__).debug("Using task service %s", type(service).__name__)
    return TaskConsole(service).run()
