# src/rodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store for the lifetime of one command,
dispatches the subcommand and prints its output. Operator-facing failures
end the process with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from .. import __version__
from ..config import Settings, database_file_path, get_settings
from ..core.application import Application
from ..logging_setup import setup_logging
from ..render.painter import Painter
from ..tasks.errors import RodoError
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)


def build_arg_parser(prog: str = "rodo") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=(
            "A tiny task tracker. Without a command, lists the tasks of the active task list."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Path to the SQLite database (default: <data dir>/rodo.sqlite)",
    )
    registry.add_subparsers(parser)
    return parser


def make_console(settings: Settings, *, stderr: bool = False) -> Console:
    # One line per task: never wrap at the (80 column, when piped) console width.
    return Console(stderr=stderr, no_color=not settings.color, highlight=False, soft_wrap=True)


def run(args: argparse.Namespace, settings: Settings, console: Console) -> None:
    db_path = args.db if args.db is not None else database_file_path(settings)
    painter = Painter(color=settings.color)

    with TaskStore(db_path) as store:
        app = Application(store)
        output = registry.handle(app, args, painter)

    if output is not None:
        console.print(output)


def main(argv: Sequence[str] | None = None) -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_file=settings.log_path if settings.log_to_file else None,
        console_level=console_level,
    )

    args = build_arg_parser(settings.app_name).parse_args(argv)
    console = make_console(settings)
    err_console = make_console(settings, stderr=True)

    try:
        run(args, settings, console)
    except RodoError as exc:
        # Operator sees the one-line message below; the traceback goes to the log file.
        logger.debug("Command %s failed: %s", args.command, exc, exc_info=True)
        err_console.print(f"error: {exc}", markup=False, style="bold red")
        sys.exit(1)
    except sqlite3.Error as exc:
        logger.exception("Storage failure during command %s", args.command)
        err_console.print(f"error: {exc}", markup=False, style="bold red")
        sys.exit(1)


if __name__ == "__main__":
    main()
