# src/rodo/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from rich.text import Text

from ..core.application import (
    AddArguments,
    Application,
    CommitArguments,
    CreateArguments,
    DoneArguments,
    RemoveArguments,
    UndoneArguments,
)
from ..render.painter import NO_ACTIVE_LIST, Painter

CommandOutput = Text | str | None
CommandHandler = Callable[[Application, argparse.Namespace, Painter], CommandOutput]
ArgumentsConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Subcommand registry used by the CLI entrypoint (add, remove, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configurers: dict[str, ArgumentsConfigurer] = {}
        self._aliases: dict[str, list[str]] = {}
        self._default: CommandHandler | None = None

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        configure: ArgumentsConfigurer | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._aliases[key] = [a.lower() for a in aliases]
        if configure is not None:
            self._configurers[key] = configure
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def set_default(self, handler: CommandHandler) -> None:
        """Handler used when no subcommand is given."""
        self._default = handler

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="command", metavar="COMMAND")
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, aliases=self._aliases[name])
            configure = self._configurers.get(name)
            if configure is not None:
                configure(p)

    def handle(
        self,
        app: Application,
        args: argparse.Namespace,
        painter: Painter,
    ) -> CommandOutput:
        name = getattr(args, "command", None)
        if name is None:
            if self._default is None:
                return None
            return self._default(app, args, painter)

        handler = self._handlers.get(name.lower())
        if handler is None:
            raise ValueError(f"Unknown command: {name}")

        logger.debug("Dispatching command %s", name)
        return handler(app, args, painter)


registry = CommandRegistry()


def _index_arg(what: str) -> ArgumentsConfigurer:
    def configure(p: argparse.ArgumentParser) -> None:
        p.add_argument("index", type=int, help=f"Index of the task to {what} (counts from 1)")

    return configure


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("title", help="Title of the task")
    p.add_argument("description", nargs="?", default=None, help="Optional description")


def _configure_new(p: argparse.ArgumentParser) -> None:
    p.add_argument("name", nargs="?", default=None, help="Optional name of the task list")


def cmd_show(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    task_list = app.show()
    if task_list is None:
        return NO_ACTIVE_LIST
    return painter.paint_task_list(task_list)


def cmd_add(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.add(AddArguments(title=args.title, description=args.description))
    return None


def cmd_remove(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.remove(RemoveArguments(index=args.index))
    return None


def cmd_done(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.done(DoneArguments(index=args.index))
    return None


def cmd_undone(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.undone(UndoneArguments(index=args.index))
    return None


def cmd_new(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.create(CreateArguments(name=args.name))
    return None


def cmd_commit(app: Application, args: argparse.Namespace, painter: Painter) -> CommandOutput:
    app.commit(CommitArguments())
    return None


registry.set_default(cmd_show)
registry.register("add", cmd_add, help_text="Add a new task.", configure=_configure_add)
registry.register(
    "remove",
    cmd_remove,
    help_text="Remove an existing task.",
    aliases=["rm"],
    configure=_index_arg("remove"),
)
registry.register(
    "done", cmd_done, help_text="Mark an existing task as done.", configure=_index_arg("mark as done")
)
registry.register(
    "undone",
    cmd_undone,
    help_text="Mark an existing task as undone.",
    configure=_index_arg("mark as undone"),
)
registry.register(
    "new",
    cmd_new,
    help_text="Create a new task list and make it the active one.",
    aliases=["create"],
    configure=_configure_new,
)
registry.register(
    "commit", cmd_commit, help_text="Commit the current task list (no list is active afterwards)."
)
