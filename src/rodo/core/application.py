# src/rodo/core/application.py

"""
Command layer.

Each command loads the active task list, applies one in-memory mutation and
commits the aggregate back. `create` works on a brand-new list and `commit`
only touches the active pointer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.errors import NoActiveTaskList
from ..tasks.task_models import Task, TaskList
from .clock import Clock, current_time_millis
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddArguments:
    title: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class RemoveArguments:
    index: int  # 1-based


@dataclass(frozen=True, slots=True)
class DoneArguments:
    index: int  # 1-based


@dataclass(frozen=True, slots=True)
class UndoneArguments:
    index: int  # 1-based


@dataclass(frozen=True, slots=True)
class CreateArguments:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class CommitArguments:
    pass


class Application:
    def __init__(self, store: TaskRepo, clock: Clock = current_time_millis) -> None:
        self._store = store
        self._clock = clock

    def _require_active(self) -> TaskList:
        task_list = self._store.load_active_list()
        if task_list is None:
            raise NoActiveTaskList()
        return task_list

    def add(self, args: AddArguments) -> TaskList:
        task_list = self._require_active()
        task = Task(
            title=args.title,
            description=args.description,
            index=task_list.next_index(),
            create_timestamp=self._clock(),
        )
        task_list.add_task(task)
        task_list.commit(self._store)
        logger.info("Added task idx=%s id=%s to list id=%s", task.index, task.id, task_list.id)
        return task_list

    def remove(self, args: RemoveArguments) -> TaskList:
        task_list = self._require_active()
        removed = task_list.remove_task(args.index, self._store)
        task_list.commit(self._store)
        logger.info("Removed task idx=%s from list id=%s", removed.index, task_list.id)
        return task_list

    def done(self, args: DoneArguments) -> TaskList:
        task_list = self._require_active()
        task = task_list.done_task(args.index, self._clock())
        task_list.commit(self._store)
        logger.info("Marked task idx=%s done", task.index)
        return task_list

    def undone(self, args: UndoneArguments) -> TaskList:
        task_list = self._require_active()
        task = task_list.undone_task(args.index)
        task_list.commit(self._store)
        logger.info("Marked task idx=%s undone", task.index)
        return task_list

    def create(self, args: CreateArguments) -> TaskList:
        task_list = TaskList(name=args.name, create_timestamp=self._clock())
        task_list.commit(self._store)
        task_list.set_active(self._store)
        logger.info("Created task list id=%s name=%r (now active)", task_list.id, task_list.name)
        return task_list

    def commit(self, args: CommitArguments) -> None:
        """Detach the active list. List and task rows stay in the database."""
        self._store.clear_active()
        logger.info("Active task list committed")

    def show(self) -> TaskList | None:
        """Default command: the active list, or None when nothing is active."""
        return self._store.load_active_list()
