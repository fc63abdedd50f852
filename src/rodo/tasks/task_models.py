# src/rodo/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import IndexOutOfRange, TaskListNotPersisted

if TYPE_CHECKING:
    from ..core.ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Task:
    """
    One row of the `tasks` table.

    `id is None` means the task was never persisted; the store assigns it on
    the first commit. `task_list_id` is filled in by the owning TaskList.
    """

    title: str
    index: int
    create_timestamp: int
    description: str | None = None
    done: bool = False
    done_timestamp: int = 0

    id: int | None = None
    task_list_id: int | None = None

    def commit(self, store: TaskRepo) -> int:
        self.id = store.upsert_task(self)
        return self.id


@dataclass(slots=True)
class TaskList:
    """
    Aggregate root: a task list and its tasks ordered by `index` ascending.

    Operators address tasks by 1-based position in `tasks`. Stored indices are
    never renumbered, so positions and `Task.index` drift apart after removals.
    """

    create_timestamp: int
    name: str | None = None
    tasks: list[Task] = field(default_factory=list)

    id: int | None = None

    def next_index(self) -> int:
        if not self.tasks:
            return 1
        return self.tasks[-1].index + 1

    def add_task(self, task: Task) -> None:
        """Append a task. The caller assigns `task.index` (see next_index)."""
        if self.id is not None:
            task.task_list_id = self.id
        self.tasks.append(task)

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self.tasks):
            raise IndexOutOfRange(index, len(self.tasks))

    def remove_task(self, index: int, store: TaskRepo) -> Task:
        """
        Remove the task at 1-based `index` and delete its row right away.

        The delete is not deferred to `commit()`.
        """
        self._check_index(index)
        task = self.tasks.pop(index - 1)
        if task.id is not None:
            store.delete_task(task.id)
        logger.debug("Removed task position=%s id=%s idx=%s", index, task.id, task.index)
        return task

    def done_task(self, index: int, now: int) -> Task:
        self._check_index(index)
        task = self.tasks[index - 1]
        task.done = True
        task.done_timestamp = now
        return task

    def undone_task(self, index: int) -> Task:
        self._check_index(index)
        task = self.tasks[index - 1]
        task.done = False
        task.done_timestamp = 0
        return task

    def set_active(self, store: TaskRepo) -> None:
        if self.id is None:
            raise TaskListNotPersisted()
        store.set_active(self.id)

    def commit(self, store: TaskRepo) -> int:
        """
        Persist the aggregate: the list row first, then every task in order.

        Tasks reference `task_lists.id`, so the parent must exist before any
        child is written.
        """
        self.id = store.upsert_task_list(self)
        for task in self.tasks:
            task.task_list_id = self.id
            task.commit(store)
        return self.id
