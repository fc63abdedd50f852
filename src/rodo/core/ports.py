# src/rodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Task models and the Application depend on this Protocol rather than on the
concrete SQLite store, so tests can swap in an in-memory recorder.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task, TaskList


class TaskRepo(Protocol):
    """Persistence port for the task-list aggregate and the active pointer."""

    def load_active_list(self) -> TaskList | None: ...

    def upsert_task_list(self, task_list: TaskList) -> int: ...

    def upsert_task(self, task: Task) -> int: ...

    def delete_task(self, task_id: int) -> None: ...

    def set_active(self, task_list_id: int) -> None: ...

    def clear_active(self) -> None: ...
