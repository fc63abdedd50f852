# src/rodo/tasks/errors.py

from __future__ import annotations


class RodoError(Exception):
    """Base class for errors reported to the operator."""


class IndexOutOfRange(RodoError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length:
            super().__init__(f"index out of range: {index} (valid: 1..{length})")
        else:
            super().__init__(f"index out of range: {index} (task list is empty)")


class NoActiveTaskList(RodoError):
    def __init__(self) -> None:
        super().__init__("no active task list (use `rodo new` to create one)")


class TaskListNotPersisted(RodoError):
    """Raised when an operation needs a task list id that has not been assigned yet."""

    def __init__(self, what: str = "task list") -> None:
        super().__init__(f"{what} has not been committed yet")


class StorageInconsistency(RodoError):
    """The database references rows that do not exist (e.g. a dangling active pointer)."""
