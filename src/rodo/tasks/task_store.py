# src/rodo/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from .errors import StorageInconsistency, TaskListNotPersisted
from .task_models import Task, TaskList

logger = logging.getLogger(__name__)

ACTIVE_ROW_ID = 1


class TaskStore:
    """
    SQLite store for task lists, tasks and the active-list pointer.

    Schema creation is additive only: CREATE TABLE IF NOT EXISTS, never
    ALTER or DROP.

    Connection model:
    - one connection per process, opened here and released by close()
    - use as a context manager so the file is closed on every exit path
    - every write runs in its own transaction
    """

    def __init__(self, db_path: str | Path = "rodo.sqlite") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = self._connect()
        self.initialize()
        logger.debug(
            "TaskStore ready db=%s lists=%s tasks=%s",
            self._db_path,
            self.count_task_lists(),
            self.count_tasks(),
        )

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---- low-level helpers ----

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        conn.execute("PRAGMA foreign_keys=ON")

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("TaskStore is closed")
        return self._conn

    def initialize(self) -> None:
        """Create the tables if missing and make sure the active row exists."""
        conn = self._get_conn()
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS task_lists (
                    id INTEGER PRIMARY KEY,
                    create_timestamp INTEGER NOT NULL,
                    name TEXT
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY,
                    task_list_id INTEGER NOT NULL,
                    title TEXT NOT NULL,
                    idx INTEGER NOT NULL,
                    description TEXT,
                    create_timestamp INTEGER NOT NULL,
                    done_timestamp INTEGER,
                    done BOOL,

                    FOREIGN KEY (task_list_id) REFERENCES task_lists (id)
                )
                """
            )
            # Single-row table: the task list the next command operates on.
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS active (
                    id INTEGER PRIMARY KEY,
                    task_list_id INTEGER,
                    FOREIGN KEY (task_list_id) REFERENCES task_lists (id)
                )
                """
            )
            cur = conn.execute(
                "INSERT OR IGNORE INTO active (id, task_list_id) VALUES (?, NULL)",
                (ACTIVE_ROW_ID,),
            )
            if cur.rowcount == 1:
                logger.info("Initialized active pointer in %s", self._db_path)

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            task_list_id=int(row["task_list_id"]),
            title=str(row["title"]),
            description=row["description"],
            create_timestamp=int(row["create_timestamp"]),
            done_timestamp=int(row["done_timestamp"] or 0),
            done=bool(row["done"]),
            index=int(row["idx"]),
        )

    # ---- counters ----

    def count_tasks(self) -> int:
        (n,) = self._get_conn().execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def count_task_lists(self) -> int:
        (n,) = self._get_conn().execute("SELECT COUNT(*) FROM task_lists").fetchone()
        return int(n)

    # ---- active pointer ----

    def active_list_id(self) -> int | None:
        row = self._get_conn().execute(
            "SELECT task_list_id FROM active WHERE id = ?", (ACTIVE_ROW_ID,)
        ).fetchone()
        if row is None:
            raise StorageInconsistency("active pointer row is missing")
        value = row["task_list_id"]
        return None if value is None else int(value)

    def set_active(self, task_list_id: int) -> None:
        conn = self._get_conn()
        with conn:
            conn.execute(
                "UPDATE active SET task_list_id = ? WHERE id = ?",
                (int(task_list_id), ACTIVE_ROW_ID),
            )
        logger.debug("Active task list set to id=%s", task_list_id)

    def clear_active(self) -> None:
        """Detach the active list. Clearing an empty pointer is a no-op."""
        conn = self._get_conn()
        with conn:
            cur = conn.execute(
                "UPDATE active SET task_list_id = NULL "
                "WHERE id = ? AND task_list_id IS NOT NULL",
                (ACTIVE_ROW_ID,),
            )
        logger.debug("Active task list cleared (changed=%s)", cur.rowcount)

    # ---- aggregate ----

    def load_active_list(self) -> TaskList | None:
        task_list_id = self.active_list_id()
        if task_list_id is None:
            return None

        conn = self._get_conn()
        row = conn.execute(
            "SELECT id, create_timestamp, name FROM task_lists WHERE id = ?",
            (task_list_id,),
        ).fetchone()
        if row is None:
            raise StorageInconsistency(
                f"active pointer references missing task list id={task_list_id}"
            )

        rows = conn.execute(
            """
            SELECT id, task_list_id, title, description,
                   create_timestamp, done_timestamp, done, idx
            FROM tasks
            WHERE task_list_id = ?
            ORDER BY idx ASC
            """,
            (task_list_id,),
        ).fetchall()

        return TaskList(
            id=int(row["id"]),
            name=row["name"],
            create_timestamp=int(row["create_timestamp"]),
            tasks=[self._row_to_task(r) for r in rows],
        )

    def upsert_task_list(self, task_list: TaskList) -> int:
        conn = self._get_conn()
        with conn:
            if task_list.id is not None:
                conn.execute(
                    "UPDATE task_lists SET name = ?, create_timestamp = ? WHERE id = ?",
                    (task_list.name, int(task_list.create_timestamp), int(task_list.id)),
                )
                logger.debug("Task list updated id=%s", task_list.id)
                return int(task_list.id)

            cur = conn.execute(
                "INSERT INTO task_lists (name, create_timestamp) VALUES (?, ?)",
                (task_list.name, int(task_list.create_timestamp)),
            )
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for task_lists insert")
        logger.debug("Task list inserted id=%s name=%r", rowid, task_list.name)
        return int(rowid)

    def upsert_task(self, task: Task) -> int:
        conn = self._get_conn()
        with conn:
            if task.id is not None:
                conn.execute(
                    """
                    UPDATE tasks
                    SET title = ?,
                        description = ?,
                        create_timestamp = ?,
                        done_timestamp = ?,
                        done = ?,
                        idx = ?
                    WHERE id = ?
                    """,
                    (
                        task.title,
                        task.description,
                        int(task.create_timestamp),
                        int(task.done_timestamp),
                        bool(task.done),
                        int(task.index),
                        int(task.id),
                    ),
                )
                logger.debug("Task updated id=%s done=%s", task.id, task.done)
                return int(task.id)

            if task.task_list_id is None:
                raise TaskListNotPersisted("task list owning this task")

            cur = conn.execute(
                """
                INSERT INTO tasks (
                    task_list_id, title, description,
                    create_timestamp, done_timestamp, done, idx
                )
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    int(task.task_list_id),
                    task.title,
                    task.description,
                    int(task.create_timestamp),
                    int(task.done_timestamp),
                    bool(task.done),
                    int(task.index),
                ),
            )
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")
        logger.debug("Task inserted id=%s list=%s idx=%s", rowid, task.task_list_id, task.index)
        return int(rowid)

    def delete_task(self, task_id: int) -> None:
        conn = self._get_conn()
        with conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        if cur.rowcount != 1:
            logger.warning("delete_task id=%s affected %s rows", task_id, cur.rowcount)
        else:
            logger.debug("Task deleted id=%s", task_id)
