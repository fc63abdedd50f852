# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from rodo.core.application import Application
from rodo.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """cli.main.main() reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI entrypoint.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="rodo",
        log_level="WARNING",
        log_to_file=False,
        color=False,
        data_dir=tmp_path,
        db_path=tmp_path / "rodo.sqlite",
        log_path=tmp_path / "rodo.log",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> Iterator[TaskStore]:
    """Real SQLite store in tmp_path; its correctness is part of what we test."""
    with TaskStore(settings.db_path) as s:
        yield s


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(start=1_700_000_000_000)


@pytest.fixture()
def app(store: TaskStore, clock: FakeClock) -> Application:
    return Application(store, clock=clock)
