# tests/test_task_models.py

from __future__ import annotations

import pytest

from rodo.tasks.errors import IndexOutOfRange, TaskListNotPersisted
from rodo.tasks.task_models import Task, TaskList

from .fakes import RecordingStore


def _task(index: int, title: str = "t", **kw) -> Task:
    return Task(title=title, index=index, create_timestamp=1, **kw)


def test_next_index_starts_at_one_and_follows_last_task() -> None:
    tl = TaskList(create_timestamp=1)
    assert tl.next_index() == 1

    tl.add_task(_task(1))
    tl.add_task(_task(2))
    assert tl.next_index() == 3

    # gaps are kept; numbering continues from the last index
    tl.tasks.pop(0)
    assert tl.next_index() == 3


@pytest.mark.parametrize("index", [0, -1, 3])
def test_out_of_range_index_leaves_list_untouched(index: int) -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1, id=7, tasks=[_task(1, id=1), _task(2, id=2)])

    with pytest.raises(IndexOutOfRange):
        tl.remove_task(index, store)
    with pytest.raises(IndexOutOfRange):
        tl.done_task(index, now=5)
    with pytest.raises(IndexOutOfRange):
        tl.undone_task(index)

    assert [t.index for t in tl.tasks] == [1, 2]
    assert all(not t.done for t in tl.tasks)
    assert store.calls == []


def test_index_error_on_empty_list_mentions_empty() -> None:
    tl = TaskList(create_timestamp=1)
    with pytest.raises(IndexOutOfRange, match="empty"):
        tl.done_task(1, now=5)


def test_remove_deletes_by_id_immediately() -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1, id=7, tasks=[_task(1, id=11), _task(2, id=12)])

    removed = tl.remove_task(1, store)

    assert removed.id == 11
    assert [t.id for t in tl.tasks] == [12]
    assert store.calls == [("delete_task", 11)]


def test_remove_unsaved_task_skips_store() -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1, tasks=[_task(1)])
    tl.remove_task(1, store)
    assert tl.tasks == []
    assert store.calls == []


def test_done_then_undone_resets_timestamp() -> None:
    tl = TaskList(create_timestamp=1, tasks=[_task(1)])

    tl.done_task(1, now=123456)
    assert tl.tasks[0].done is True
    assert tl.tasks[0].done_timestamp == 123456

    tl.undone_task(1)
    assert tl.tasks[0].done is False
    assert tl.tasks[0].done_timestamp == 0


def test_commit_writes_parent_before_children_and_assigns_ids() -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1, name="x", tasks=[_task(1), _task(2)])

    list_id = tl.commit(store)

    assert store.names() == ["upsert_task_list", "upsert_task", "upsert_task"]
    assert tl.id == list_id
    assert all(t.task_list_id == list_id for t in tl.tasks)
    assert all(t.id is not None for t in tl.tasks)
    # child upserts already carried the parent id
    assert [c[1][1] for c in store.calls[1:]] == [list_id, list_id]


def test_second_commit_keeps_ids() -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1, tasks=[_task(1)])
    tl.commit(store)
    first = (tl.id, tl.tasks[0].id)

    tl.commit(store)

    assert (tl.id, tl.tasks[0].id) == first


def test_add_task_adopts_list_id() -> None:
    tl = TaskList(create_timestamp=1, id=3)
    t = _task(1)
    tl.add_task(t)
    assert t.task_list_id == 3


def test_set_active_requires_persisted_list() -> None:
    store = RecordingStore()
    tl = TaskList(create_timestamp=1)
    with pytest.raises(TaskListNotPersisted):
        tl.set_active(store)
    assert store.calls == []

    tl.commit(store)
    tl.set_active(store)
    assert store.active == tl.id
