# tests/test_task_store.py

from __future__ import annotations

from datetime import date

import pytest

from tasklist.tasks.errors import (
    EmptyTaskText,
    InvalidDate,
    InvalidFieldName,
    InvalidTime,
    OutOfRangePosition,
)
from tasklist.tasks.task_models import DueTag, EditField, Priority, Task
from tasklist.tasks.task_store import TaskStore

from .fakes import FixedClock


def _add(store: TaskStore, text: str, *, priority: str = "N", day: str = "2023-1-1") -> Task:
    return store.add_task(priority=priority, date=day, time="12:00", lines=[text])


def test_add_task_end_to_end(store: TaskStore) -> None:
    task = store.add_task(priority="H", date="2023-1-1", time="9:5", lines=["buy milk"])
    assert len(store) == 1
    assert task.due_tag is DueTag.TODAY
    assert task.date_text == "2023-01-01"
    assert task.time_text == "09:05"
    assert store.get(1) is task


def test_add_blank_task_is_rejected(store: TaskStore) -> None:
    with pytest.raises(EmptyTaskText) as exc:
        store.add_task(priority="L", date="2023-1-1", time="9:00", lines=["", "   "])
    assert str(exc.value) == "The task is blank"
    assert len(store) == 0


def test_add_with_invalid_date_stores_nothing(store: TaskStore) -> None:
    with pytest.raises(InvalidDate):
        store.add_task(priority="L", date="2021-2-29", time="9:00", lines=["x"])
    assert len(store) == 0


def test_list_is_restartable_and_ordered(store: TaskStore) -> None:
    for text in ("a", "b", "c"):
        _add(store, text)
    listing = store.list_tasks()
    first = [(pos, t.lines[0]) for pos, t in listing]
    second = [(pos, t.lines[0]) for pos, t in listing]
    assert first == second == [(1, "a"), (2, "b"), (3, "c")]
    assert len(listing) == 3


@pytest.mark.parametrize("k", [1, 3, 5])
def test_delete_renumbers_contiguously(store: TaskStore, k: int) -> None:
    for i in range(1, 6):
        _add(store, f"task {i}")
    removed = store.delete(k)
    assert removed.lines == (f"task {k}",)

    positions = [pos for pos, _ in store.list_tasks()]
    assert positions == [1, 2, 3, 4]
    texts = [t.lines[0] for _, t in store.list_tasks()]
    assert f"task {k}" not in texts
    assert texts == [f"task {i}" for i in range(1, 6) if i != k]


@pytest.mark.parametrize("position", [0, -1, 3])
def test_out_of_range_positions(store: TaskStore, position: int) -> None:
    _add(store, "a")
    _add(store, "b")
    with pytest.raises(OutOfRangePosition):
        store.delete(position)
    with pytest.raises(OutOfRangePosition):
        store.edit(position, "priority", "C")
    assert len(store) == 2


def test_edit_checks_position_before_field(store: TaskStore) -> None:
    _add(store, "a")
    with pytest.raises(OutOfRangePosition):
        store.edit(2, "bogus", "x")
    with pytest.raises(InvalidFieldName):
        store.edit(1, "bogus", "x")


def test_edit_replaces_single_field(store: TaskStore) -> None:
    task = _add(store, "a", priority="L")
    store.edit(1, "priority", "c")
    assert task.priority is Priority.CRITICAL
    store.edit(1, EditField.TIME, "7:3")
    assert task.time_text == "07:03"
    store.edit(1, "task", ["  first ", "", "second"])
    assert task.lines == ("first", "second")
    assert task.date_text == "2023-01-01"


def test_edit_date_refreshes_due_tag_with_current_reference() -> None:
    clock = FixedClock(date(2023, 1, 1))
    store = TaskStore(clock)
    task = store.add_task(priority="N", date="2023-1-5", time="10:00", lines=["x"])
    assert task.due_tag is DueTag.IN_TIME

    clock.current = date(2023, 1, 10)
    store.edit(1, "date", "2023-1-10")
    assert task.date_text == "2023-01-10"
    assert task.due_tag is DueTag.TODAY

    store.edit(1, "date", "2023-1-9")
    assert task.due_tag is DueTag.OVERDUE


def test_rejected_edit_leaves_task_untouched(store: TaskStore) -> None:
    task = _add(store, "keep me")
    before = (task.priority, task.date, task.time, task.due_tag, task.lines)
    with pytest.raises(InvalidDate):
        store.edit(1, "date", "2023-2-30")
    with pytest.raises(InvalidTime):
        store.edit(1, "time", "24:00")
    with pytest.raises(EmptyTaskText):
        store.edit(1, "task", ["   "])
    assert (task.priority, task.date, task.time, task.due_tag, task.lines) == before
