# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from ..core.ports import Clock
from .builder import TaskBuilder
from .due import SystemClock, classify
from .errors import EmptyTaskText, OutOfRangePosition
from .task_models import EditField, Priority, Task
from .validation import parse_date, parse_time, prepare_lines

logger = logging.getLogger(__name__)


class TaskListing:
    """
    Live, restartable view over the store: iterating yields (position, task)
    pairs with 1-based positions in current order.
    """

    def __init__(self, tasks: Sequence[Task]) -> None:
        self._tasks = tasks

    def __iter__(self) -> Iterator[tuple[int, Task]]:
        return enumerate(self._tasks, start=1)

    def __len__(self) -> int:
        return len(self._tasks)


class TaskStore:
    """
    In-memory ordered task collection for one session.

    Positions are 1-based and always contiguous. Every mutator validates
    before it touches the list, so a rejected call leaves the store as it was.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def clock(self) -> Clock:
        return self._clock

    def new_builder(self) -> TaskBuilder:
        return TaskBuilder(self._clock)

    # ---- helpers ----

    def _index(self, position: int) -> int:
        if not 1 <= position <= len(self._tasks):
            raise OutOfRangePosition()
        return position - 1

    # ---- public API ----

    def add(self, task: Task) -> Task:
        if not task.lines:
            raise EmptyTaskText()
        self._tasks.append(task)
        logger.info(
            "Task added position=%d priority=%s due=%s",
            len(self._tasks),
            task.priority.code,
            task.due_tag.code,
        )
        return task

    def add_task(
        self,
        *,
        priority: str,
        date: str,
        time: str,
        lines: Iterable[str],
    ) -> Task:
        task = (
            self.new_builder()
            .with_priority(priority)
            .with_date(date)
            .with_time(time)
            .with_lines(lines)
            .build()
        )
        return self.add(task)

    def get(self, position: int) -> Task:
        return self._tasks[self._index(position)]

    def edit(self, position: int, field: str | EditField, value: Any) -> Task:
        """
        Replace one field of the task at `position`.

        `value` is the raw user text for priority/date/time and an iterable of
        lines for the task text. A date edit re-derives the due tag from the
        clock's current reference date.
        """
        task = self._tasks[self._index(position)]
        target = EditField.from_raw(field)

        if target is EditField.PRIORITY:
            task.priority = Priority.from_code(value)
        elif target is EditField.DATE:
            new_date = parse_date(value)
            task.due_tag = classify(new_date, self._clock.today())
            task.date = new_date
        elif target is EditField.TIME:
            task.time = parse_time(value)
        else:
            raw_lines = [value] if isinstance(value, str) else value
            lines = prepare_lines(raw_lines)
            if not lines:
                raise EmptyTaskText()
            task.lines = lines

        logger.info("Task edited position=%d field=%s", position, target.value)
        return task

    def delete(self, position: int) -> Task:
        task = self._tasks.pop(self._index(position))
        logger.info("Task deleted position=%d remaining=%d", position, len(self._tasks))
        return task

    def list_tasks(self) -> TaskListing:
        return TaskListing(self._tasks)
