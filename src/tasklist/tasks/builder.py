# src/tasklist/tasks/builder.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, time

from ..core.ports import Clock
from .due import SystemClock, classify
from .errors import EmptyTaskText, InvalidDate, InvalidTime
from .task_models import DueTag, Priority, Task
from .validation import parse_date, parse_time, prepare_lines


class TaskBuilder:
    """
    Staged construction of a Task.

    Fields are set one at a time from raw user text (each setter validates and
    raises on bad input without touching the builder). build() only succeeds
    once date, time and at least one text line are present; priority falls
    back to LOW.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._priority: Priority = Priority.LOW
        self._date: date | None = None
        self._time: time | None = None
        self._due_tag: DueTag | None = None
        self._lines: list[str] = []

    def with_priority(self, raw: str) -> TaskBuilder:
        self._priority = Priority.from_code(raw)
        return self

    def with_date(self, raw: str) -> TaskBuilder:
        parsed = parse_date(raw)
        self._date = parsed
        self._due_tag = classify(parsed, self._clock.today())
        return self

    def with_time(self, raw: str) -> TaskBuilder:
        self._time = parse_time(raw)
        return self

    def add_line(self, raw: str) -> bool:
        """Append one line of text; returns False (and ignores it) when blank."""
        prepared = prepare_lines([raw])
        if not prepared:
            return False
        self._lines.extend(prepared)
        return True

    def with_lines(self, raw_lines: Iterable[str]) -> TaskBuilder:
        self._lines.extend(prepare_lines(raw_lines))
        return self

    def build(self) -> Task:
        if self._date is None or self._due_tag is None:
            raise InvalidDate()
        if self._time is None:
            raise InvalidTime()
        if not self._lines:
            raise EmptyTaskText()
        return Task(
            priority=self._priority,
            date=self._date,
            time=self._time,
            due_tag=self._due_tag,
            lines=tuple(self._lines),
        )
