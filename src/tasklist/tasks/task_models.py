# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum, StrEnum

from .errors import InvalidFieldName, InvalidPriority


class Priority(Enum):
    """
    Task priority.

    Each member carries its single-letter code and the ANSI background colour
    used for the table cell.
    """

    CRITICAL = ("C", 101)
    HIGH = ("H", 103)
    NORMAL = ("N", 102)
    LOW = ("L", 104)

    def __init__(self, code: str, background: int) -> None:
        self.code = code
        self.background = background

    @classmethod
    def from_code(cls, raw: str | None) -> Priority:
        code = (raw or "").strip().upper()
        for member in cls:
            if member.code == code:
                return member
        raise InvalidPriority()


class DueTag(Enum):
    """Urgency derived from the task date; never set by the user."""

    IN_TIME = ("I", 102)
    TODAY = ("T", 103)
    OVERDUE = ("O", 101)

    def __init__(self, code: str, background: int) -> None:
        self.code = code
        self.background = background


class EditField(StrEnum):
    PRIORITY = "priority"
    DATE = "date"
    TIME = "time"
    TASK = "task"

    @classmethod
    def from_raw(cls, raw: str | None) -> EditField:
        name = (raw or "").strip().lower()
        if name == "text":
            return cls.TASK
        try:
            return cls(name)
        except ValueError:
            raise InvalidFieldName() from None


@dataclass(slots=True)
class Task:
    priority: Priority
    date: date
    time: time
    due_tag: DueTag
    lines: tuple[str, ...]

    @property
    def date_text(self) -> str:
        return self.date.isoformat()

    @property
    def time_text(self) -> str:
        return self.time.strftime("%H:%M")
