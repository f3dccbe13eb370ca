# src/tasklist/tasks/errors.py

"""User-facing error kinds.

Every error is recoverable: the console prints ``str(exc)`` (one line) and
re-prompts or aborts the current action.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class; ``message`` is the default one-line text shown to the user."""

    message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidDate(TaskListError):
    message = "The input date is invalid"


class InvalidTime(TaskListError):
    message = "The input time is invalid"


class InvalidPriority(TaskListError):
    message = "The input priority is invalid"


class EmptyTaskText(TaskListError):
    message = "The task is blank"


class OutOfRangePosition(TaskListError):
    message = "Invalid task number"


class InvalidFieldName(TaskListError):
    message = "Invalid field"


class InvalidActionWord(TaskListError):
    message = "The input action is invalid"
