# src/tasklist/tasks/due.py

"""
Due-status classification.

"Today" is always taken at a fixed UTC+3 offset, independent of the host
timezone.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from .task_models import DueTag

REFERENCE_TZ = timezone(timedelta(hours=3))


class SystemClock:
    """Wall clock in REFERENCE_TZ."""

    def __init__(self, tz: timezone = REFERENCE_TZ) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()


def classify(task_date: date, reference_date: date) -> DueTag:
    diff = (task_date - reference_date).days
    if diff > 0:
        return DueTag.IN_TIME
    if diff == 0:
        return DueTag.TODAY
    return DueTag.OVERDUE
