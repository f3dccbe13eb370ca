# tests/test_due.py

from __future__ import annotations

from datetime import date, timedelta, timezone

import pytest

from tasklist.tasks.due import REFERENCE_TZ, SystemClock, classify
from tasklist.tasks.task_models import DueTag


@pytest.mark.parametrize("reference", [date(2023, 1, 1), date(2024, 2, 29), date(1999, 12, 31)])
def test_classify_relative_to_reference(reference: date) -> None:
    assert classify(reference + timedelta(days=1), reference) is DueTag.IN_TIME
    assert classify(reference, reference) is DueTag.TODAY
    assert classify(reference - timedelta(days=1), reference) is DueTag.OVERDUE


def test_classify_far_dates() -> None:
    ref = date(2023, 6, 15)
    assert classify(date(2030, 1, 1), ref) is DueTag.IN_TIME
    assert classify(date(2000, 1, 1), ref) is DueTag.OVERDUE


def test_system_clock_uses_fixed_utc_plus_3() -> None:
    assert REFERENCE_TZ.utcoffset(None) == timedelta(hours=3)
    now = SystemClock().now()
    assert now.utcoffset() == timedelta(hours=3)
    assert SystemClock(timezone.utc).now().utcoffset() == timedelta(0)
