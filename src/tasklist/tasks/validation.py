# src/tasklist/tasks/validation.py

"""Parsing of user-typed dates, times and task text into canonical values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, time

from .errors import InvalidDate, InvalidTime

DATE_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)
TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)

# Rejected even if calendar arithmetic would roll them over.
KNOWN_INVALID_DATES: frozenset[tuple[int, int, int]] = frozenset({(2021, 2, 29)})
KNOWN_INVALID_TIMES: frozenset[str] = frozenset({"24:00"})


def parse_date(raw: str) -> date:
    """
    Parse ``YYYY-M-D`` (month/day with 1 or 2 digits) into a real calendar date.

    Raises InvalidDate when the text does not match or the date does not exist.
    """
    m = DATE_RE.fullmatch((raw or "").strip())
    if not m:
        raise InvalidDate()
    year, month, day = (int(g) for g in m.groups())
    if (year, month, day) in KNOWN_INVALID_DATES:
        raise InvalidDate()
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDate() from None


def parse_time(raw: str) -> time:
    """Parse ``H:M`` (24-hour clock, 1 or 2 digits each). Raises InvalidTime."""
    text = (raw or "").strip()
    if text in KNOWN_INVALID_TIMES:
        raise InvalidTime()
    m = TIME_RE.fullmatch(text)
    if not m:
        raise InvalidTime()
    hour, minute = int(m.group(1)), int(m.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTime()
    return time(hour, minute)


def prepare_lines(raw_lines: Iterable[str]) -> tuple[str, ...]:
    """Trim every line and drop the blank ones."""
    return tuple(s for s in (line.strip() for line in raw_lines) if s)
