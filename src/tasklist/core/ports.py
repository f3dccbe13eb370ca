# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the clock and the console swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the reference date used for due-status classification."""
    def today(self) -> date: ...


class LineIO(Protocol):
    """
    Line-oriented text channel.

    read_line() returns one line without the trailing newline and raises
    EOFError when the input is exhausted.
    """

    def read_line(self) -> str: ...
    def write(self, text: str) -> None: ...
