# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings, resolves the
colour mode and wires the clock and the task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..render.theme import color_enabled
from ..tasks.due import SystemClock
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and clock are injectable for tests; None falls back to
    get_settings() and the UTC+3 system clock.
    """
    if settings is None:
        settings = get_settings()

    use_color = color_enabled(getattr(settings, "color_mode", "auto"))
    state = AppState(
        settings=settings,
        store=TaskStore(clock or SystemClock()),
        use_color=use_color,
    )
    logger.debug("State created (color=%s).", use_color)
    return state
