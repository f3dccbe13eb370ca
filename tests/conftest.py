# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore

from .fakes import FixedClock


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(date(2023, 1, 1))


@pytest.fixture()
def store(clock: FixedClock) -> TaskStore:
    return TaskStore(clock)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="WARNING",
        log_to_file=False,
        color_mode="never",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with a fixed clock and plain (uncoloured) table output."""
    return AppState(settings=settings, store=store, use_color=False)
