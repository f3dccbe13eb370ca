# src/tasklist/render/table.py

"""Fixed-width table rendering for the task list.

Layout (text column is 44 wide, long lines wrap into extra rows):

    +----+------------+-------+---+---+--------------------------------------------+
    | N  |    Date    | Time  | P | D |                   Task                     |
    +----+------------+-------+---+---+--------------------------------------------+
    | 1  | 2023-01-01 | 09:05 | H | T |buy milk                                    |
    +----+------------+-------+---+---+--------------------------------------------+
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..tasks.task_models import Task
from .theme import badge

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No tasks have been input"

NUMBER_WIDTH = 2
DATE_WIDTH = 10
TIME_WIDTH = 5
TEXT_WIDTH = 44

SEPARATOR = (
    "+"
    + "+".join("-" * (w + 2) for w in (NUMBER_WIDTH, DATE_WIDTH, TIME_WIDTH, 1, 1))
    + "+"
    + "-" * TEXT_WIDTH
    + "+"
)
HEADER = "| N  |    Date    | Time  | P | D |" + " " * 19 + "Task" + " " * 21 + "|"
BLANK_PREFIX = (
    "|"
    + "|".join(" " * (w + 2) for w in (NUMBER_WIDTH, DATE_WIDTH, TIME_WIDTH, 1, 1))
    + "|"
)


def wrap_line(line: str, width: int = TEXT_WIDTH) -> list[str]:
    """Cut `line` into `width`-sized chunks; the last one is right-padded."""
    chunks = [line[i : i + width] for i in range(0, len(line), width)] or [""]
    chunks[-1] = chunks[-1].ljust(width)
    return chunks


def _task_rows(position: int, task: Task, use_color: bool) -> Iterator[str]:
    prefix = (
        f"| {position:<{NUMBER_WIDTH}} "
        f"| {task.date_text:<{DATE_WIDTH}} "
        f"| {task.time_text:<{TIME_WIDTH}} "
        f"| {badge(task.priority.code, task.priority.background, use_color)} "
        f"| {badge(task.due_tag.code, task.due_tag.background, use_color)} |"
    )
    chunks = [chunk for line in task.lines for chunk in wrap_line(line)]
    for i, chunk in enumerate(chunks):
        yield (prefix if i == 0 else BLANK_PREFIX) + chunk + "|"


def render_table(rows: Iterable[tuple[int, Task]], *, use_color: bool = True) -> str:
    """Render (position, task) pairs as a bordered table, one string, no trailing newline."""
    out: list[str] = []
    for position, task in rows:
        if not out:
            out.extend((SEPARATOR, HEADER, SEPARATOR))
        out.extend(_task_rows(position, task, use_color))
        out.append(SEPARATOR)

    if not out:
        return EMPTY_MESSAGE

    logger.debug("Rendered task table rows=%d color=%s", len(out), use_color)
    return "\n".join(out)
