# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ..core.ports import LineIO
from ..core.state import AppState
from ..render.table import render_table
from ..tasks.errors import EmptyTaskText, InvalidActionWord, TaskListError
from ..tasks.task_models import EditField, Priority
from ..tasks.validation import parse_date, parse_time

CommandHandler = Callable[[AppState, LineIO], None]

T = TypeVar("T")

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
TEXT_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"


class CommandRegistry:
    """Action-word registry used by the console loop (add, print, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, io: LineIO) -> None:
        """
        Run the handler for an action word like "add".
        Raises InvalidActionWord when nothing is registered under it.
        """
        name = line.strip().lower()
        handler = self._handlers.get(name)
        if not handler:
            raise InvalidActionWord()
        handler(state, io)

    def build_help(self) -> str:
        lines = ["Available actions:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name:<7} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- prompt helpers ----

def _ask(io: LineIO, prompt: str, parse: Callable[[str], T]) -> T:
    """Re-prompt until `parse` accepts the line; each rejection prints its message."""
    while True:
        io.write(prompt)
        raw = io.read_line()
        try:
            return parse(raw)
        except TaskListError as e:
            io.write(str(e))


def _read_text_lines(io: LineIO) -> list[str]:
    io.write(TEXT_PROMPT)
    lines: list[str] = []
    while True:
        raw = io.read_line()
        if not raw.strip():
            return lines
        lines.append(raw)


def _ask_position(io: LineIO, state: AppState) -> int:
    size = len(state.store)

    def parse(raw: str) -> int:
        try:
            position = int(raw.strip())
        except ValueError:
            position = 0
        state.store.get(position)
        return position

    return _ask(io, f"Input the task number (1-{size}):", parse)


def _print_table(state: AppState, io: LineIO) -> bool:
    """Print the table; returns False when the store is empty."""
    io.write(render_table(state.store.list_tasks(), use_color=state.use_color))
    return len(state.store) > 0


# ---- handlers ----

def cmd_add(state: AppState, io: LineIO) -> None:
    builder = state.store.new_builder()
    _ask(io, PRIORITY_PROMPT, builder.with_priority)
    _ask(io, DATE_PROMPT, builder.with_date)
    _ask(io, TIME_PROMPT, builder.with_time)
    builder.with_lines(_read_text_lines(io))
    try:
        state.store.add(builder.build())
    except EmptyTaskText as e:
        io.write(str(e))


def cmd_print(state: AppState, io: LineIO) -> None:
    _print_table(state, io)


def cmd_edit(state: AppState, io: LineIO) -> None:
    if not _print_table(state, io):
        return
    position = _ask_position(io, state)
    target = _ask(io, FIELD_PROMPT, EditField.from_raw)

    if target is EditField.PRIORITY:
        value: object = _ask(io, PRIORITY_PROMPT, Priority.from_code).code
    elif target is EditField.DATE:
        value = _ask(io, DATE_PROMPT, parse_date).isoformat()
    elif target is EditField.TIME:
        value = _ask(io, TIME_PROMPT, parse_time).strftime("%H:%M")
    else:
        value = _read_text_lines(io)

    try:
        state.store.edit(position, target, value)
    except EmptyTaskText as e:
        io.write(str(e))
        return
    io.write("The task is changed")


def cmd_delete(state: AppState, io: LineIO) -> None:
    if not _print_table(state, io):
        return
    position = _ask_position(io, state)
    state.store.delete(position)
    io.write("The task is deleted")


def cmd_end(state: AppState, io: LineIO) -> None:
    state.running = False
    io.write("Tasklist exiting!")


def cmd_help(state: AppState, io: LineIO) -> None:
    io.write(registry.build_help())


registry.register("add", cmd_add, help_text="Add a task (priority, date, time, text).")
registry.register("print", cmd_print, help_text="Show all tasks as a table.")
registry.register("edit", cmd_edit, help_text="Change one field of a task.")
registry.register("delete", cmd_delete, help_text="Remove a task by its number.")
registry.register("end", cmd_end, help_text="Exit the program.", aliases=["exit", "quit"])
registry.register("help", cmd_help, help_text="Show available actions.", aliases=["?"])
