# src/tasklist/render/theme.py

"""Colour helpers.

Decisions:
- Priority/due cells are a single space on an ANSI background colour.
- "auto" mode enables colour only for a TTY, unless FORCE_COLOR is set.
- NO_COLOR disables colour in every mode but "always".
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

RESET = "\033[0m"
COLOR_MODES = ("auto", "always", "never")


def _truthy(raw: str | None) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


def color_enabled(mode: str = "auto", stream: TextIO | None = None) -> bool:
    """Resolve a colour mode (auto/always/never) against the environment."""
    mode = (mode or "auto").strip().lower()
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR") is not None:
        return False
    if _truthy(os.environ.get("FORCE_COLOR")):
        return True
    stream = stream if stream is not None else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def block(background: int) -> str:
    """One blank cell painted with an ANSI background colour code (e.g. 101)."""
    return f"\033[{background}m {RESET}"


def badge(code: str, background: int, use_color: bool) -> str:
    """Single-character cell: coloured block, or the plain letter code."""
    return block(background) if use_color else code
