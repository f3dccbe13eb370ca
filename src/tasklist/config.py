# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Environment variables (prefix TASKLIST_):
- TASKLIST_APP_NAME     display name (default: tasklist)
- TASKLIST_LOG_LEVEL    console log level (default: WARNING)
- TASKLIST_DATA_DIR     local data directory for logs (default: .local/tasklist)
- TASKLIST_LOG_TO_FILE  write <data_dir>/tasklist.log (default: true)
- TASKLIST_COLOR        auto | always | never (default: auto)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .render.theme import COLOR_MODES

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Output ----
    color_mode: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasklist") or "tasklist",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            color_mode=_env_choice(_k("COLOR"), COLOR_MODES, "auto"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/tasklist")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
