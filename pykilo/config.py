"""Persistent JSON config helpers.

Stores editor preferences: tab stop, quit confirmation count, message
timeout, theme, and log level. All access is defensive: malformed or
missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .rows import TAB_STOP

APP_NAME = "pykilo"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_QUIT_TIMES = 3
DEFAULT_MESSAGE_TIMEOUT = 5.0
DEFAULT_THEME_NAME = "default"
DEFAULT_LOG_LEVEL = "WARNING"
MAX_TAB_STOP = 32
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class EditorSettings:
    tab_stop: int = TAB_STOP
    quit_times: int = DEFAULT_QUIT_TIMES
    message_timeout: float = DEFAULT_MESSAGE_TIMEOUT
    theme: str = DEFAULT_THEME_NAME
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, default: int, minimum: int, maximum: int | None = None) -> int:
    """Accept real ints inside the bounds; booleans and anything else fall back."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum or (maximum is not None and value > maximum):
        return default
    return value


def _coerce_positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def _coerce_log_level(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    return candidate if candidate in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def settings_from_config(data: dict[str, object]) -> EditorSettings:
    theme = data.get("theme")
    return EditorSettings(
        tab_stop=_coerce_int(data.get("tab_stop"), TAB_STOP, 1, MAX_TAB_STOP),
        quit_times=_coerce_int(data.get("quit_times"), DEFAULT_QUIT_TIMES, 0),
        message_timeout=_coerce_positive_float(data.get("message_timeout"), DEFAULT_MESSAGE_TIMEOUT),
        theme=theme if isinstance(theme, str) and theme.strip() else DEFAULT_THEME_NAME,
        log_level=_coerce_log_level(data.get("log_level")),
    )


def load_settings() -> EditorSettings:
    """Read ``config.json`` and return validated settings."""
    return settings_from_config(load_config())
