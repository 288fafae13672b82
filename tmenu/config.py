"""Persistent JSON config helpers.

Reads the applications directory, UI theme, and description-matching
preference. All access is defensive: malformed or missing config falls
back to defaults. The launcher never writes this file.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .catalog import DEFAULT_APPLICATIONS_DIR

APP_NAME = "tmenu"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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


def load_applications_dir() -> Path:
    """Return the configured shortcut directory, or the system default."""
    value = load_config().get("applications_dir")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_APPLICATIONS_DIR
    return Path(value.strip()).expanduser()


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_search_descriptions() -> bool:
    """Return whether descriptions participate in matching.

    Only explicit booleans are honored; anything else means ``True``.
    """
    value = load_config().get("search_descriptions")
    return value if isinstance(value, bool) else True
