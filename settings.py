"""JSON-based settings persistence for the mini datepicker."""

import json
import logging
import os
from datetime import date

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-datepicker-settings.json")

_DEFAULTS = {
    "locale": "en_US",
    "week_start": None,
    "allow_adjacent_selection": True,
    "last_selected": None,
    "window_x": None,
    "window_y": None,
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return settings

    if isinstance(stored.get("locale"), str) and stored["locale"].strip():
        settings["locale"] = stored["locale"]
    ws = stored.get("week_start")
    if isinstance(ws, int) and not isinstance(ws, bool) and 0 <= ws <= 6:
        settings["week_start"] = ws
    if isinstance(stored.get("allow_adjacent_selection"), bool):
        settings["allow_adjacent_selection"] = stored["allow_adjacent_selection"]
    if isinstance(stored.get("last_selected"), str):
        try:
            date.fromisoformat(stored["last_selected"])
            settings["last_selected"] = stored["last_selected"]
        except ValueError:
            pass
    for key in ("window_x", "window_y"):
        if isinstance(stored.get(key), int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or _SETTINGS_PATH
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def last_selected(settings: dict) -> date | None:
    value = settings.get("last_selected")
    return date.fromisoformat(value) if value else None
