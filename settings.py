"""JSON-based settings for the mini calendar (read-only)."""

import json
import locale
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-calendar-settings.json")

_DEFAULTS = {
    "first_weekday": 0,  # Monday
    "locale": None,
    "dark_mode": False,
    "show_tray": True,
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    path = path or _SETTINGS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings

    weekday = stored.get("first_weekday")
    if isinstance(weekday, int) and not isinstance(weekday, bool) and 0 <= weekday <= 6:
        settings["first_weekday"] = weekday
    elif weekday is not None:
        logger.warning("Invalid first_weekday %r, using Monday", weekday)
    name = stored.get("locale")
    if isinstance(name, str) and name:
        if locale_supported(name):
            settings["locale"] = name
        else:
            logger.warning("Unsupported locale %r, using the system default", name)
    for key in ("dark_mode", "show_tray"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    return settings


def locale_supported(name: str) -> bool:
    """Return True if ``name`` can be set for LC_TIME; the current setting is kept."""
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, name)
    except locale.Error:
        return False
    finally:
        locale.setlocale(locale.LC_TIME, previous)
    return True
