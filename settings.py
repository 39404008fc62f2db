"""JSON-based settings persistence for the date picker."""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

from date_text import Valid, format_date, parse_date

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "min_date": None,
    "max_date": None,
    "initial_date": None,
}


def load_settings(path: Optional[str] = None) -> dict:
    """Load settings from disk, returning defaults for missing keys.

    Dates are stored as ``DD-MM-YYYY`` text and come back as ``DateValue``.
    """
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file: expected an object, got %s",
                       type(stored).__name__)
        return settings
    for key in _DEFAULTS:
        raw = stored.get(key)
        if raw is None:
            continue
        result = parse_date(raw) if isinstance(raw, str) else None
        if isinstance(result, Valid):
            settings[key] = result.value
        else:
            logger.warning("Ignoring setting %s: %r is not a DD-MM-YYYY date", key, raw)
    return settings


def save_settings(settings: dict, path: Optional[str] = None) -> None:
    """Persist settings to disk."""
    stored = {
        key: format_date(settings[key]) if settings.get(key) is not None else None
        for key in _DEFAULTS
    }
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(stored, f, indent=2)
