"""Viewer spoiler settings (reading progress, tolerance, show-all, thresholds)."""

import logging
from pathlib import Path
from typing import Any

from spoiler_gate import DEFAULT_UNTAGGED_THRESHOLD

from .core import data_dir, read_json, write_json

logger = logging.getLogger(__name__)

MAX_CHAPTER = 539

_CONFIG_DEFAULTS: dict[str, Any] = {
    "reading_progress": 1,
    "chapter_tolerance": 0,  # 0 = no override
    "show_all_spoilers": False,
    "untagged_hide_threshold": DEFAULT_UNTAGGED_THRESHOLD,
    "max_chapter": MAX_CHAPTER,
}

# Older clients stored these under the frontend's names.
_LEGACY_KEYS = {
    "userProgress": "reading_progress",
    "chapterTolerance": "chapter_tolerance",
    "showAllSpoilers": "show_all_spoilers",
}


def _valid_setting(value: Any, default: Any) -> bool:
    """Stored value has the default's type; ints must be non-negative."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read settings, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    stored = read_json(_config_path(), {})
    if not isinstance(stored, dict):
        return config
    for old, new in _LEGACY_KEYS.items():
        if old in stored and new not in stored:
            stored[new] = stored[old]
    for key, default in _CONFIG_DEFAULTS.items():
        if key not in stored:
            continue
        if _valid_setting(stored[key], default):
            config[key] = stored[key]
        else:
            logger.warning(f"Ignoring invalid stored setting {key}={stored[key]!r}")
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into settings and persist. Returns full settings."""
    config = get_config()
    for key, value in fields.items():
        if key in _CONFIG_DEFAULTS and value is not None:
            config[key] = value
    write_json(_config_path(), config)
    return config
