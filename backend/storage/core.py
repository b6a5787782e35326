"""Storage initialization, path helpers, and JSON file helpers."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_data_dir: Path | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir

    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    media_dir().mkdir(exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def media_dir() -> Path:
    return data_dir() / "media"


def read_json(path: Path, default: Any) -> Any:
    """Load a JSON file. Missing or unreadable files yield default."""
    if not path.is_file():
        return default
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring corrupt JSON file {path}: {e}")
        return default


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
