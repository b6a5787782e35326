"""Entity display media storage, one JSON list per owning entity."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .core import media_dir, read_json, write_json

OWNER_TYPES = ("character", "arc", "gamble", "organization", "volume")


def _media_path(owner_type: str, owner_id: int) -> Path:
    return media_dir() / owner_type / f"{owner_id}.json"


def get_media(owner_type: str, owner_id: int) -> list[dict[str, Any]]:
    """Load media for an entity in insertion order. Returns [] if missing."""
    media = read_json(_media_path(owner_type, owner_id), [])
    return media if isinstance(media, list) else []


def save_media(owner_type: str, owner_id: int, media: list[dict[str, Any]]) -> None:
    write_json(_media_path(owner_type, owner_id), media)


def add_media(owner_type: str, owner_id: int, fields: dict[str, Any]) -> dict[str, Any]:
    """Append a media record with the next free id. Returns the record."""
    media = get_media(owner_type, owner_id)
    next_id = max((m.get("id") or 0 for m in media), default=0) + 1
    record = {
        "id": next_id,
        "url": fields["url"],
        "type": fields.get("type", "image"),
        "description": fields.get("description", ""),
        "chapter_number": fields.get("chapter_number"),
        "is_spoiler": fields.get("is_spoiler"),
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    media.append(record)
    save_media(owner_type, owner_id, media)
    return record


def delete_media(owner_type: str, owner_id: int, media_id: int) -> bool:
    media = get_media(owner_type, owner_id)
    remaining = [m for m in media if m.get("id") != media_id]
    if len(remaining) == len(media):
        return False
    save_media(owner_type, owner_id, remaining)
    return True
