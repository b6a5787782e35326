"""Create demo media and settings for development/testing."""

import shutil

from backend import storage

# (owner_type, owner_id, url, chapter_number, description)
DEMO_MEDIA = [
    ("character", 1, "/demo/baku-ch1.png", 1, "Baku at the opening gamble"),
    ("character", 1, "/demo/baku-ch45.png", 45, "Baku after the tower"),
    ("character", 1, "/demo/baku-ch120.png", 120, "Baku during the Doti Hill gamble"),
    ("character", 1, "/demo/baku-fanart.png", None, "Untagged fan art"),
    ("character", 2, "/demo/kaji-ch10.png", 10, "Kaji, first appearance"),
    ("character", 2, "/demo/kaji-ch90.png", 90, "Kaji in the later arcs"),
    ("arc", 1, "/demo/arc-1-cover.png", 3, "Arc cover"),
]


def create_demo_data() -> None:
    """Wipe existing media and create fresh demo media + settings."""
    if storage.media_dir().exists():
        shutil.rmtree(storage.media_dir())
    storage.media_dir().mkdir(parents=True, exist_ok=True)

    for owner_type, owner_id, url, chapter, description in DEMO_MEDIA:
        storage.add_media(owner_type, owner_id, {
            "url": url,
            "type": "image",
            "description": description,
            "chapter_number": chapter,
        })

    storage.update_config({"reading_progress": 60, "chapter_tolerance": 0, "show_all_spoilers": False})
