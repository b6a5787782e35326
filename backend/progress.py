"""Progress source — turns stored viewer settings into a ProgressState.

Anonymous or never-synced viewers pass their progress per request; it
replaces the stored reading_progress but keeps the stored tolerance and
show-all switch.
"""

from typing import Any

from backend import storage
from spoiler_gate import ProgressState


def progress_from_config(config: dict[str, Any], raw_progress: int | None = None) -> ProgressState:
    return ProgressState(
        raw_progress=config["reading_progress"] if raw_progress is None else raw_progress,
        tolerance_override=config["chapter_tolerance"],
        show_all=config["show_all_spoilers"],
    )


def current_progress(raw_progress: int | None = None) -> ProgressState:
    """ProgressState from the stored settings, optionally overriding raw progress."""
    return progress_from_config(storage.get_config(), raw_progress)


def untagged_threshold() -> int:
    return storage.get_config()["untagged_hide_threshold"]
