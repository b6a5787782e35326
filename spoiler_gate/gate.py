"""Spoiler gate — decides whether a content item is hidden from a viewer.

Decision order:
  1. show_all set           → visible
  2. spoiler chapter known  → hidden iff chapter > effective progress
  3. server spoiler flag    → hidden iff flag
  4. nothing known          → hidden iff effective progress <= untagged threshold

Step 4 protects viewers who have barely started from untagged legacy
content. The threshold defaults to 5 and is a settings value
(untagged_hide_threshold) in the service.

Every function here is a pure function of its arguments; callers may
re-evaluate on every render.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from .models import GatedItem, ProgressState, normalize_chapter, pick

if TYPE_CHECKING:
    from .reveal import RevealSession

DEFAULT_UNTAGGED_THRESHOLD = 5


def should_hide(
    item: GatedItem,
    progress: ProgressState,
    untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
) -> bool:
    """Return True if item must be hidden behind a spoiler overlay."""
    if progress.show_all:
        return False
    effective = progress.effective_progress
    if item.spoiler_chapter is not None:
        return item.spoiler_chapter > effective
    if item.is_spoiler is not None:
        return item.is_spoiler
    return effective <= untagged_threshold


def is_visible(
    item: GatedItem,
    progress: ProgressState,
    untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
) -> bool:
    return not should_hide(item, progress, untagged_threshold)


def gated_item(record: dict[str, Any], key_field: str = "id") -> GatedItem:
    """Build a GatedItem from a raw upstream record.

    Accepts camelCase (API) and snake_case (storage) field names. Records
    without an explicit spoiler chapter fall back to their chapter number,
    the way timeline events are gated.
    """
    chapter = normalize_chapter(pick(record, "spoilerChapter", "spoiler_chapter"))
    if chapter is None:
        chapter = pick(record, "chapterNumber", "chapter_number")
    return GatedItem(
        key=record.get(key_field),
        spoiler_chapter=chapter,
        is_spoiler=pick(record, "isSpoiler", "is_spoiler"),
    )


def filter_visible(
    records: Iterable[dict[str, Any]],
    progress: ProgressState,
    session: RevealSession | None = None,
    untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
    key_field: str = "id",
) -> list[dict[str, Any]]:
    """Keep the records a viewer may see. Revealed keys in session pass."""
    visible = []
    for record in records:
        item = gated_item(record, key_field)
        if session is not None:
            hidden = session.should_hide(item, progress, untagged_threshold)
        else:
            hidden = should_hide(item, progress, untagged_threshold)
        if not hidden:
            visible.append(record)
    return visible


def spoiler_label(item: GatedItem, progress: ProgressState) -> str:
    """Caption for the reveal overlay of a hidden item."""
    if item.spoiler_chapter is not None:
        return (
            f"Chapter {item.spoiler_chapter} spoiler - you're at "
            f"Chapter {progress.effective_progress}. Click to reveal."
        )
    return "Spoiler content. Click to reveal."
