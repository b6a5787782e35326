"""Chapter variant selection.

A variant group holds every chapter-tagged depiction of one entity, e.g.
a character's portraits as the story reveals more about them. The current
variant is the most advanced one the viewer has reached:

  - candidates are variants without a chapter or with chapter <= effective progress
  - the highest chapter wins; untagged variants only win when no tagged one qualifies
  - equal chapters keep input order (first one wins)
  - no candidate → None; a variant past the viewer's progress is never picked
"""

import logging
from typing import Any, Iterable, Sequence

from .models import ChapterVariant, ProgressState, pick

logger = logging.getLogger(__name__)


def order_variants(variants: Iterable[ChapterVariant]) -> list[ChapterVariant]:
    """Sort by chapter ascending with untagged variants last. Stable."""
    return sorted(
        variants,
        key=lambda v: (v.chapter_number is None, v.chapter_number or 0),
    )


def select_index(variants: Sequence[ChapterVariant], progress: ProgressState) -> int | None:
    """Return the index of the current variant in variants, or None."""
    effective = progress.effective_progress
    best: int | None = None
    best_chapter: int | None = None
    for i, variant in enumerate(variants):
        chapter = variant.chapter_number
        if chapter is not None and chapter > effective:
            continue
        if best is None:
            best, best_chapter = i, chapter
        elif chapter is not None and (best_chapter is None or chapter > best_chapter):
            best, best_chapter = i, chapter
    logger.debug(
        "selected variant index=%s chapter=%s of %d at progress %d",
        best, best_chapter, len(variants), effective,
    )
    return best


def select_current(
    variants: Sequence[ChapterVariant], progress: ProgressState
) -> ChapterVariant | None:
    """Pick the most advanced variant the viewer has reached, or None."""
    index = select_index(variants, progress)
    if index is None:
        return None
    return variants[index]


def coerce_variants(records: Iterable[dict[str, Any]]) -> list[ChapterVariant]:
    """Wrap raw media records as variants; the record itself is the payload."""
    return [
        ChapterVariant(
            id=record.get("id"),
            chapter_number=pick(record, "chapterNumber", "chapter_number"),
            is_spoiler=pick(record, "isSpoiler", "is_spoiler"),
            payload=record,
        )
        for record in records
    ]
