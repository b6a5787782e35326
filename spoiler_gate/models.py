"""Core domain models.

The gate, the variant selector and the cycling controller all operate on
these types. Pydantic validates and serialises them at every data boundary.

Chapter numbers coming from upstream records are normalised on the way in:
anything that is not a positive integer is treated as "no chapter" rather
than rejected, so bad data degrades to "always eligible" instead of hiding
everything.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

ItemKey = int | str


def normalize_chapter(value: Any) -> int | None:
    """Return value as a positive chapter number, or None if it isn't one.

    12 → 12, 12.0 → 12, 0 / -3 / 2.5 / "12" / True → None
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    if value is not None:
        logger.debug("treating malformed chapter number %r as absent", value)
    return None


def _normalize_flag(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("ignoring non-boolean spoiler flag %r", value)
    return None


def _normalize_key(value: Any) -> ItemKey | None:
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("dropping unusable item key %r", value)
    return None


def pick(record: dict[str, Any], *names: str) -> Any:
    """Return the first non-None value among record[name] for names."""
    for name in names:
        value = record.get(name)
        if value is not None:
            return value
    return None


class ProgressState(BaseModel):
    """A viewer's reading progress as seen by the gate.

    tolerance_override of 0 means "no override", never "override to chapter 0".
    """

    model_config = ConfigDict(frozen=True)

    raw_progress: int = Field(default=0, ge=0)
    tolerance_override: int = Field(default=0, ge=0)
    show_all: bool = False

    @property
    def effective_progress(self) -> int:
        if self.tolerance_override > 0:
            return self.tolerance_override
        return self.raw_progress


class GatedItem(BaseModel):
    """Any content unit that may be hidden behind a spoiler gate."""

    key: ItemKey | None = None
    spoiler_chapter: int | None = None
    is_spoiler: bool | None = None  # server hint, used only without spoiler_chapter

    @field_validator("key", mode="before")
    @classmethod
    def _key(cls, value: Any) -> ItemKey | None:
        return _normalize_key(value)

    @field_validator("spoiler_chapter", mode="before")
    @classmethod
    def _chapter(cls, value: Any) -> int | None:
        return normalize_chapter(value)

    @field_validator("is_spoiler", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool | None:
        return _normalize_flag(value)


class ChapterVariant(BaseModel):
    """One chapter-tagged depiction of an entity (portrait, video, text...)."""

    id: ItemKey | None = None
    chapter_number: int | None = None
    is_spoiler: bool | None = None
    payload: Any = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> ItemKey | None:
        return _normalize_key(value)

    @field_validator("chapter_number", mode="before")
    @classmethod
    def _chapter(cls, value: Any) -> int | None:
        return normalize_chapter(value)

    @field_validator("is_spoiler", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool | None:
        return _normalize_flag(value)

    def as_gated_item(self) -> GatedItem:
        return GatedItem(
            key=self.id,
            spoiler_chapter=self.chapter_number,
            is_spoiler=self.is_spoiler,
        )
