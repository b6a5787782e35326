"""Pydantic request models for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from spoiler_gate import ProgressState

OwnerType = Literal["character", "arc", "gamble", "organization", "volume"]

MediaType = Literal["image", "video", "audio"]


class UpdateSettings(BaseModel):
    reading_progress: int | None = None  # range checked against max_chapter
    chapter_tolerance: int | None = Field(default=None, ge=0)
    show_all_spoilers: bool | None = None
    untagged_hide_threshold: int | None = Field(default=None, ge=0)
    max_chapter: int | None = Field(default=None, ge=1)


class CreateMedia(BaseModel):
    url: str
    type: MediaType = "image"
    description: str = ""
    chapter_number: int | None = Field(default=None, ge=1)
    is_spoiler: bool | None = None


class GateBody(BaseModel):
    items: list[dict[str, Any]]
    progress: ProgressState | None = None


class MarkupBody(BaseModel):
    content: str
    progress: ProgressState | None = None
