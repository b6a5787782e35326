"""Health check, viewer settings, and effective progress endpoints."""

from fastapi import APIRouter, HTTPException, Query

from backend import storage
from backend.progress import current_progress

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get viewer spoiler settings (progress, tolerance, show-all, thresholds)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update viewer spoiler settings (partial merge)."""
    fields = body.model_dump(exclude_none=True)
    config = storage.get_config()
    max_chapter = fields.get("max_chapter", config["max_chapter"])
    progress = fields.get("reading_progress", config["reading_progress"])
    if not 1 <= progress <= max_chapter:
        raise HTTPException(400, f"Reading progress must be between 1 and {max_chapter}")
    return storage.update_config(fields)


@router.get("/progress")
async def get_progress(progress: int | None = Query(default=None, ge=0)):
    """Effective progress state; ?progress= overrides the stored reading progress."""
    state = current_progress(progress)
    return {**state.model_dump(), "effective_progress": state.effective_progress}
