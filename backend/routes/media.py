"""Entity display media: variant groups for cycling, current pick, and CRUD."""

import logging

from fastapi import APIRouter, HTTPException, Query

from backend import storage
from backend.progress import current_progress, untagged_threshold
from spoiler_gate import CyclingController, coerce_variants, select_current, should_hide

from .models import CreateMedia, OwnerType

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/media/{owner_type}/{owner_id}")
async def list_entity_media(
    owner_type: OwnerType,
    owner_id: int,
    progress: int | None = Query(default=None, ge=0),
):
    """All display media for an entity, ordered for cycling.

    start_index points at the latest unlocked variant; hidden[i] is the
    gate decision for media[i].
    """
    state = current_progress(progress)
    threshold = untagged_threshold()
    controller = CyclingController(coerce_variants(storage.get_media(owner_type, owner_id)), state)
    return {
        "media": [v.payload for v in controller.variants],
        "start_index": controller.index,
        "hidden": [should_hide(v.as_gated_item(), state, threshold) for v in controller.variants],
    }


@router.get("/media/{owner_type}/{owner_id}/current")
async def current_entity_media(
    owner_type: OwnerType,
    owner_id: int,
    progress: int | None = Query(default=None, ge=0),
):
    """The most advanced media the viewer has reached, or null."""
    state = current_progress(progress)
    variant = select_current(coerce_variants(storage.get_media(owner_type, owner_id)), state)
    if variant is None:
        logger.debug(f"No unlocked media for {owner_type} {owner_id} at progress {state.effective_progress}")
        return None
    return variant.payload


@router.post("/media/{owner_type}/{owner_id}", status_code=201)
async def add_entity_media(owner_type: OwnerType, owner_id: int, body: CreateMedia):
    """Add a display media record to an entity."""
    return storage.add_media(owner_type, owner_id, body.model_dump())


@router.delete("/media/{owner_type}/{owner_id}/{media_id}")
async def delete_entity_media(owner_type: OwnerType, owner_id: int, media_id: int):
    """Remove a display media record."""
    if not storage.delete_media(owner_type, owner_id, media_id):
        raise HTTPException(404, "Media not found")
    return {"ok": True}
