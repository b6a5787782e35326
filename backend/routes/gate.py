"""Spoiler gate decisions for arbitrary content records and marked-up text."""

from fastapi import APIRouter

from backend.progress import current_progress, untagged_threshold
from spoiler_gate import gated_item, redact, segments_to_text, should_hide, spoiler_label

from .models import GateBody, MarkupBody

router = APIRouter()


@router.post("/gate")
async def gate_items(body: GateBody):
    """Gate decision per record; body.progress replaces the stored settings."""
    state = body.progress or current_progress()
    threshold = untagged_threshold()
    results = []
    for record in body.items:
        item = gated_item(record)
        hidden = should_hide(item, state, threshold)
        results.append({
            "key": item.key,
            "hidden": hidden,
            "label": spoiler_label(item, state) if hidden else None,
        })
    return results


@router.post("/markup")
async def redact_markup(body: MarkupBody):
    """Split text into segments and redact spoiler blocks past the viewer's progress."""
    state = body.progress or current_progress()
    segments = redact(body.content, state, untagged_threshold=untagged_threshold())
    return {"segments": segments, "text": segments_to_text(segments)}
