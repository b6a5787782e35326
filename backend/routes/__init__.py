"""FastAPI API endpoints under /api.

Endpoint groups: health + settings + progress, entity media (variant groups
for cycling, current variant, add/delete), and gating (content records,
spoiler markup). Media is nested under /api/media/{owner_type}/{owner_id}.

Reading progress comes from the stored settings unless the request supplies
its own (?progress= or a progress body), so anonymous viewers are gated too.
"""

from fastapi import APIRouter

from .gate import router as gate_router
from .media import router as media_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(media_router)
router.include_router(gate_router)
