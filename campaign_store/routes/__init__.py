"""FastAPI endpoints.

Endpoint groups: characters, locations (plus locate/move), quests, scenes,
the character sheet, and health. Collection routes are GET with query
parameters; sheet updates and removals take a JSON body.
"""

from fastapi import APIRouter

from .characters import router as characters_router
from .locations import router as locations_router
from .quests import router as quests_router
from .scenes import router as scenes_router
from .health import router as health_router
from .sheet import router as sheet_router

router = APIRouter()
router.include_router(health_router)
router.include_router(characters_router)
router.include_router(locations_router)
router.include_router(quests_router)
router.include_router(scenes_router)
router.include_router(sheet_router)
