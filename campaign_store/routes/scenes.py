"""Scene endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from campaign_store import storage
from campaign_store.errors import InvalidInput

from .models import SceneFields

router = APIRouter()


@router.get("/add_scene")
async def add_scene(fields: Annotated[SceneFields, Query()]):
    """Add a scene. title and description are required."""
    scene = storage.scenes().add(fields.model_dump(exclude_none=True))
    return {"message": "Scene added", "scene": scene}


@router.get("/get_scene")
async def get_scene(title: str):
    return storage.scenes().get(title)


@router.get("/update_scene")
async def update_scene(fields: Annotated[SceneFields, Query()]):
    if not fields.title:
        raise InvalidInput("Title is required to update a scene")
    scene = storage.scenes().update(fields.title, fields.model_dump(exclude_unset=True))
    return {"message": "Scene updated", "scene": scene}


@router.get("/get_scenes_list")
async def list_scenes():
    return {"scenes": storage.scenes().list()}
