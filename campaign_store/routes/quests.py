"""Quest endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from campaign_store import storage
from campaign_store.errors import InvalidInput

from .models import QuestFields

router = APIRouter()


@router.get("/add_quest")
async def add_quest(fields: Annotated[QuestFields, Query()]):
    """Add a quest. title, description and locations are required."""
    quest = storage.quests().add(fields.model_dump(exclude_none=True))
    return {"message": "Quest added", "quest": quest}


@router.get("/get_quest")
async def get_quest(title: str):
    return storage.quests().get(title)


@router.get("/update_quest")
async def update_quest(fields: Annotated[QuestFields, Query()]):
    if not fields.title:
        raise InvalidInput("Title is required to update a quest")
    quest = storage.quests().update(fields.title, fields.model_dump(exclude_unset=True))
    return {"message": "Quest updated", "quest": quest}


@router.get("/get_quests_list")
async def list_quests():
    return {"quests": storage.quests().list()}
