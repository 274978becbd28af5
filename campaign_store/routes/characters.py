"""Character endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from campaign_store import storage
from campaign_store.errors import InvalidInput

from .models import CharacterFields

router = APIRouter()


@router.get("/add_char")
async def add_character(fields: Annotated[CharacterFields, Query()]):
    """Add a character. name, age, personality, goals, visual_description required."""
    character = storage.characters().add(fields.model_dump(exclude_none=True))
    return {"message": "Character added", "character": character}


@router.get("/get_char")
async def get_character(name: str):
    """Get a character by name (case-insensitive)."""
    return storage.characters().get(name)


@router.get("/update_char")
async def update_character(fields: Annotated[CharacterFields, Query()]):
    """Update only the supplied character fields."""
    if not fields.name:
        raise InvalidInput("Name is required to update a character")
    character = storage.characters().update(fields.name, fields.model_dump(exclude_unset=True))
    return {"message": "Character updated", "character": character}


@router.get("/get_characters_list")
async def list_characters():
    """Names of all characters in insertion order."""
    return {"characters": storage.characters().list()}
