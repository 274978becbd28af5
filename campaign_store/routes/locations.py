"""Location endpoints, including character placement."""

from typing import Annotated

from fastapi import APIRouter, Query

from campaign_store import storage
from campaign_store.errors import InvalidInput

from .models import LocationFields

router = APIRouter()


@router.get("/add_location")
async def add_location(fields: Annotated[LocationFields, Query()]):
    """Add a location. `characters` is a comma-separated list."""
    location = storage.locations().add(fields.model_dump(exclude_none=True))
    return {"message": "Location added", "location": location}


@router.get("/get_location")
async def get_location(name: str):
    return storage.locations().get(name)


@router.get("/update_location")
async def update_location(fields: Annotated[LocationFields, Query()]):
    """Update only the supplied location fields."""
    if not fields.name:
        raise InvalidInput("Name is required to update a location")
    location = storage.locations().update(fields.name, fields.model_dump(exclude_unset=True))
    return {"message": "Location updated", "location": location}


@router.get("/get_locations_list")
async def list_locations():
    return {"locations": storage.locations().list()}


@router.get("/locate_character")
async def locate_character(name: str):
    """All locations whose character list includes `name`."""
    if not name:
        raise InvalidInput("Name is required to locate a character")
    return {"character": name, "locations": storage.locations().locate(name)}


@router.get("/move_character")
async def move_character(name: str, destination: str):
    """Remove a character from every location, then place it at `destination`."""
    if not name or not destination:
        raise InvalidInput("Name and destination are required to move a character")
    storage.locations().move(name, destination)
    return {"message": f"Character '{name}' moved to '{destination}'"}
