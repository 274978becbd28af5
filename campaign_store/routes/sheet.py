"""Character sheet endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse

from campaign_store import storage

from .models import RemoveFromSheet

router = APIRouter()


@router.get("/make_sheet")
async def make_sheet(
    name: str | None = None,
    race: str | None = None,
    class_: str | None = Query(None, alias="class"),
    level: str | None = None,
    background: str | None = None,
):
    """Create a fresh sheet, replacing any existing one."""
    seed = {"name": name, "race": race, "class": class_, "level": level, "background": background}
    sheet = storage.sheet().create(seed)
    return {"message": "Character sheet created", "sheet": sheet}


@router.get("/get_sheet")
async def get_sheet():
    return storage.sheet().get()


@router.post("/update_sheet")
async def update_sheet(updates: Any = Body(...)):
    """Deep-merge the request body into the sheet. Lists are replaced, not merged."""
    sheet = storage.sheet().patch(updates)
    return {"message": "Character sheet updated", "sheet": sheet}


@router.post("/remove_from_sheet")
async def remove_from_sheet(body: RemoveFromSheet):
    """Delete a dotted-path field, or remove `value` from the list at `path`."""
    if "value" in body.model_fields_set:
        result = storage.sheet().remove_field(body.path, body.value)
    else:
        result = storage.sheet().remove_field(body.path)
    if result.success:
        return result.to_dict()
    status = 404 if result.reason == "not_found" else 400
    return JSONResponse(status_code=status, content=result.to_dict())
