"""Health check endpoint."""

from fastapi import APIRouter

from campaign_store import storage

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok", "data_file": str(storage.data_file())}
