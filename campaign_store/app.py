import logging
import os
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campaign_store import storage
from campaign_store.errors import StoreError
from campaign_store.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent.parent / "data" / "campaign.json"


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(data_file: Path | None = None) -> FastAPI:
    resolved = data_file or Path(os.getenv("DATA_FILE", str(DEFAULT_DATA_FILE)))
    storage.init_storage(resolved)

    app = FastAPI(title="Campaign Store")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path,
                    response.status_code, (time.perf_counter() - started) * 1000)
        return response

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    app.include_router(router)
    return app


# Default app instance for uvicorn (uses DATA_FILE env var or default)
app = create_app()
