"""FastAPI entry point for the miter service."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routers import boards as boards_router
from .routers import community as community_router

APP_VERSION = "0.1.0"

app = FastAPI(
    title="Mighty Miter Cruncher API",
    version=APP_VERSION,
    description="Miter saw settings for board frames, plus feedback and mailing-list intake.",
)

app.include_router(community_router.router)
app.include_router(boards_router.router)


@app.exception_handler(RequestValidationError)
async def validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies as plain 400s."""

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[Dict[str, Any]]:
    return [{"loc": list(err.get("loc", ())), "msg": str(err.get("msg", ""))} for err in exc.errors()]


@app.get("/version")
async def get_version() -> Dict[str, str]:
    return {
        "version": APP_VERSION,
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
async def index() -> Dict[str, Any]:
    return {
        "name": "mitercruncher-api",
        "version": app.version,
        "routes": [
            {"path": "/feedback", "methods": ["POST"]},
            {"path": "/subscribe", "methods": ["POST"]},
            {"path": "/boards/cutlist", "methods": ["POST"]},
        ],
    }
