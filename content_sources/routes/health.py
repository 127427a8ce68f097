# This project was developed with assistance from AI tools.
"""Liveness and readiness probes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..db import DatabaseService, get_db_service

router = APIRouter()


@router.get("/")
async def liveness() -> dict[str, str]:
    """The process is up and serving requests."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness(db_service: DatabaseService = Depends(get_db_service)) -> JSONResponse:
    """Ready when the database answers; 503 otherwise."""
    if await db_service.health_check():
        return JSONResponse(status_code=200, content={"status": "ok", "database": "ok"})
    return JSONResponse(status_code=503, content={"status": "unavailable", "database": "unreachable"})
