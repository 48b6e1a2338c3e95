"""
Notes App Backend — Health Check Route
========================================

What:  Liveness endpoint for Docker health checks and load balancers.
How:   The only dependency is the in-memory store, so the check reports its
       sizes along with version and uptime.
"""

import logging
import time

from fastapi import APIRouter, Depends

from app import __version__
from app.schemas.note import HealthResponse
from app.store import NoteStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    counts = store.counts()
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=counts["notes"],
        categories=counts["categories"],
        uptime_seconds=round(time.time() - _start_time, 2),
    )
