"""
CodeNotes Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports version, uptime, and how much data the in-memory store holds.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

The store has no external dependency to probe, so a process that answers
this endpoint is considered healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends

from codenotes import __version__
from codenotes.schemas.note import HealthResponse
from codenotes.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    stats = store.stats()
    return HealthResponse(
        status="healthy",
        version=__version__,
        collections=stats["collections"],
        notes=stats["notes"],
        uptime_seconds=round(time.time() - _start_time, 2),
    )
