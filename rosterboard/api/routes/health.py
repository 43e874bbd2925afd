"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if roster storage is unreachable (readiness)

Design Decisions:
    - Readiness asks the repository, not the database: the JSON backend has no DB
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from rosterboard.api.dependencies import get_store
from rosterboard.services.roster_store import RosterStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "rosterboard-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: RosterStore = Depends(get_store)):
    """Readiness probe — includes storage connectivity."""
    storage_ok = await store.repository.health_check()
    if not storage_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
