"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until a snapshot has been installed (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer (ADR: production readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from campus_api.api.dependencies import get_store
from campus_api.core.record_store import RecordStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(store: RecordStore = Depends(get_store)):
    """Readiness probe — data must have been loaded at least once."""
    loaded_at = store.loaded_at
    if loaded_at is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "data_not_loaded"},
        )
    return {
        "status": "ready",
        "checks": {
            "data": {
                "records": store.count(),
                "loaded_at": loaded_at.isoformat(),
            },
        },
    }
