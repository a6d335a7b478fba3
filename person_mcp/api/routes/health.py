"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the store has been initialized (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from person_mcp.api.dependencies import get_person_store
from person_mcp.config import get_settings
from person_mcp.core.person_store import PersonStore

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
    }


@router.get("/ready")
async def readiness_check(store: PersonStore = Depends(get_person_store)):
    """Readiness probe: store must be initialized."""
    if not store.is_initialized:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"person_store": store.count()}}
