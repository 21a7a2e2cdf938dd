"""Health & Readiness Probes — liveness and readiness endpoints, plus the root greeting.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if database is unreachable (readiness)
    - GET / is a static greeting (no store access)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from scholarlog.api.deps import get_services
from scholarlog.services.container import AppServices

router = APIRouter(tags=["health"])


@router.get("/")
async def root_greeting():
    return {"message": "Welcome to the REST API project!"}


@router.get("/api/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "scholarlog-api",
        "version": "1.0.0",
    }


@router.get("/api/health/ready")
async def readiness_check(services: AppServices = Depends(get_services)):
    """Readiness probe: includes database connectivity."""
    db_ok = await services.db.health_check()
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
