"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.infrastructure import database

logger = logging.getLogger(__name__)


def build_health_router() -> APIRouter:
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("/", status_code=status.HTTP_200_OK)
    async def health_check():
        """Basic liveness probe. Returns 200 if the process is up."""
        return {"status": "healthy", "service": "bookbrainz-api"}

    @router.get("/ready")
    async def readiness_check():
        """Readiness probe — includes database connectivity."""
        manager = database.db_manager
        db_ok = await manager.health_check() if manager else False
        if not db_ok:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "not_ready",
                    "reason": "database_unavailable",
                },
            )
        return {"status": "ready", "checks": {"database": "healthy"}}

    return router
