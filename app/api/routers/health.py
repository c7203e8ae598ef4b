"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

- /health: Basic liveness check (always returns 200)
- /health/ready: Readiness check (reservation store reachable)
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.dependencies import get_container
from app.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": "property-reservations-api"}


@router.get("/health/ready")
async def health_check_ready():
    """
    Readiness probe.

    Returns 503 when the configuration is incomplete or the reservation
    store does not answer a trivial query.
    """
    try:
        container = get_container()
    except ConfigurationError as e:
        logger.error("Readiness check failed: configuration", extra={"missing": e.missing})
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "checks": {"configuration": "missing settings"}},
        )

    try:
        await container.reservation_repo.ping()
    except Exception as e:
        logger.error("Reservation store health check failed", exc_info=e)
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "checks": {"database": "Database connection failed"},
            },
        )

    return {"status": "ready", "checks": {"database": "healthy"}}
