"""
Health check endpoints for monitoring and orchestration.

- /health: Basic liveness check (always returns 200)
- /health/ready: Readiness check, reports which backend is wired
"""

import logging

from fastapi import APIRouter, Depends

from vendor_app.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": "vendor-order-console"}


@router.get("/health/ready")
async def health_check_ready(settings: Settings = Depends(get_settings)):
    """
    Readiness probe.

    The backend is never called here: its availability is reported per
    request through the error taxonomy.
    """
    backend = "in_memory" if settings.use_in_memory else "http"
    logger.debug("Readiness check", extra={"backend": backend})
    return {"status": "ready", "checks": {"backend": backend}}
