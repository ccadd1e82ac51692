"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the parsing capability is READY (readiness)

Design Decisions:
    - Separate liveness/readiness: a FAILED parser keeps the process alive (the page
      shows the error) but takes it out of rotation
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from playground.core.domain_types import LoadStatus
from playground.infrastructure.capability_loader import (
    CapabilityLoader, get_capability_loader,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

_NOT_READY_REASONS = {
    LoadStatus.LOADING: "capability_loading",
    LoadStatus.FAILED: "capability_failed",
}


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "todotxt-playground",
        "version": "0.1.0",
    }


@router.get("/ready")
async def readiness_check(
    loader: CapabilityLoader = Depends(get_capability_loader),
):
    """Readiness probe — the parser must be loaded."""
    state = loader.state
    if not state.is_ready:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": _NOT_READY_REASONS[state.status],
            },
        )
    return {"status": "ready", "checks": {"capability": "loaded"}}
