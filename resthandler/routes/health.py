"""
resthandler: Health Check Route
===============================

What:  Liveness endpoint for load balancers and container probes.
How:   Reports the package version, the registered resource names and the
       process uptime. It is never authenticated.
"""

import time

from fastapi import APIRouter, Request

from resthandler import __version__
from resthandler.schemas.resource import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """Registered names come from app.state, populated by create_app()."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        resources=list(getattr(request.app.state, "resource_names", [])),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
