"""
Notes API Backend — Health Check Route
========================================

What:  Liveness endpoint for monitoring and load balancer probes.
Why:   Answers "is the process serving requests?". The service has no
       external dependencies, so liveness is the whole check.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Served at both `/` and `/health`.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from notes_api import __version__
from notes_api.config import settings
from notes_api.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


def _health_payload() -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Service is healthy",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health endpoint",
    description="Returns 200 while the service is able to handle requests.",
)
async def root_health_check() -> HealthResponse:
    return _health_payload()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health endpoint (explicit path)",
)
async def health_check() -> HealthResponse:
    return _health_payload()
