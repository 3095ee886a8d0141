# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# Neither endpoint touches the UserStore.
# =============================================================================

import time

from fastapi import APIRouter, Request

from app.dependencies import SettingsDep
from core.models import APIResponse
from lib.utils import format_duration, utc_now

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=APIResponse, response_model_exclude_none=True)
async def health_check(request: Request, settings: SettingsDep):
    """
    Health check endpoint.

    Returns the current time, the service version and how long the
    app has been running.
    """
    uptime = max(time.monotonic() - request.app.state.started_at, 0.0)

    return APIResponse.ok(
        "User API is healthy",
        data={
            "timestamp": utc_now().isoformat(timespec="seconds"),
            "version": settings.APP_VERSION,
            "uptime": format_duration(uptime),
            "uptime_seconds": round(uptime, 3),
        },
    )


@router.get("/health/live", response_model=APIResponse, response_model_exclude_none=True)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    return APIResponse.ok(
        "alive",
        data={"timestamp": utc_now().isoformat(timespec="seconds")},
    )
