# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.auth.providers import validate_auth_config
from app.config import settings

router = APIRouter()

VERSION = "1.0.0"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str
    auth_providers: dict[str, bool]


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request):
    """
    Readiness check endpoint.

    Checks database connectivity and reports which auth providers are
    configured. Missing providers do not make the service unready.
    """
    from lib.supabase_client import SupabaseClient

    enabled = getattr(request.app.state, "enabled_providers", None)
    if enabled is None:
        enabled = validate_auth_config()

    database = "unknown"
    try:
        client = SupabaseClient.get_client()
        client.table("items").select("id").limit(1).execute()
        database = "healthy"
    except Exception as e:
        database = f"unhealthy: {str(e)[:50]}"

    return ReadinessResponse(
        status="ready" if database == "healthy" else "degraded",
        checks=ChecksResponse(database=database, auth_providers=enabled),
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
