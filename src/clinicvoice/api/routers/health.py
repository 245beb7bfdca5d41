"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...core.config import get_settings
from ..deps import get_clinic_store
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    service: str


@router.get("", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    settings = get_settings()
    return ok(request, data=HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        service=settings.app_name,
    ), message="OK")


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness_check(request: Request):
    """
    Readiness check endpoint.

    Reports whether the store is seeded and which external integrations have
    credentials. Missing credentials degrade features but do not make the
    service unready.
    """
    settings = get_settings()
    store = get_clinic_store()

    checks = {
        "store": "ok" if store.patients else "empty",
        "tts": "configured" if settings.elevenlabs.is_configured else "not_configured",
        "voice_agent": "configured" if settings.elevenlabs.agent_configured else "not_configured",
        "email": "configured" if settings.email.is_configured else "not_configured",
    }
    ready = checks["store"] == "ok"
    return ok(
        request,
        data={"ready": ready, "checks": checks},
        message="Ready" if ready else "Not ready",
    )
