"""
FastAPI application setup and configuration.

This module creates and configures the FastAPI application with
all routes, middleware, and dependencies.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import get_clinic_store
from .api.errors import APIError
from .api.routers import appointments, dashboard, followups, health, notes, patients, tts, voice
from .api.utils.responses import fail
from .core.config import get_settings
from .core.exceptions import ConfigurationError, ExternalServiceError
from .core.structured_logger import configure_logging
from .domain.errors import (
    AppointmentNotFoundError,
    DomainError,
    FollowUpNotFoundError,
    PatientNotFoundError,
    SlotUnavailableError,
)
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

SERVICE_NAME = "Clinic Voice Assistant"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger = configure_logging(settings.logging)
    logger.info(f"Starting {SERVICE_NAME} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}, debug: {settings.debug}")

    store = get_clinic_store()
    logger.info(f"Clinic store ready: {len(store.patients)} patients, {len(store.appointments)} appointments")
    if not settings.elevenlabs.is_configured:
        logger.warning("ELEVENLABS_API_KEY not set; /tts and /voice/session will return 500")
    if not settings.email.is_configured:
        logger.warning("EMAIL_API_KEY not set; follow-up emails will be skipped")

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")


def _domain_status(exc: DomainError) -> int:
    if isinstance(exc, (PatientNotFoundError, AppointmentNotFoundError, FollowUpNotFoundError)):
        return 404
    if isinstance(exc, SlotUnavailableError):
        return 409
    return 400


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    logger = logging.getLogger("clinicvoice")
    docs_url = None if settings.is_production else "/docs"

    app = FastAPI(
        title=SERVICE_NAME,
        description="Voice-assisted clinical documentation, scheduling and follow-up for small clinics",
        version=settings.app_version,
        docs_url=docs_url,
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=False,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        expose_headers=["X-Request-ID", "X-Process-Time"],
        max_age=600,
    )
    app.add_middleware(PerformanceMiddleware)
    # Outermost, so request_id is set before anything logs
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(patients.router)
    app.include_router(notes.router)
    app.include_router(appointments.router)
    app.include_router(dashboard.router)
    app.include_router(followups.router)
    app.include_router(tts.router)
    app.include_router(voice.router)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        req_id = getattr(request.state, "request_id", None)
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(f"APIError: {exc.code} ({exc.http_status}) {exc.message} | request_id={req_id}")
        return fail(request, exc.code, exc.message, exc.http_status, exc.details)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code = _domain_status(exc)
        logger.warning(f"DomainError: {exc.error_code} ({status_code}) {exc.message}")
        return fail(request, exc.error_code or "DOMAIN_ERROR", exc.message, status_code, exc.details)

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error(f"ConfigurationError: {exc.message}")
        return fail(request, "SERVICE_NOT_CONFIGURED", exc.message, 500)

    @app.exception_handler(ExternalServiceError)
    async def external_service_error_handler(request: Request, exc: ExternalServiceError):
        logger.error(f"ExternalServiceError: {exc.message}")
        return fail(request, "DOWNSTREAM_ERROR", f"{exc.service} service unavailable", 502)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        error_details = exc.errors()
        logger.warning(f"ValidationError on {request.method} {request.url.path}: {error_details} | request_id={req_id}")

        error_messages = []
        for error in error_details:
            loc = " -> ".join(str(x) for x in error.get("loc", []))
            msg = error.get("msg", "Validation error")
            error_messages.append(f"{loc}: {msg}")

        fields = [str(error.get("loc", ["", ""])[-1]) for error in error_details]
        return fail(
            request,
            "INVALID_INPUT",
            f"Input validation failed: {'; '.join(error_messages)}",
            400,
            {"fields": fields, "path": request.url.path},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.exception(f"Unhandled error: {type(exc).__name__} | request_id={req_id}")
        return fail(
            request,
            "INTERNAL_ERROR",
            "An unexpected error has occurred. Please try again later.",
            500,
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": SERVICE_NAME,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": docs_url,
            "endpoints": {
                "health": "/health",
                "patients": "GET /patients",
                "patient_detail": "GET /patients/{patient_id}",
                "appointments": "GET /appointments",
                "update_appointment": "PATCH /appointments/{appointment_id}",
                "stats": "GET /stats",
                "analytics": "GET /analytics",
                "update_followup": "PATCH /followups/{patient_id}",
                "lookup_patient": "POST /agent/lookup-patient",
                "get_patient_history": "POST /agent/get-patient-history",
                "save_note": "POST /agent/save-note",
                "summarize_history": "POST /agent/summarize-history",
                "check_schedule": "POST /agent/check-schedule",
                "book_appointment": "POST /agent/book-appointment",
                "check_patterns": "POST /agent/check-patterns",
                "get_followups": "POST /agent/get-followups",
                "send_followup": "POST /agent/send-followup",
                "tts": "POST /tts",
                "voice_modes": "GET /voice/modes",
                "voice_session": "POST /voice/session",
                "client_tools": "POST /voice/client-tools/{tool}",
            },
        }

    return app


# Create the app instance
app = create_app()
