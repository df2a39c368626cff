"""
FastAPI Application Setup

Main entry point for the Master Marketer orchestration API.

Responsibility:
    - FastAPI app initialization
    - Router registration (intake, generate, jobs) behind API key guard
    - CORS middleware configuration (CORS_ALLOWED_ORIGINS)
    - Global exception handlers
    - Request logging middleware
    - Public health check endpoints

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, auth, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
    - Health check endpoints: GET /health, GET /api/health

Does NOT contain:
    - Business logic (delegated to Application Layer)
    - Celery configuration (separate module)
"""

import logging
import os
import time
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import routers
from src.api.routers import generate, intake, jobs

# Import shared schemas
from src.api.schemas.common import ErrorResponse, HealthCheckResponse
from src.api.security import InvalidApiKeyError, require_api_key

# Import exceptions for global handling
from src.application.queries.get_job_status import JobNotFoundException
from src.domain.shared.exceptions import DomainException
from src.infrastructure.trigger.exceptions import RunNotFoundError, TriggerApiError
from src.shared.config import Settings, get_settings

# Configure logger
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Log method, path, status code and duration of every request.

    Logging Format:
        INFO: "Incoming request: POST /api/intake/research"
        INFO: "Request completed: POST /api/intake/research - 202 - 0.412s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


def _error(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=code, message=message, details=details).model_dump(
            exclude_none=True
        ),
    )


async def invalid_api_key_handler(request: Request, exc: InvalidApiKeyError):
    """Missing or wrong x-api-key -> 401 UNAUTHORIZED."""
    return _error(status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", str(exc))


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Domain rule violations -> 400 Bad Request.

    Error code is derived from the class name:
        InvalidCallbackError -> INVALIDCALLBACK
    """
    error_code = exc.__class__.__name__.replace("Error", "").upper()

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}"
    )

    return _error(
        status.HTTP_400_BAD_REQUEST,
        error_code,
        exc.message,
        details={"exception_type": exc.__class__.__name__},
    )


async def job_not_found_exception_handler(request: Request, exc: JobNotFoundException):
    """Unknown or expired job -> 404 JOB_NOT_FOUND."""
    logger.warning(
        f"Job not found: {exc.job_id} - Request: {request.method} {request.url.path}"
    )

    return _error(
        status.HTTP_404_NOT_FOUND,
        "JOB_NOT_FOUND",
        str(exc),
        details={"job_id": exc.job_id},
    )


async def run_not_found_exception_handler(request: Request, exc: RunNotFoundError):
    """Unknown Trigger.dev run -> 404 RUN_NOT_FOUND."""
    return _error(
        status.HTTP_404_NOT_FOUND,
        "RUN_NOT_FOUND",
        "Trigger.dev run not found",
        details={"trigger_run_id": exc.run_id},
    )


async def trigger_api_exception_handler(request: Request, exc: TriggerApiError):
    """Trigger.dev rejected the call or was unreachable -> 502."""
    logger.error(
        f"Trigger.dev error: {exc} - Request: {request.method} {request.url.path}"
    )

    return _error(
        status.HTTP_502_BAD_GATEWAY,
        "TRIGGER_API_ERROR",
        "Background job service request failed",
        details={"upstream_status": exc.status_code},
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Catch-all for unexpected exceptions -> 500 INTERNAL_SERVER_ERROR.

    Logs full stack trace for debugging.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
        details={"type": exc.__class__.__name__},
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI application factory.

    Configuration:
        - CORS: origins from CORS_ALLOWED_ORIGINS (default "*")
        - Routers: /api/intake, /api/generate, /api/jobs (x-api-key required)
        - Health: GET /health, GET /api/health (public)

    Args:
        settings: Settings to use (default: get_settings(), which fails
            fast with ConfigurationError when API_KEY or
            TRIGGER_SECRET_KEY is missing)

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # uvicorn src.api.main:app --port 10000
    """
    app = FastAPI(
        title="Master Marketer API",
        version=API_VERSION,
        description=(
            "Triggers marketing deliverable pipelines on Trigger.dev, tracks "
            "their jobs and delivers results to callback URLs."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    settings = settings or get_settings()
    origins = settings.cors_allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers (most specific first)
    app.add_exception_handler(InvalidApiKeyError, invalid_api_key_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(JobNotFoundException, job_not_found_exception_handler)
    app.add_exception_handler(RunNotFoundError, run_not_found_exception_handler)
    app.add_exception_handler(TriggerApiError, trigger_api_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Protected routers with /api prefix
    protected = [Depends(require_api_key)]
    app.include_router(intake.router, prefix="/api", dependencies=protected)
    app.include_router(generate.router, prefix="/api", dependencies=protected)
    app.include_router(jobs.router, prefix="/api", dependencies=protected)

    async def health_check() -> HealthCheckResponse:
        """Liveness check for load balancers (no API key)."""
        return HealthCheckResponse(
            status="ok", version=API_VERSION, timestamp=time.time()
        )

    for path in ("/health", "/api/health"):
        app.add_api_route(
            path,
            health_check,
            methods=["GET"],
            response_model=HealthCheckResponse,
            status_code=status.HTTP_200_OK,
            summary="Health check endpoint",
            tags=["health"],
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/intake, /api/generate, /api/jobs")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn src.api.main:app --port 10000
app = create_app()
