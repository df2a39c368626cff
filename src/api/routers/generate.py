"""
API Router for Deliverable Generation

Responsibility:
    Starts long-running generation jobs (roadmap, content plan, SEO audit)
    and, when the caller gives a callback_url, arranges for the result to be
    POSTed there once the run finishes.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (TriggerJobUseCase)
    - callback_url / metadata are split off the raw body before validation
    - Callback POSTs carry the service API key as x-api-key

Contains:
    - POST /generate/roadmap - generate-roadmap
    - POST /generate/content-plan - generate-content-plan
    - POST /generate/seo-audit - generate-seo-audit
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from src.api.dependencies import get_trigger_job_use_case
from src.api.schemas.common import ErrorResponse
from src.api.schemas.generate import (
    ContentPlanRequest,
    RoadmapRequest,
    SeoAuditRequest,
    extract_callback_fields,
)
from src.api.schemas.jobs import JobAcceptedResponse
from src.application.services.trigger_job import TriggerJobCommand, TriggerJobUseCase
from src.domain.delivery import CallbackMetadata, CallbackTarget
from src.shared.config import Settings, get_settings

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/generate",
    tags=["generate"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid callback"},
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid API key"},
        422: {"description": "Unprocessable Entity - Validation error"},
        502: {"model": ErrorResponse, "description": "Bad Gateway - Trigger.dev error"},
    },
)


def _start_generation(
    body: dict[str, Any],
    schema: type[BaseModel],
    task_id: str,
    label: str,
    use_case: TriggerJobUseCase,
    settings: Settings,
) -> JobAcceptedResponse:
    """
    Validate body, trigger task_id, dispatch watcher when callback given.

    Raises:
        RequestValidationError: If body does not match schema (422)
        InvalidCallbackError: If callback_url is not an http(s) URL (400)
    """
    rest, callback_url, metadata = extract_callback_fields(body)

    try:
        request = schema.model_validate(rest)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e

    callback = None
    if callback_url:
        callback = CallbackTarget(
            url=callback_url,
            api_key=settings.api_key,
            metadata=CallbackMetadata.from_dict(metadata),
        )

    message = f"{label} generation started."
    if callback is not None:
        message += " Results will be delivered to callback_url when complete."
    message += " You can also poll GET /api/jobs/:jobId for status."

    accepted = use_case.execute(
        TriggerJobCommand(
            task_id=task_id,
            payload=request.model_dump(mode="json", exclude_none=True),
            callback=callback,
            accepted_message=message,
            include_job_id=True,
        )
    )

    return JobAcceptedResponse(
        job_id=accepted.job_id,
        trigger_run_id=accepted.trigger_run_id,
        status=accepted.status,
        message=accepted.message,
    )


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/roadmap",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobAcceptedResponse,
    response_model_exclude_none=True,
    summary="Generate roadmap",
)
def generate_roadmap(
    body: dict[str, Any] = Body(...),
    use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
    settings: Settings = Depends(get_settings),
) -> JobAcceptedResponse:
    """Body: RoadmapRequest plus optional callback_url and metadata."""
    return _start_generation(
        body, RoadmapRequest, "generate-roadmap", "Roadmap", use_case, settings
    )


@router.post(
    "/content-plan",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobAcceptedResponse,
    response_model_exclude_none=True,
    summary="Generate content plan",
)
def generate_content_plan(
    body: dict[str, Any] = Body(...),
    use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
    settings: Settings = Depends(get_settings),
) -> JobAcceptedResponse:
    """Body: ContentPlanRequest plus optional callback_url and metadata."""
    return _start_generation(
        body,
        ContentPlanRequest,
        "generate-content-plan",
        "Content plan",
        use_case,
        settings,
    )


@router.post(
    "/seo-audit",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobAcceptedResponse,
    response_model_exclude_none=True,
    summary="Generate SEO audit",
)
def generate_seo_audit(
    body: dict[str, Any] = Body(...),
    use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
    settings: Settings = Depends(get_settings),
) -> JobAcceptedResponse:
    """Body: SeoAuditRequest plus optional callback_url and metadata."""
    return _start_generation(
        body, SeoAuditRequest, "generate-seo-audit", "SEO audit", use_case, settings
    )
