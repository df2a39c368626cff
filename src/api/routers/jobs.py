"""
API Router for Job Status Tracking

Responsibility:
    HTTP interface for querying jobs started by intake / generate
    endpoints, and for looking up Trigger.dev runs directly.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (GetJobStatusQueryHandler)
    - Read-only from the caller's view (CQRS Query pattern)

Contains:
    - GET /jobs/by-run/{trigger_run_id} - run status straight from Trigger.dev
    - GET /jobs/{job_id} - job status (job store, refreshed from Trigger.dev)

Recovery:
    Job records expire after an hour. Callers keep the triggerRunId from
    the 202 response and use /jobs/by-run/ when /jobs/{job_id} returns 404.
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import get_job_status_query_handler
from src.api.schemas.common import ErrorResponse
from src.api.schemas.jobs import JobStatusResponse, RunStatusResponse
from src.application.queries.get_job_status import (
    GetJobStatusQuery,
    GetJobStatusQueryHandler,
)

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid API key"},
        404: {
            "model": ErrorResponse,
            "description": "Not Found - Job or run not found (or job expired)",
        },
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.get(
    "/by-run/{trigger_run_id}",
    status_code=status.HTTP_200_OK,
    response_model=RunStatusResponse,
    response_model_exclude_none=True,
    summary="Get Trigger.dev run status",
    responses={
        502: {"model": ErrorResponse, "description": "Bad Gateway - Trigger.dev error"}
    },
)
def get_run_status(
    trigger_run_id: str = Path(..., description="Run id from the 202 response"),
    handler: GetJobStatusQueryHandler = Depends(get_job_status_query_handler),
) -> RunStatusResponse:
    """
    Look up a run on Trigger.dev, bypassing the job store.

    Returns:
        complete + output + completedAt, failed + error, or
        processing + runStatus

    Raises:
        RunNotFoundError: Mapped to 404 RUN_NOT_FOUND by the app handler
    """
    result = handler.handle_by_run(trigger_run_id)
    return RunStatusResponse(**result.model_dump())


@router.get(
    "/{job_id}",
    status_code=status.HTTP_200_OK,
    response_model=JobStatusResponse,
    response_model_exclude_none=True,
    summary="Get status of asynchronous job",
)
def get_job_status(
    job_id: str = Path(..., description="Job id from the 202 response"),
    handler: GetJobStatusQueryHandler = Depends(get_job_status_query_handler),
) -> JobStatusResponse:
    """
    Get current status of a job.

    Finished jobs come from the job store; open jobs are refreshed from
    Trigger.dev (falling back to the stored status when Trigger.dev
    cannot be reached).

    Raises:
        JobNotFoundException: Mapped to 404 JOB_NOT_FOUND by the app handler
    """
    result = handler.handle(GetJobStatusQuery(job_id=job_id))
    logger.debug(f"Job {job_id} status: {result.status.value}")
    return JobStatusResponse(**result.model_dump())
