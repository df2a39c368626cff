"""
API Router for Intake Analysis

Responsibility:
    HTTP interface that starts analysis jobs on Trigger.dev and answers
    202 with a job id to poll.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (TriggerJobUseCase)
    - Request bodies are validated here and forwarded as task payloads

Contains:
    - POST /intake/meeting-notes - analyze-meeting-notes
    - POST /intake/research - generate-research
    - POST /intake/roadmap, /intake/plan, /intake/brief - analyze-deliverable
"""

import logging

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_trigger_job_use_case
from src.api.schemas.common import ErrorResponse
from src.api.schemas.intake import (
    DeliverableIntakeRequest,
    DeliverableType,
    MeetingNotesRequest,
    ResearchRequest,
)
from src.api.schemas.jobs import JobAcceptedResponse
from src.application.services.trigger_job import TriggerJobCommand, TriggerJobUseCase

# Configure logger
logger = logging.getLogger(__name__)

POLL_HINT = "Poll GET /api/jobs/:jobId for status."


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/intake",
    tags=["intake"],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid API key"},
        422: {"description": "Unprocessable Entity - Validation error"},
        502: {"model": ErrorResponse, "description": "Bad Gateway - Trigger.dev error"},
    },
)


def _accepted(use_case: TriggerJobUseCase, command: TriggerJobCommand) -> JobAcceptedResponse:
    accepted = use_case.execute(command)
    return JobAcceptedResponse(
        job_id=accepted.job_id, status=accepted.status, message=accepted.message
    )


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/meeting-notes",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobAcceptedResponse,
    response_model_exclude_none=True,
    summary="Analyze meeting notes",
)
def analyze_meeting_notes(
    request: MeetingNotesRequest,
    use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
) -> JobAcceptedResponse:
    """Trigger analyze-meeting-notes with the transcript."""
    return _accepted(
        use_case,
        TriggerJobCommand(
            task_id="analyze-meeting-notes",
            payload=request.model_dump(mode="json", exclude_none=True),
            accepted_message=f"Meeting notes analysis started. {POLL_HINT}",
        ),
    )


@router.post(
    "/research",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=JobAcceptedResponse,
    response_model_exclude_none=True,
    summary="Generate competitive research report",
)
def generate_research(
    request: ResearchRequest,
    use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
) -> JobAcceptedResponse:
    """Trigger generate-research. Runs take 5-8 minutes."""
    return _accepted(
        use_case,
        TriggerJobCommand(
            task_id="generate-research",
            payload=request.model_dump(mode="json", exclude_none=True),
            accepted_message=(
                f"Research generation started. {POLL_HINT} "
                "Estimated duration: 5-8 minutes."
            ),
        ),
    )


def _deliverable_endpoint(deliverable_type: DeliverableType):
    def analyze_deliverable(
        request: DeliverableIntakeRequest,
        use_case: TriggerJobUseCase = Depends(get_trigger_job_use_case),
    ) -> JobAcceptedResponse:
        payload = request.model_dump(mode="json", exclude_none=True)
        payload["deliverable_type"] = deliverable_type
        return _accepted(
            use_case,
            TriggerJobCommand(
                task_id="analyze-deliverable",
                payload=payload,
                accepted_message=f"{deliverable_type} analysis started. {POLL_HINT}",
            ),
        )

    analyze_deliverable.__name__ = f"analyze_{deliverable_type}"
    analyze_deliverable.__doc__ = f"Trigger analyze-deliverable for a {deliverable_type}."
    return analyze_deliverable


for _deliverable_type in ("roadmap", "plan", "brief"):
    router.add_api_route(
        f"/{_deliverable_type}",
        _deliverable_endpoint(_deliverable_type),
        methods=["POST"],
        status_code=status.HTTP_202_ACCEPTED,
        response_model=JobAcceptedResponse,
        response_model_exclude_none=True,
        summary=f"Analyze existing {_deliverable_type}",
    )
