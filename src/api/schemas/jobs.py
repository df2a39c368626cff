"""
Job Response Schemas

Responses for trigger endpoints (202) and job / run status lookups.
Wire names are camelCase (jobId, triggerRunId, ...) for existing clients;
Python attributes stay snake_case.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.application.models import JobStatus


class JobAcceptedResponse(BaseModel):
    """202 body returned by intake and generate endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(alias="jobId")
    trigger_run_id: Optional[str] = Field(default=None, alias="triggerRunId")
    status: str = "accepted"
    message: str


class JobStatusResponse(BaseModel):
    """
    GET /api/jobs/{job_id} body.

    Only fields relevant to the status are present (None values are
    excluded from the JSON).
    """

    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(alias="jobId")
    status: JobStatus
    output: Optional[Any] = None
    error: Optional[str] = None
    progress: Optional[str] = None


class RunStatusResponse(BaseModel):
    """GET /api/jobs/by-run/{trigger_run_id} body."""

    model_config = ConfigDict(populate_by_name=True)

    trigger_run_id: str = Field(alias="triggerRunId")
    status: JobStatus
    output: Optional[Any] = None
    completed_at: Optional[str] = Field(default=None, alias="completedAt")
    error: Optional[str] = None
    run_status: Optional[str] = Field(default=None, alias="runStatus")
