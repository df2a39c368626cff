"""
GetJobStatusQuery - CQRS Read Query

Query objects and handler for job status lookups.

Responsibility:
    - handle: job id -> stored job, refreshed from Trigger.dev while the
      job is still open
    - handle_by_run: run id -> status straight from Trigger.dev, for
      callers whose job record expired or was never stored

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Query is simple DTO (Data Transfer Object)
    - Handler reads RedisJobStore and TriggerClient (constructor injected)
    - Follows CQRS pattern for read operations, with one exception: a
      fresh terminal run status is written back to the job store
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.application.models import JobStatus
from src.domain.delivery import RunOutcome
from src.infrastructure.trigger.exceptions import TriggerApiError

# Configure logger for this module
logger = logging.getLogger(__name__)


class GetJobStatusQuery(BaseModel):
    """
    Query object containing job ID to retrieve status for.

    Attributes:
        job_id: Job id returned by an intake or generate endpoint
    """

    job_id: str = Field(min_length=1, description="Job id from the 202 response")


class JobStatusResult(BaseModel):
    """
    Job status returned by GetJobStatusQueryHandler.handle.

    Attributes:
        job_id: Job id
        status: accepted / processing / complete / failed
        output: Run output (complete only)
        error: Error message (failed only)
        progress: Human-readable progress (open jobs only)
    """

    job_id: str
    status: JobStatus
    output: Optional[Any] = None
    error: Optional[str] = None
    progress: Optional[str] = None


class RunStatusResult(BaseModel):
    """
    Run status returned by GetJobStatusQueryHandler.handle_by_run.

    Attributes:
        trigger_run_id: Run id
        status: processing / complete / failed
        output: Run output (complete only)
        completed_at: When the run finished (complete only)
        error: Error message (failed only)
        run_status: Raw Trigger.dev status (processing only)
    """

    trigger_run_id: str
    status: JobStatus
    output: Optional[Any] = None
    completed_at: Optional[str] = None
    error: Optional[str] = None
    run_status: Optional[str] = None


class JobNotFoundException(Exception):
    """
    Raised when job_id not found in the job store.

    Can happen when:
        - Job never existed
        - Job expired (TTL exceeded)
        - Redis was flushed
    """

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Job {job_id} not found or expired")


class GetJobStatusQueryHandler:
    """
    Handler for job and run status lookups.

    Architecture:
        API Layer -> QueryHandler -> RedisJobStore / TriggerClient

    Usage:
        handler = GetJobStatusQueryHandler(job_store, trigger_client)
        result = handler.handle(GetJobStatusQuery(job_id="..."))
    """

    def __init__(self, job_store, trigger_client):
        self.job_store = job_store
        self.trigger_client = trigger_client

    def handle(self, query: GetJobStatusQuery) -> JobStatusResult:
        """
        Return the job's status, checking Trigger.dev when still open.

        Process Flow:
            1. Load job (JobNotFoundException when missing)
            2. complete / failed -> return cached record
            3. Retrieve run:
               - COMPLETED -> cache output, return complete
               - other terminal status -> cache error, return failed
               - otherwise -> mark processing with run status as progress
            4. Trigger.dev unreachable -> return cached status

        Raises:
            JobNotFoundException: If job is unknown or expired
        """
        job = self.job_store.get(query.job_id)
        if job is None:
            logger.warning(f"Job not found: {query.job_id}")
            raise JobNotFoundException(query.job_id)

        status = JobStatus(job["status"])
        if status.is_terminal:
            return JobStatusResult(
                job_id=job["id"],
                status=status,
                output=job.get("output"),
                error=job.get("error"),
            )

        run_id = job.get("trigger_run_id")
        if run_id:
            try:
                outcome = self.trigger_client.retrieve_run(run_id)
            except TriggerApiError as e:
                logger.error(f"Failed to check Trigger.dev run {run_id}: {e}")
            else:
                return self._refresh(job["id"], outcome)

        return JobStatusResult(
            job_id=job["id"], status=status, progress=job.get("progress")
        )

    def _refresh(self, job_id: str, outcome: RunOutcome) -> JobStatusResult:
        if outcome.is_success:
            self.job_store.set_output(job_id, outcome.output)
            return JobStatusResult(
                job_id=job_id, status=JobStatus.COMPLETE, output=outcome.output
            )

        if outcome.is_terminal:
            error = outcome.failure_message
            self.job_store.set_error(job_id, error)
            return JobStatusResult(job_id=job_id, status=JobStatus.FAILED, error=error)

        progress = f"Trigger.dev run status: {outcome.status}"
        self.job_store.update_status(job_id, JobStatus.PROCESSING, progress=progress)
        return JobStatusResult(
            job_id=job_id, status=JobStatus.PROCESSING, progress=progress
        )

    def handle_by_run(self, trigger_run_id: str) -> RunStatusResult:
        """
        Look up a run directly on Trigger.dev (job store is not touched).

        Raises:
            RunNotFoundError: If Trigger.dev does not know the run
            TriggerApiError: If Trigger.dev is unreachable
        """
        outcome = self.trigger_client.retrieve_run(trigger_run_id)

        if outcome.is_success:
            return RunStatusResult(
                trigger_run_id=trigger_run_id,
                status=JobStatus.COMPLETE,
                output=outcome.output,
                completed_at=(
                    outcome.finished_at.isoformat() if outcome.finished_at else None
                ),
            )

        if outcome.is_terminal:
            return RunStatusResult(
                trigger_run_id=trigger_run_id,
                status=JobStatus.FAILED,
                error=outcome.failure_message,
            )

        return RunStatusResult(
            trigger_run_id=trigger_run_id,
            status=JobStatus.PROCESSING,
            run_status=outcome.status,
        )
