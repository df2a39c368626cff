"""
Shared Application Models

Responsibility:
    Contains shared models used across Application Layer.
    Prevents circular dependencies between services, queries and tasks.

Architecture Notes:
    - Part of Application Layer (Shared)
    - Used by TriggerJobUseCase, GetJobStatusQueryHandler,
      WebhookDeliveryService and the API routers

Contains:
    - JobStatus: Enum for job lifecycle states
"""

from enum import Enum


class JobStatus(str, Enum):
    """
    Status of a job handed out to API callers.

    A job wraps exactly one Trigger.dev run; the status is what this
    service last learned about that run.

    Attributes:
        ACCEPTED: Run triggered, nothing observed yet
        PROCESSING: Run seen in a non-terminal status
        COMPLETE: Run completed, output cached
        FAILED: Run ended in any other terminal status, error cached

    Usage:
        >>> from src.application.models import JobStatus
        >>> JobStatus.COMPLETE.value
        'complete'
        >>> JobStatus("failed").is_terminal
        True
    """

    ACCEPTED = "accepted"
    PROCESSING = "processing"
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETE, JobStatus.FAILED)
