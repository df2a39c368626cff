"""
Application Queries (CQRS read side)

Exports:
    - GetJobStatusQuery / GetJobStatusQueryHandler
    - JobStatusResult, RunStatusResult
    - JobNotFoundException
"""

from .get_job_status import (
    GetJobStatusQuery,
    GetJobStatusQueryHandler,
    JobNotFoundException,
    JobStatusResult,
    RunStatusResult,
)

__all__ = [
    "GetJobStatusQuery",
    "GetJobStatusQueryHandler",
    "JobNotFoundException",
    "JobStatusResult",
    "RunStatusResult",
]
