"""
Application Layer Package

Responsibility:
    Coordinates use cases and runs long-lived work (run watching, callback
    delivery) on Celery workers.

Contains:
    - queries/: job and run status lookups
    - services/: trigger-job use case, webhook delivery
    - tasks/: Celery app and delivery task
    - models: Shared Application Layer models

Does NOT contain:
    - Domain business rules (in Domain Layer)
    - HTTP handling (in API Layer)
    - Infrastructure details (in Infrastructure Layer)
"""

# Re-export commonly used models for convenience
from src.application.models import JobStatus

__all__ = [
    "JobStatus",
]
