"""
API Schemas Package

Pydantic request/response models for the API Layer.
"""

from src.api.schemas.common import ErrorResponse
from src.api.schemas.jobs import (
    JobAcceptedResponse,
    JobStatusResponse,
    RunStatusResponse,
)

__all__ = [
    "ErrorResponse",
    "JobAcceptedResponse",
    "JobStatusResponse",
    "RunStatusResponse",
]
