"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Attributes:
        code: Machine-readable error code (e.g., "JOB_NOT_FOUND", "UNAUTHORIZED")
        message: Human-readable error message
        details: Optional additional error details
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "JOB_NOT_FOUND",
                "message": "Job 7f0c2a1e-9d4b-4c55-8a57-1f0d4b2e9a10 not found or expired",
                "details": {"job_id": "7f0c2a1e-9d4b-4c55-8a57-1f0d4b2e9a10"},
            }
        }


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Always "ok" if endpoint responds
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: float
