"""
Domain Layer - Core Business Logic

Business rules and data shapes of the Master Marketer orchestration API.
Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
      beyond Pydantic for validation
    - Domain-Driven Design: Entities, Value Objects

Subdomains:
    - marketing: Projects, generations, ad variations, platform vocabularies
    - delivery: Run outcomes and callback payload rules
    - shared: Cross-subdomain concepts (exceptions)

Usage:
    >>> from src.domain import Project, RunOutcome, build_result_payload
    >>> from src.domain.marketing.entities import Generation
"""

# Delivery Subdomain
from .delivery import (
    CallbackMetadata,
    CallbackTarget,
    RunOutcome,
    TriggerRunStatus,
    build_failure_payload,
    build_result_payload,
)

# Marketing Subdomain
from .marketing import (
    CreateProjectInput,
    Generation,
    GenerationStatus,
    Platform,
    Project,
    UpdateProjectInput,
)

# Shared Domain
from .shared import DomainException, InvalidCallbackError, InvalidProjectError

__all__ = [
    # Delivery Subdomain
    "RunOutcome",
    "TriggerRunStatus",
    "CallbackMetadata",
    "CallbackTarget",
    "build_result_payload",
    "build_failure_payload",
    # Marketing Subdomain
    "Project",
    "CreateProjectInput",
    "UpdateProjectInput",
    "Generation",
    "GenerationStatus",
    "Platform",
    # Shared Domain
    "DomainException",
    "InvalidProjectError",
    "InvalidCallbackError",
]
