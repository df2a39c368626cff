"""
Marketing Entities

Project and Generation records.
"""

from .generation import (
    Generation,
    GenerationOutput,
    GenerationPlatforms,
    GenerationStatus,
)
from .project import CreateProjectInput, Project, TargetAudience, UpdateProjectInput

__all__ = [
    "Project",
    "CreateProjectInput",
    "UpdateProjectInput",
    "TargetAudience",
    "Generation",
    "GenerationOutput",
    "GenerationPlatforms",
    "GenerationStatus",
]
