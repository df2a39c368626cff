"""
Marketing Subdomain

Data shapes for the marketing objects the API deals with: client projects,
ad copy generations and the per-platform ad variations they contain.

Exports:
    - Project, CreateProjectInput, UpdateProjectInput, TargetAudience
    - Generation, GenerationOutput, GenerationStatus
    - LinkedInAdVariation, GoogleAdVariation, MetaAdVariation
    - Platform, CampaignGoal, FileType
"""

from .entities import (
    CreateProjectInput,
    Generation,
    GenerationOutput,
    GenerationPlatforms,
    GenerationStatus,
    Project,
    TargetAudience,
    UpdateProjectInput,
)
from .platforms import CampaignGoal, FileType, Platform
from .value_objects import (
    GoogleAdVariation,
    GoogleSitelink,
    LinkedInAdVariation,
    MetaAdVariation,
)

__all__ = [
    "Project",
    "CreateProjectInput",
    "UpdateProjectInput",
    "TargetAudience",
    "Generation",
    "GenerationOutput",
    "GenerationPlatforms",
    "GenerationStatus",
    "LinkedInAdVariation",
    "GoogleAdVariation",
    "GoogleSitelink",
    "MetaAdVariation",
    "Platform",
    "CampaignGoal",
    "FileType",
]
