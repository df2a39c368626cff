"""
Generation Entity

One run of ad copy generation for a brief: which platforms were asked for,
where the background run is, what came out and how many tokens it cost.

Architecture Notes:
    - Part of Marketing subdomain
    - Status values mirror the stored generation row, not Trigger.dev
      run statuses (see src.domain.delivery.run_outcome for those)
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from src.domain.marketing.platforms import Platform
from src.domain.marketing.value_objects.ad_variations import (
    GooglePlatformOutput,
    LinkedInPlatformOutput,
    MetaPlatformOutput,
)


class GenerationStatus(str, Enum):
    """
    Lifecycle status of a generation.

    Attributes:
        PENDING: Row created, run not started
        PROCESSING: Background run in progress
        COMPLETE: Output stored
        FAILED: Run failed, error_message populated
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETE = "complete"
    FAILED = "failed"


class GenerationPlatforms(BaseModel):
    """Per-platform sections; a platform is absent when it was not requested."""

    linkedin: Optional[LinkedInPlatformOutput] = None
    google: Optional[GooglePlatformOutput] = None
    meta: Optional[MetaPlatformOutput] = None


class GenerationOutput(BaseModel):
    """
    Generated ad copy for all requested platforms.

    Attributes:
        generatedAt: ISO timestamp produced by the pipeline
        platforms: Per-platform variations
    """

    generatedAt: str
    platforms: GenerationPlatforms

    def variation_count(self, platform: Optional[Platform] = None) -> int:
        """
        Count generated variations.

        Args:
            platform: Restrict count to one platform (default: all)

        Returns:
            Number of variations
        """
        selected = [platform] if platform else list(Platform)
        total = 0
        for item in selected:
            section = getattr(self.platforms, Platform(item).value)
            if section is not None:
                total += len(section.variations)
        return total


class Generation(BaseModel):
    """
    Stored generation record.

    Examples:
        >>> generation.status
        <GenerationStatus.PROCESSING: 'processing'>
        >>> generation.is_terminal
        False
    """

    id: str
    brief_id: str
    project_id: str
    status: GenerationStatus
    current_step: Optional[str] = None
    trigger_run_id: Optional[str] = None
    platforms: list[Platform]
    output: Optional[GenerationOutput] = None
    error_message: Optional[str] = None
    model_used: str
    prompt_tokens_used: Optional[int] = None
    completion_tokens_used: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @property
    def is_terminal(self) -> bool:
        """True once the generation will not change any more."""
        return self.status in (GenerationStatus.COMPLETE, GenerationStatus.FAILED)

    @property
    def total_tokens_used(self) -> Optional[int]:
        """Prompt + completion tokens, or None when neither counter is known."""
        if self.prompt_tokens_used is None and self.completion_tokens_used is None:
            return None
        return (self.prompt_tokens_used or 0) + (self.completion_tokens_used or 0)
