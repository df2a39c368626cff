"""
Marketing Value Objects

Immutable ad copy shapes per advertising platform.
"""

from .ad_variations import (
    GoogleAdVariation,
    GooglePlatformOutput,
    GoogleSitelink,
    LinkedInAdVariation,
    LinkedInPlatformOutput,
    MetaAdVariation,
    MetaPlatformOutput,
)

__all__ = [
    "LinkedInAdVariation",
    "GoogleAdVariation",
    "GoogleSitelink",
    "MetaAdVariation",
    "LinkedInPlatformOutput",
    "GooglePlatformOutput",
    "MetaPlatformOutput",
]
