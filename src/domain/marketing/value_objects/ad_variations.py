"""
Ad Variation Value Objects

Per-platform shapes of generated ad copy. One variation is one complete
ad (headline, body, call to action) plus the model's rationale for it.

Architecture Notes:
    - Value Objects (immutable, defined by values)
    - Uses Pydantic for validation
    - Field names keep the camelCase wire format produced by the
      generation pipeline (variationName, introText, ...)
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class LinkedInAdVariation(BaseModel):
    """
    Single LinkedIn sponsored content ad.

    Attributes:
        variationName: Short label for the variation (e.g. "Pain point")
        headline: Ad headline shown under the creative
        introText: Introductory text above the creative
        description: Secondary description line
        ctaButton: LinkedIn CTA button label (e.g. "Learn More")
        rationale: Why this angle was chosen
    """

    model_config = ConfigDict(frozen=True)

    variationName: str
    headline: str
    introText: str
    description: str
    ctaButton: str
    rationale: str


class GoogleSitelink(BaseModel):
    """Sitelink extension attached to a Google responsive search ad."""

    model_config = ConfigDict(frozen=True)

    text: str
    description1: str
    description2: str


class GoogleAdVariation(BaseModel):
    """
    Google responsive search ad.

    Google assembles the ad from several headlines and descriptions,
    so both are lists rather than single strings.
    """

    model_config = ConfigDict(frozen=True)

    variationName: str
    headlines: list[str]
    descriptions: list[str]
    sitelinks: Optional[list[GoogleSitelink]] = None
    rationale: str


class MetaAdVariation(BaseModel):
    """Single Meta (Facebook/Instagram) feed ad."""

    model_config = ConfigDict(frozen=True)

    variationName: str
    primaryText: str
    headline: str
    description: str
    ctaButton: str
    rationale: str


class LinkedInPlatformOutput(BaseModel):
    """LinkedIn section of a generation output."""

    platformName: Literal["LinkedIn Ads"] = "LinkedIn Ads"
    variations: list[LinkedInAdVariation] = Field(default_factory=list)


class GooglePlatformOutput(BaseModel):
    """Google section of a generation output."""

    platformName: Literal["Google Ads"] = "Google Ads"
    variations: list[GoogleAdVariation] = Field(default_factory=list)


class MetaPlatformOutput(BaseModel):
    """Meta section of a generation output."""

    platformName: Literal["Meta (Facebook/Instagram)"] = "Meta (Facebook/Instagram)"
    variations: list[MetaAdVariation] = Field(default_factory=list)
