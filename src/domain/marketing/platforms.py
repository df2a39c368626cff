"""
Marketing Platform Enumerations

Closed vocabularies shared by projects, briefs and generations.

Responsibility:
    - Advertising platforms supported by ad copy generation
    - Campaign goals selectable on a brief
    - Categories for files attached to a project

Architecture Notes:
    - Part of Marketing subdomain
    - str-based Enums so values serialize directly to JSON
"""

from enum import Enum


class Platform(str, Enum):
    """
    Advertising platforms that ad copy can be generated for.

    Attributes:
        LINKEDIN: LinkedIn Ads
        GOOGLE: Google Ads (responsive search ads)
        META: Meta (Facebook/Instagram)
    """

    LINKEDIN = "linkedin"
    GOOGLE = "google"
    META = "meta"


class CampaignGoal(str, Enum):
    """Primary objective of a campaign brief."""

    AWARENESS = "awareness"
    LEAD_GEN = "lead_gen"
    DEMO_REQUEST = "demo_request"
    CONTENT_DOWNLOAD = "content_download"
    WEBSITE_TRAFFIC = "website_traffic"
    EVENT_REGISTRATION = "event_registration"


class FileType(str, Enum):
    """Category of a file uploaded to a project."""

    COMPETITOR_AD = "competitor_ad"
    BRAND_GUIDELINES = "brand_guidelines"
    PRODUCT_SHEET = "product_sheet"
    OTHER = "other"
