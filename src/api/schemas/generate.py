"""
Generate Request Schemas

Request bodies for /api/generate/* endpoints (roadmap, content plan,
SEO audit). callback_url and metadata are read from the raw body before
validation and are not part of these models.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CompetitiveScore(BaseModel):
    organic_seo: float
    social_media: float
    content_strategy: float
    paid_media: float
    brand_positioning: float
    overall: float


class ProcessLibraryEntry(BaseModel):
    """Billable task template used for points-based allocation."""

    task: str = Field(min_length=1)
    description: str = Field(min_length=1)
    stage: Literal["Foundation", "Execution", "Analysis"]
    points: float = Field(gt=0)


class ClientRef(BaseModel):
    company_name: str = Field(min_length=1)
    domain: str = Field(min_length=1)


class ResearchSummary(BaseModel):
    """Output of a previous research run used as context."""

    full_document_markdown: str = Field(min_length=1)
    competitive_scores: dict[str, CompetitiveScore]


class PassthroughDocument(BaseModel):
    """Previous generated output, forwarded as-is."""

    model_config = ConfigDict(extra="allow")


class RoadmapRequest(BaseModel):
    """
    Roadmap generation request (task: generate-roadmap).

    Attributes:
        client: Client company
        research: Research report and competitive scores
        transcripts: Meeting transcripts
        process_library: At least one billable task template
        points_budget: Total points available (> 0)
        instructions: Strategist instructions
        title: Custom title
    """

    client: ClientRef
    research: ResearchSummary
    transcripts: list[str]
    process_library: list[ProcessLibraryEntry] = Field(min_length=1)
    points_budget: float = Field(gt=0)
    instructions: Optional[str] = None
    title: Optional[str] = None


class ContentPlanRequest(BaseModel):
    """Content plan generation request (task: generate-content-plan)."""

    client: ClientRef
    competitors: list[ClientRef] = Field(min_length=1, max_length=4)
    roadmap: PassthroughDocument
    seo_audit: PassthroughDocument
    research: ResearchSummary
    transcripts: list[str]
    process_library: Optional[list[ProcessLibraryEntry]] = None
    instructions: Optional[str] = None
    title: Optional[str] = None
    previous_content_plan: Optional[PassthroughDocument] = None


class SeoAuditRequest(BaseModel):
    """
    SEO audit generation request (task: generate-seo-audit).

    Attributes:
        max_crawl_pages: Pages to crawl, 1-2000 (default 500)
    """

    client: ClientRef
    competitors: list[ClientRef] = Field(min_length=1, max_length=4)
    seed_topics: Optional[list[str]] = None
    research_context: Optional[ResearchSummary] = None
    max_crawl_pages: int = Field(default=500, ge=1, le=2000)
    instructions: Optional[str] = None
    title: Optional[str] = None


def extract_callback_fields(
    body: dict[str, Any],
) -> tuple[dict[str, Any], Optional[str], Optional[dict[str, Any]]]:
    """
    Split callback_url / metadata off a raw request body.

    Returns:
        (remaining body, callback url or None, metadata or None)
        callback url is kept only when it is an http:// or https:// URL;
        metadata only when it is a JSON object
    """
    rest = {k: v for k, v in body.items() if k not in ("callback_url", "metadata")}

    callback_url = body.get("callback_url")
    if not (
        isinstance(callback_url, str)
        and callback_url.startswith(("http://", "https://"))
    ):
        callback_url = None

    metadata = body.get("metadata")
    if not isinstance(metadata, dict):
        metadata = None

    return rest, callback_url, metadata
