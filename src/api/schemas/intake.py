"""
Intake Request Schemas

Request bodies for /api/intake/* endpoints. Validated bodies are passed
unchanged (minus unknown keys) as Trigger.dev task payloads.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

DeliverableType = Literal["roadmap", "plan", "brief"]


# ============================================================================
# MEETING NOTES
# ============================================================================


class StructuredTranscriptEntry(BaseModel):
    """One utterance of a structured transcript."""

    speaker: str
    text: str
    start_time: Optional[float] = None


class MeetingNotesRequest(BaseModel):
    """
    Meeting transcript to analyze (task: analyze-meeting-notes).

    Attributes:
        transcript: Plain text with speaker labels, or structured entries
        meeting_title: Optional title
        meeting_date: Optional ISO date string
        participants: Optional participant names
        guidance: Optional steering for the analysis
    """

    transcript: Union[str, list[StructuredTranscriptEntry]]
    meeting_title: Optional[str] = None
    meeting_date: Optional[str] = None
    participants: Optional[list[str]] = None
    guidance: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "transcript": "Anna: Let's move the launch to May.\nTom: Agreed.",
                "meeting_title": "Q2 planning",
                "participants": ["Anna", "Tom"],
            }
        }


# ============================================================================
# DELIVERABLE INTAKE (roadmap / plan / brief)
# ============================================================================


class DeliverableContext(BaseModel):
    contract_name: str
    industry: str
    additional_notes: Optional[str] = None


class DeliverableIntakeRequest(BaseModel):
    """
    Existing deliverable to analyze (task: analyze-deliverable).

    deliverable_type is taken from the URL path, not from the body.
    """

    content: str
    context: DeliverableContext


# ============================================================================
# RESEARCH
# ============================================================================


class CompanyInfo(BaseModel):
    company_name: str = Field(min_length=1)
    domain: str = Field(min_length=1)
    linkedin_handle: Optional[str] = None
    youtube_channel_id: Optional[str] = None


class ResearchContext(BaseModel):
    industry_description: str = Field(min_length=1)
    solution_category: Optional[str] = None
    target_verticals: Optional[list[str]] = None


class KnowledgeBase(BaseModel):
    """Discovery data assembled by the calling app; entries are opaque."""

    primary_meetings: Optional[list[Any]] = None
    other_meetings: Optional[list[Any]] = None
    notes: Optional[list[Any]] = None
    processes: Optional[list[Any]] = None


class ResearchRequest(BaseModel):
    """
    Competitive research report request (task: generate-research).

    Attributes:
        client: Company the report is about
        competitors: 1-4 competitor companies
        context: Optional industry context
        rag_context: Legacy free-text discovery notes
        knowledge_base: Structured discovery data
        instructions: Strategist instructions
        title: Custom report title
    """

    client: CompanyInfo
    competitors: list[CompanyInfo] = Field(min_length=1, max_length=4)
    context: Optional[ResearchContext] = None
    rag_context: Optional[str] = None
    knowledge_base: Optional[KnowledgeBase] = None
    instructions: Optional[str] = None
    title: Optional[str] = None
