"""
Project Entity

A project is the company profile that briefs and generations hang off:
who the company is, who it sells to and how it sounds.

Responsibility:
    - Validated create/update input schemas
    - Project record with identity and timestamps
    - Applying partial updates without touching identity

Architecture Notes:
    - Part of Marketing subdomain
    - Uses Pydantic for validation (input schemas double as API bodies)
    - Passive record: no lifecycle beyond create/update
"""

from datetime import datetime, timezone
from typing import Annotated, Optional
from uuid import uuid4

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
)

from src.domain.shared.exceptions import InvalidProjectError

# Fields that may never be cleared by an update
REQUIRED_PROJECT_FIELDS = ("name", "company_name")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


_HTTP_URL = TypeAdapter(HttpUrl)


def _check_website(value: str) -> str:
    """Validate as an http(s) URL, keep the string exactly as sent."""
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"company_website must be an http(s) URL: {value!r}") from e
    return value


WebsiteUrl = Annotated[str, AfterValidator(_check_website)]


class TargetAudience(BaseModel):
    """
    Audience a project markets to.

    Attributes:
        roles: Job titles / functions (e.g. "CFO", "Head of IT")
        company_sizes: Size bands (e.g. "50-200")
        verticals: Industries targeted
    """

    roles: Optional[list[str]] = None
    company_sizes: Optional[list[str]] = None
    verticals: Optional[list[str]] = None


class CreateProjectInput(BaseModel):
    """
    Input schema for creating a project.

    Business Rules:
        - name and company_name must be non-empty
        - company_website, when given, must be an http(s) URL
    """

    name: str = Field(min_length=1)
    company_name: str = Field(min_length=1)
    company_website: Optional[WebsiteUrl] = None
    industry: Optional[str] = None
    target_audience: Optional[TargetAudience] = None
    brand_voice: Optional[str] = None
    product_description: Optional[str] = None
    key_differentiators: Optional[list[str]] = None


class UpdateProjectInput(BaseModel):
    """
    Input schema for updating a project.

    Every field of CreateProjectInput becomes optional. Only fields the
    caller actually sent are applied (see Project.apply_update).
    """

    name: Optional[str] = Field(default=None, min_length=1)
    company_name: Optional[str] = Field(default=None, min_length=1)
    company_website: Optional[WebsiteUrl] = None
    industry: Optional[str] = None
    target_audience: Optional[TargetAudience] = None
    brand_voice: Optional[str] = None
    product_description: Optional[str] = None
    key_differentiators: Optional[list[str]] = None


class Project(BaseModel):
    """
    Stored project record.

    Attributes:
        id: Project identifier (UUID string)
        name: Internal project name
        company_name: Client company name
        company_website: Client website (None if unknown)
        industry: Client industry
        target_audience: Audience definition
        brand_voice: Tone of voice guidance
        product_description: What the client sells
        key_differentiators: Selling points versus competitors
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Examples:
        >>> project = Project.create(CreateProjectInput(name="Q3", company_name="Acme"))
        >>> project.company_name
        'Acme'
        >>> updated = project.apply_update(UpdateProjectInput(industry="Biotech"))
        >>> updated.industry, updated.id == project.id
        ('Biotech', True)
    """

    id: str
    name: str
    company_name: str
    company_website: Optional[str] = None
    industry: Optional[str] = None
    target_audience: Optional[TargetAudience] = None
    brand_voice: Optional[str] = None
    product_description: Optional[str] = None
    key_differentiators: Optional[list[str]] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        data: CreateProjectInput,
        project_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Project":
        """
        Build a new project from validated input.

        Args:
            data: Validated create input
            project_id: Explicit id (default: new UUID4)
            now: Creation time (default: current UTC time)

        Returns:
            Project with created_at == updated_at
        """
        timestamp = now or _utcnow()
        fields = data.model_dump()

        return cls(
            id=project_id or str(uuid4()),
            created_at=timestamp,
            updated_at=timestamp,
            **fields,
        )

    def apply_update(
        self, update: UpdateProjectInput, now: Optional[datetime] = None
    ) -> "Project":
        """
        Return a copy of this project with the update applied.

        Only fields explicitly set on the update are copied. id and
        created_at never change; updated_at is advanced.

        Args:
            update: Validated update input
            now: Update time (default: current UTC time)

        Returns:
            New Project instance

        Raises:
            InvalidProjectError: If update explicitly clears name or company_name
        """
        changes = update.model_dump(exclude_unset=True)

        for field_name in REQUIRED_PROJECT_FIELDS:
            if field_name in changes and not changes[field_name]:
                raise InvalidProjectError(
                    f"{field_name} cannot be empty", field_name=field_name
                )

        if "target_audience" in changes and update.target_audience is not None:
            changes["target_audience"] = update.target_audience

        changes["updated_at"] = now or _utcnow()
        return self.model_copy(update=changes)
