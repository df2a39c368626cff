"""
Tests for Project Entity.
Covers: create(), apply_update() partial semantics, input validation.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.domain.marketing.entities.project import (
    CreateProjectInput,
    Project,
    TargetAudience,
    UpdateProjectInput,
)
from src.domain.shared.exceptions import InvalidProjectError

CREATED = datetime(2025, 1, 1, tzinfo=timezone.utc)
UPDATED = datetime(2025, 2, 1, tzinfo=timezone.utc)


@pytest.fixture
def project():
    return Project.create(
        CreateProjectInput(
            name="Q3 launch",
            company_name="Acme",
            company_website="https://acme.com",
            target_audience=TargetAudience(roles=["CFO"]),
        ),
        project_id="proj-1",
        now=CREATED,
    )


# ============================================================================
# create()
# ============================================================================


def test_create_sets_identity_and_timestamps(project):
    assert project.id == "proj-1"
    assert project.created_at == CREATED
    assert project.updated_at == CREATED
    assert project.company_website == "https://acme.com"
    assert project.target_audience.roles == ["CFO"]


def test_create_generates_uuid_when_no_id_given():
    project = Project.create(CreateProjectInput(name="A", company_name="B"))
    assert len(project.id) == 36
    assert project.company_website is None


@pytest.mark.parametrize(
    "website",
    ["https://acme.com", "https://acme.com/about?ref=q3", "http://acme.com:8080"],
)
def test_create_keeps_website_string_unchanged(website):
    project = Project.create(
        CreateProjectInput(name="Q3", company_name="Acme", company_website=website)
    )
    assert project.company_website == website
    assert project.model_dump()["company_website"] == website


@pytest.mark.parametrize(
    "data",
    [
        {"name": "", "company_name": "Acme"},
        {"name": "Q3"},
        {"name": "Q3", "company_name": "Acme", "company_website": "not a url"},
        {"name": "Q3", "company_name": "Acme", "company_website": "ftp://acme.com"},
    ],
)
def test_create_input_validation(data):
    with pytest.raises(ValidationError):
        CreateProjectInput(**data)


# ============================================================================
# apply_update()
# ============================================================================


def test_apply_update_changes_only_sent_fields(project):
    updated = project.apply_update(
        UpdateProjectInput(industry="Biotech", brand_voice="Plain"), now=UPDATED
    )

    assert updated.industry == "Biotech"
    assert updated.brand_voice == "Plain"
    assert updated.name == "Q3 launch"
    assert updated.target_audience.roles == ["CFO"]
    assert updated.id == project.id
    assert updated.created_at == CREATED
    assert updated.updated_at == UPDATED
    assert project.industry is None


def test_apply_update_can_clear_optional_field(project):
    updated = project.apply_update(UpdateProjectInput(company_website=None))
    assert updated.company_website is None


def test_apply_update_keeps_website_as_sent(project):
    updated = project.apply_update(
        UpdateProjectInput(company_website="https://acme.io")
    )
    assert updated.company_website == "https://acme.io"


def test_apply_update_replaces_target_audience(project):
    updated = project.apply_update(
        UpdateProjectInput(target_audience=TargetAudience(verticals=["Pharma"]))
    )
    assert isinstance(updated.target_audience, TargetAudience)
    assert updated.target_audience.verticals == ["Pharma"]
    assert updated.target_audience.roles is None


@pytest.mark.parametrize("field_name", ["name", "company_name"])
def test_apply_update_rejects_clearing_required_field(project, field_name):
    with pytest.raises(InvalidProjectError) as exc_info:
        project.apply_update(UpdateProjectInput(**{field_name: None}))

    assert exc_info.value.field_name == field_name
