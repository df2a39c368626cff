"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI TestClient with dependency overrides
- Mock use case / query handler
- Auth headers
"""

import os
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import (
    get_job_status_query_handler,
    get_trigger_job_use_case,
)
from src.api.main import app
from src.application.services.trigger_job import JobAccepted

TEST_API_KEY = os.environ["API_KEY"]


@pytest.fixture
def auth_headers():
    """Valid x-api-key header."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def sample_job_id():
    """Generate a sample job ID (UUID)."""
    return str(uuid4())


@pytest.fixture
def mock_trigger_job_use_case():
    """Mock for TriggerJobUseCase returning an accepted job."""
    mock = MagicMock()
    mock.execute.side_effect = lambda command: JobAccepted(
        job_id="job-123",
        trigger_run_id="run_abc",
        message=command.accepted_message,
    )
    return mock


@pytest.fixture
def mock_job_status_handler():
    """Mock for GetJobStatusQueryHandler."""
    return MagicMock()


@pytest.fixture
def client(mock_trigger_job_use_case, mock_job_status_handler):
    """
    FastAPI TestClient with Application Layer dependencies overridden.

    Server exceptions are turned into 500 responses instead of raising.
    """
    app.dependency_overrides[get_trigger_job_use_case] = lambda: mock_trigger_job_use_case
    app.dependency_overrides[get_job_status_query_handler] = lambda: mock_job_status_handler
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
