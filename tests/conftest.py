"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - test_settings: Settings built from the test environment
    - redis_client / clean_redis: real Redis for integration tests

Architecture Notes:
    - Required settings (API_KEY, TRIGGER_SECRET_KEY) are set at import
      time so that importing src.api.main never fails in tests

Usage:
    def test_something(clean_redis):
        clean_redis.set("key", "value")
"""

import logging
import os
from typing import Generator

import pytest

# Must run before any src.api import (create_app reads settings)
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("TRIGGER_SECRET_KEY", "tr_dev_test_secret")
os.environ.setdefault("ENVIRONMENT", "test")

from src.shared.config import Settings, get_settings, reset_settings  # noqa: E402

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

TEST_API_KEY = os.environ["API_KEY"]


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Generator[Settings, None, None]:
    """Settings loaded from the test environment (cache reset afterwards)."""
    reset_settings()
    yield get_settings()
    reset_settings()


# ============================================================================
# REDIS FIXTURES (integration only)
# ============================================================================


@pytest.fixture(scope="session")
def redis_client():
    """
    Provide real Redis client for integration tests.

    Skips the test when Redis is not reachable.
    """
    from src.infrastructure.persistence.redis.connection import (
        close_connections,
        get_redis_client,
        health_check,
    )

    if not health_check():
        pytest.skip("Redis is not available (set REDIS_URL or REDIS_HOST)")

    client = get_redis_client()
    yield client
    close_connections()


@pytest.fixture(scope="function")
def clean_redis(redis_client):
    """Flush Redis database before and after each test."""
    redis_client.flushdb()
    yield redis_client
    redis_client.flushdb()


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """
    Register custom markers for test categorization.

    Markers:
        - integration: Integration tests (require Redis)
        - unit: Unit tests (no external dependencies)
    """
    config.addinivalue_line(
        "markers", "integration: Integration tests (require Redis)"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests (no external dependencies)"
    )
