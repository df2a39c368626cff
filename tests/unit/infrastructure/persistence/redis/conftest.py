"""
Pytest Configuration for Redis Tests.

Keeps REDIS_* environment variables of the developer machine out of
connection tests.
"""

import pytest


@pytest.fixture(autouse=True)
def clear_redis_env(monkeypatch):
    for name in (
        "REDIS_URL",
        "REDIS_HOST",
        "REDIS_PORT",
        "REDIS_DB",
        "REDIS_MAX_CONNECTIONS",
        "REDIS_TIMEOUT",
        "REDIS_RETRY_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
