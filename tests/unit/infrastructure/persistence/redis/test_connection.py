"""
Tests for Redis Connection Pool Management.

Covers:
- Singleton connection pool (host/port and REDIS_URL)
- Retry logic with exponential backoff
- Health check with PING
- Connection cleanup
"""

from unittest.mock import MagicMock, call, patch

import pytest
from redis import ConnectionPool
from redis.exceptions import ConnectionError, RedisError, TimeoutError

import src.infrastructure.persistence.redis.connection as conn_module
from src.infrastructure.persistence.redis.connection import (
    close_connections,
    get_redis_client,
    health_check,
)

MODULE = "src.infrastructure.persistence.redis.connection"


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset singleton pool before and after each test."""
    conn_module._redis_pool = None
    yield
    conn_module._redis_pool = None


@pytest.fixture
def redis_class():
    with patch(f"{MODULE}.Redis") as redis_class:
        client = MagicMock()
        client.ping.return_value = True
        redis_class.return_value = client
        yield redis_class


@pytest.fixture
def pool_class():
    with patch(f"{MODULE}.ConnectionPool") as pool_class:
        yield pool_class


@pytest.fixture
def sleep():
    with patch(f"{MODULE}.time.sleep") as sleep:
        yield sleep


# ============================================================================
# HAPPY PATH TESTS - get_redis_client()
# ============================================================================


def test_get_redis_client_uses_default_host_config(pool_class, redis_class):
    client = get_redis_client()

    pool_class.assert_called_once_with(
        host="localhost",
        port=6379,
        db=0,
        max_connections=10,
        socket_timeout=5,
        socket_connect_timeout=5,
        socket_keepalive=True,
        decode_responses=True,
    )
    redis_class.assert_called_once_with(connection_pool=pool_class.return_value)
    client.ping.assert_called_once()


def test_get_redis_client_prefers_redis_url(monkeypatch, pool_class, redis_class):
    monkeypatch.setenv("REDIS_URL", "redis://cache.internal:6380/2")

    get_redis_client()

    pool_class.from_url.assert_called_once()
    args, kwargs = pool_class.from_url.call_args
    assert args == ("redis://cache.internal:6380/2",)
    assert kwargs["decode_responses"] is True
    pool_class.assert_not_called()


def test_get_redis_client_reads_config_from_env(monkeypatch, pool_class, redis_class):
    monkeypatch.setenv("REDIS_HOST", "redis")
    monkeypatch.setenv("REDIS_PORT", "6390")
    monkeypatch.setenv("REDIS_MAX_CONNECTIONS", "20")

    get_redis_client()

    kwargs = pool_class.call_args.kwargs
    assert kwargs["host"] == "redis"
    assert kwargs["port"] == 6390
    assert kwargs["max_connections"] == 20


def test_get_redis_client_reuses_pool(pool_class, redis_class):
    get_redis_client()
    get_redis_client()

    assert pool_class.call_count == 1


# ============================================================================
# RETRY TESTS
# ============================================================================


@pytest.mark.parametrize("error", [ConnectionError("refused"), TimeoutError("slow")])
def test_get_redis_client_retries_transient_errors(pool_class, redis_class, sleep, error):
    redis_class.return_value.ping.side_effect = [error, True]

    get_redis_client()

    assert redis_class.return_value.ping.call_count == 2
    sleep.assert_called_once_with(1)


def test_get_redis_client_raises_after_max_retries(
    monkeypatch, pool_class, redis_class, sleep
):
    monkeypatch.setenv("REDIS_RETRY_ATTEMPTS", "4")
    redis_class.return_value.ping.side_effect = ConnectionError("refused")

    with pytest.raises(RedisError) as exc_info:
        get_redis_client()

    assert "after 4 attempts" in str(exc_info.value)
    assert sleep.call_args_list == [call(1), call(2), call(4)]


# ============================================================================
# health_check() / close_connections()
# ============================================================================


def test_health_check_true_when_ping_succeeds(pool_class, redis_class):
    assert health_check() is True


def test_health_check_false_when_redis_unreachable(pool_class, redis_class, sleep):
    redis_class.return_value.ping.side_effect = ConnectionError("refused")

    assert health_check() is False


def test_close_connections_disconnects_and_resets():
    pool = MagicMock(spec=ConnectionPool)
    conn_module._redis_pool = pool

    close_connections()

    pool.disconnect.assert_called_once()
    assert conn_module._redis_pool is None


def test_close_connections_handles_disconnect_error():
    pool = MagicMock(spec=ConnectionPool)
    pool.disconnect.side_effect = RedisError("already gone")
    conn_module._redis_pool = pool

    close_connections()

    assert conn_module._redis_pool is None


def test_close_connections_when_not_initialized():
    close_connections()
    assert conn_module._redis_pool is None
