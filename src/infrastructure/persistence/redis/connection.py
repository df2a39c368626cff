"""
Redis Connection Pool Management.

Singleton connection pool shared by RedisJobStore and the health endpoint.

Responsibility:
    - Build one ConnectionPool per process (from REDIS_URL or host/port)
    - Verify the connection with PING, retrying with exponential backoff
    - Close the pool on shutdown

Architecture Notes:
    - Infrastructure Layer (external dependency on Redis)
    - Thread-safe singleton (threading.Lock, double-checked)
    - Hosted Redis (Render, Upstash) hands out a single REDIS_URL; local
      development uses REDIS_HOST / REDIS_PORT

Business Rules:
    - Max connections: REDIS_MAX_CONNECTIONS (10)
    - Socket timeout: REDIS_TIMEOUT (5s)
    - PING attempts: REDIS_RETRY_ATTEMPTS (3), backoff 1s, 2s
    - decode_responses=True (strings, not bytes)

Examples:
    >>> client = get_redis_client()
    >>> client.setex("job:abc", 3600, "{}")
    >>> health_check()
    True
    >>> close_connections()
"""

import logging
import os
import threading
import time
from typing import Optional

from redis import ConnectionPool, Redis
from redis.exceptions import ConnectionError, RedisError, TimeoutError

# Configure logger for this module
logger = logging.getLogger(__name__)

# Singleton connection pool (thread-safe)
_redis_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _build_pool(url: Optional[str], max_connections: int, timeout: int) -> ConnectionPool:
    options = dict(
        max_connections=max_connections,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
        socket_keepalive=True,
        decode_responses=True,
    )

    if url:
        logger.info(
            f"Creating Redis connection pool from REDIS_URL "
            f"(max_connections={max_connections}, timeout={timeout}s)"
        )
        return ConnectionPool.from_url(url, **options)

    host = os.getenv("REDIS_HOST", "localhost")
    port = int(os.getenv("REDIS_PORT", "6379"))
    db = int(os.getenv("REDIS_DB", "0"))
    logger.info(
        f"Creating Redis connection pool: host={host}, port={port}, db={db}, "
        f"max_connections={max_connections}, timeout={timeout}s"
    )
    return ConnectionPool(host=host, port=port, db=db, **options)


def get_redis_client(
    url: Optional[str] = None,
    max_connections: Optional[int] = None,
    timeout: Optional[int] = None,
) -> Redis:
    """
    Get Redis client backed by the shared connection pool.

    Args:
        url: redis:// URL (default from env: REDIS_URL, else REDIS_HOST/REDIS_PORT)
        max_connections: Pool size (default from env: REDIS_MAX_CONNECTIONS or 10)
        timeout: Socket timeout in seconds (default from env: REDIS_TIMEOUT or 5)

    Returns:
        Redis client that answered PING

    Raises:
        RedisError: If PING fails after all retry attempts
    """
    global _redis_pool

    redis_url = url or os.getenv("REDIS_URL")
    max_conn = max_connections or int(os.getenv("REDIS_MAX_CONNECTIONS", "10"))
    conn_timeout = timeout or int(os.getenv("REDIS_TIMEOUT", "5"))

    if _redis_pool is None:
        with _pool_lock:
            if _redis_pool is None:
                _redis_pool = _build_pool(redis_url, max_conn, conn_timeout)

    client = Redis(connection_pool=_redis_pool)

    retry_attempts = int(os.getenv("REDIS_RETRY_ATTEMPTS", "3"))
    last_error: Optional[Exception] = None

    for attempt in range(retry_attempts):
        try:
            client.ping()
            logger.debug(f"Redis connection established (attempt {attempt + 1})")
            return client

        except (ConnectionError, TimeoutError) as e:
            last_error = e
            if attempt < retry_attempts - 1:
                delay = 2**attempt
                logger.warning(
                    f"Redis connection failed (attempt {attempt + 1}/{retry_attempts}): {e}. "
                    f"Retrying in {delay}s..."
                )
                time.sleep(delay)
            else:
                logger.error(
                    f"Redis connection failed after {retry_attempts} attempts: {e}"
                )

    raise RedisError(
        f"Failed to connect to Redis after {retry_attempts} attempts. "
        f"Last error: {last_error}"
    )


def health_check() -> bool:
    """
    PING Redis through the pool.

    Returns:
        True when Redis answered, False on any error (never raises)
    """
    try:
        return bool(get_redis_client().ping())

    except RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        return False


def close_connections() -> None:
    """Disconnect the pool and reset the singleton (safe to call twice)."""
    global _redis_pool

    with _pool_lock:
        if _redis_pool is None:
            logger.debug("Redis connection pool already closed or not initialized")
            return

        logger.info("Closing Redis connection pool")
        try:
            _redis_pool.disconnect()
        except RedisError as e:
            logger.error(f"Error closing Redis connection pool: {e}")
        finally:
            _redis_pool = None
