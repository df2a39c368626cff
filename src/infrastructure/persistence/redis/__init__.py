"""
Redis Infrastructure Module

Redis connection pooling and the job record store.

Exports:
    - RedisJobStore: Job records with TTL (job:{job_id})
    - get_redis_client: Get Redis client with connection pooling
    - health_check: Check Redis health with PING test
    - close_connections: Close all Redis connections
"""

from .connection import close_connections, get_redis_client, health_check
from .job_store import RedisJobStore

__all__ = [
    "RedisJobStore",
    "get_redis_client",
    "health_check",
    "close_connections",
]
