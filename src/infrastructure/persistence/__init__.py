"""
Persistence Infrastructure Module

Exports:
    From redis:
        - RedisJobStore
"""

from .redis import RedisJobStore

__all__ = [
    "RedisJobStore",
]
