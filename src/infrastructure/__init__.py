"""
Infrastructure Layer - External Dependencies

Talks to everything outside the process: Trigger.dev, callback URLs,
Redis and Exa.ai. No business rules live here.

Modules:
    - trigger: Trigger.dev REST client (httpx)
    - webhooks: Callback POST with retry (httpx)
    - persistence: Redis connection pool and job store
    - search: Exa.ai web research (exa-py)

Usage:
    >>> from src.infrastructure import TriggerClient, WebhookClient, RedisJobStore
"""

from .persistence import RedisJobStore
from .search import ExaSearchService, WebResearchResult
from .trigger import (
    RunNotFoundError,
    RunPollTimeoutError,
    TriggerApiError,
    TriggerClient,
    TriggerHandle,
)
from .webhooks import WebhookClient, WebhookDeliveryError

__all__ = [
    # Trigger.dev
    "TriggerClient",
    "TriggerHandle",
    "TriggerApiError",
    "RunNotFoundError",
    "RunPollTimeoutError",
    # Webhooks
    "WebhookClient",
    "WebhookDeliveryError",
    # Persistence
    "RedisJobStore",
    # Search
    "ExaSearchService",
    "WebResearchResult",
]
