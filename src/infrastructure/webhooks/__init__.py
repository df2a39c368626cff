"""
Webhook Infrastructure Module

Outbound HTTP delivery of job results to caller callbacks.

Exports:
    - WebhookClient: JSON POST with linear-backoff retry
    - WebhookDeliveryError: Raised when all attempts fail
"""

from .exceptions import WebhookDeliveryError
from .webhook_client import WebhookClient

__all__ = ["WebhookClient", "WebhookDeliveryError"]
