"""
Application Services

Responsibility:
    Use cases that coordinate domain rules with infrastructure clients.

Contains:
    - TriggerJobUseCase: trigger a Trigger.dev task and register the job
    - WebhookDeliveryService: poll a run and deliver its result
    - watch_run_and_deliver: dispatch delivery to a Celery worker

Does NOT contain:
    - Payload rules (src.domain.delivery)
    - HTTP details (src.infrastructure)
"""

from .trigger_job import JobAccepted, TriggerJobCommand, TriggerJobUseCase
from .webhook_delivery import WatchOptions, WebhookDeliveryService, watch_run_and_deliver

__all__ = [
    "TriggerJobUseCase",
    "TriggerJobCommand",
    "JobAccepted",
    "WebhookDeliveryService",
    "WatchOptions",
    "watch_run_and_deliver",
]
