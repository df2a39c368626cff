"""
Celery Tasks

Responsibility:
    Background work that outlives an HTTP request: watching Trigger.dev
    runs and delivering results to callback URLs.

Contains:
    - celery_app.py - Celery configuration and health_check task
    - delivery_tasks.py - watch_run_and_deliver task

Does NOT contain:
    - Poll / retry logic (WebhookDeliveryService and infrastructure clients)
"""

from .celery_app import celery_app, health_check
from .delivery_tasks import watch_run_and_deliver_task

__all__ = ["celery_app", "health_check", "watch_run_and_deliver_task"]
