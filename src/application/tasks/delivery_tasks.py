"""
Celery Task for Run Watching and Callback Delivery

Long-running task: polls a Trigger.dev run until it finishes, then POSTs
the result to the caller's callback URL.

Responsibility:
    - Build WebhookDeliveryService from settings
    - Run deliver_when_complete for one job
    - Report whether the result payload was delivered

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Thin wrapper: poll/retry logic lives in WebhookDeliveryService,
      TriggerClient and WebhookClient
    - No Celery retries: retrying the task would poll again and could
      deliver twice

Limits:
    - Poll budget with defaults is ~83 minutes (500 x 10s)
    - soft_time_limit 90 minutes, time_limit 95 minutes
    - SoftTimeLimitExceeded surfaces inside deliver_when_complete and is
      handled like any other failure (failure notification is sent)

Secrets:
    - The callback API key is not part of the task arguments (they sit in
      the broker); the worker takes it from its own settings
"""

import logging
from typing import Optional

from celery import Task

from .celery_app import celery_app
from src.application.services.webhook_delivery import (
    WatchOptions,
    WebhookDeliveryService,
)
from src.infrastructure.persistence.redis.job_store import RedisJobStore
from src.infrastructure.trigger.trigger_client import TriggerClient
from src.infrastructure.webhooks.webhook_client import WebhookClient
from src.shared.config import Settings, get_settings

# Configure logger for this module
logger = logging.getLogger(__name__)


def build_delivery_service(settings: Settings) -> WebhookDeliveryService:
    """Wire WebhookDeliveryService with clients configured from settings."""
    return WebhookDeliveryService(
        trigger_client=TriggerClient(
            secret_key=settings.trigger_secret_key,
            base_url=settings.trigger_api_url,
        ),
        webhook_client=WebhookClient(
            max_attempts=settings.callback_max_retries,
            base_delay=settings.callback_retry_delay_seconds,
            timeout=settings.callback_timeout_seconds,
        ),
        job_store=RedisJobStore(ttl_seconds=settings.job_ttl_seconds),
        poll_interval=settings.run_poll_interval_seconds,
        max_poll_attempts=settings.run_poll_max_attempts,
    )


@celery_app.task(
    bind=True,
    name="watch_run_and_deliver",
    max_retries=0,
    time_limit=95 * 60,
    soft_time_limit=90 * 60,
)
def watch_run_and_deliver_task(
    self: Task,
    trigger_run_id: str,
    callback_url: str,
    job_id: str,
    callback_metadata: Optional[dict] = None,
) -> dict:
    """
    Watch one run and deliver its result.

    Args:
        self: Celery task instance (bind=True)
        trigger_run_id: Run to poll
        callback_url: URL receiving the result POST
        job_id: Job id echoed in the payload
        callback_metadata: deliverable_id / contract_id / title to echo

    Returns:
        dict: {"job_id", "trigger_run_id", "delivered"}
    """
    settings = get_settings()
    options = WatchOptions.from_task_kwargs(
        trigger_run_id=trigger_run_id,
        callback_url=callback_url,
        job_id=job_id,
        callback_metadata=callback_metadata,
        api_key=settings.api_key,
    )

    logger.info(
        f"Task {self.request.id}: watching run {trigger_run_id} for job {job_id}"
    )

    delivered = build_delivery_service(settings).deliver_when_complete(options)

    return {
        "job_id": job_id,
        "trigger_run_id": trigger_run_id,
        "delivered": delivered,
    }
