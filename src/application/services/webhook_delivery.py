"""
Webhook Delivery Service

Watches a Trigger.dev run until it finishes and pushes the result to the
caller's callback URL.

Responsibility:
    - Poll the run to a terminal state
    - Record the outcome on the job (when a job store is configured)
    - POST the result payload with bounded retry
    - On any failure, send a best-effort failure notification
    - Dispatch the whole sequence to a Celery worker (watch_run_and_deliver)

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Depends on TriggerClient, WebhookClient and RedisJobStore through
      constructor injection
    - Payload rules live in src.domain.delivery.callback
    - Runs inside the Celery task watch_run_and_deliver; one invocation per
      job, no shared state between invocations

Error Handling:
    - deliver_when_complete never raises: every failure ends in a log line
      and, where possible, a failure notification to the caller
    - watch_run_and_deliver logs and swallows dispatch errors

Business Rules:
    - No idempotency key: a delivery that timed out on our side but
      reached the caller may be repeated on the next attempt
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.delivery import (
    CallbackMetadata,
    RunOutcome,
    build_failure_payload,
    build_result_payload,
)

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WatchOptions:
    """
    What to watch and where to deliver.

    Attributes:
        trigger_run_id: Run to poll
        callback_url: URL receiving the POST
        job_id: Job id echoed in the payload
        callback_metadata: deliverable_id / contract_id / title to echo
        api_key: Sent as x-api-key on the callback
    """

    trigger_run_id: str
    callback_url: str
    job_id: str
    callback_metadata: CallbackMetadata = field(default_factory=CallbackMetadata)
    api_key: Optional[str] = None

    def to_task_kwargs(self) -> dict[str, Any]:
        """
        JSON-serializable kwargs for the Celery task.

        api_key is left out: task arguments are stored in the broker, and
        the worker reads the key from its own settings.
        """
        return {
            "trigger_run_id": self.trigger_run_id,
            "callback_url": self.callback_url,
            "job_id": self.job_id,
            "callback_metadata": self.callback_metadata.to_dict(),
        }

    @classmethod
    def from_task_kwargs(cls, **kwargs: Any) -> "WatchOptions":
        """Inverse of to_task_kwargs (api_key may be passed separately)."""
        return cls(
            trigger_run_id=kwargs["trigger_run_id"],
            callback_url=kwargs["callback_url"],
            job_id=kwargs["job_id"],
            callback_metadata=CallbackMetadata.from_dict(
                kwargs.get("callback_metadata")
            ),
            api_key=kwargs.get("api_key"),
        )


class WebhookDeliveryService:
    """
    Poll-then-deliver orchestration.

    Attributes:
        poll_interval: Seconds between run status checks
        max_poll_attempts: Status checks before giving up on the run
    """

    def __init__(
        self,
        trigger_client,
        webhook_client,
        job_store=None,
        poll_interval: float = 10.0,
        max_poll_attempts: int = 500,
    ) -> None:
        self.trigger_client = trigger_client
        self.webhook_client = webhook_client
        self.job_store = job_store
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts

    def _record_outcome(self, job_id: str, outcome: RunOutcome) -> None:
        if self.job_store is None:
            return

        if outcome.is_success:
            self.job_store.set_output(job_id, outcome.output)
        else:
            self.job_store.set_error(job_id, outcome.failure_message)

    def deliver_when_complete(self, options: WatchOptions) -> bool:
        """
        Poll the run, then POST its result to the callback URL.

        Process Flow:
            1. Poll run until terminal
            2. Record outcome on the job
            3. Build result payload and POST with retry
            4. Any exception in 1-3: POST failure payload (full retry
               budget); if that fails too, log it

        Args:
            options: Run, callback URL, job id, metadata, api key

        Returns:
            True when the result payload reached the callback URL,
            False otherwise (failure notification sent or not)
        """
        logger.info(
            f"Watching run {options.trigger_run_id} for job {options.job_id}, "
            f"will deliver to {options.callback_url}"
        )

        try:
            outcome = self.trigger_client.poll_run(
                options.trigger_run_id,
                poll_interval=self.poll_interval,
                max_attempts=self.max_poll_attempts,
            )
            logger.info(
                f"Run {options.trigger_run_id} finished with status {outcome.status}"
            )

            self._record_outcome(options.job_id, outcome)

            payload = build_result_payload(
                options.job_id, outcome, options.callback_metadata
            )
            self.webhook_client.post_with_retry(
                options.callback_url, payload, api_key=options.api_key
            )
            logger.info(
                f"Delivered {payload['status']} result for job {options.job_id} "
                f"to {options.callback_url}"
            )
            return True

        except Exception as e:
            logger.error(
                f"Webhook delivery failed for job {options.job_id} "
                f"(run {options.trigger_run_id}): {e}"
            )

            failure = build_failure_payload(
                options.job_id,
                options.trigger_run_id,
                e,
                options.callback_metadata,
            )
            try:
                self.webhook_client.post_with_retry(
                    options.callback_url, failure, api_key=options.api_key
                )
                logger.info(f"Failure notification sent for job {options.job_id}")
            except Exception as notify_error:
                logger.error(
                    f"Failure notification for job {options.job_id} also failed: "
                    f"{notify_error}"
                )
            return False


def watch_run_and_deliver(options: WatchOptions) -> None:
    """
    Fire-and-forget: hand the poll-then-deliver sequence to a Celery worker.

    The caller gets no result and no error; dispatch problems (broker down)
    are only logged.
    """
    from src.application.tasks.delivery_tasks import watch_run_and_deliver_task

    try:
        watch_run_and_deliver_task.delay(**options.to_task_kwargs())
        logger.info(
            f"Dispatched delivery watcher for job {options.job_id} "
            f"(run {options.trigger_run_id})"
        )
    except Exception as e:
        logger.error(
            f"Could not dispatch delivery watcher for job {options.job_id}: {e}"
        )
