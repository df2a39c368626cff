"""
TriggerJobUseCase - Start a background job

Use case behind every intake and generate endpoint: trigger a Trigger.dev
task, remember the job, optionally arrange callback delivery.

Responsibility:
    - Generate the job id handed to the caller
    - Trigger the task (payload passed through unchanged)
    - Store the job as "accepted" with its run id
    - Dispatch the delivery watcher when a callback target is given

Architecture Notes:
    - Part of Application Layer (orchestration)
    - API Layer builds TriggerJobCommand from validated request bodies
    - Task payloads are opaque here; their shape is owned by the pipeline

Error Handling:
    - TriggerApiError propagates (API maps it to 502); nothing is stored
      when the trigger call fails
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional
from uuid import uuid4

from src.domain.delivery import CallbackTarget

from .webhook_delivery import WatchOptions, watch_run_and_deliver

# Configure logger for this module
logger = logging.getLogger(__name__)

JOB_ID_PAYLOAD_KEY = "_jobId"


@dataclass(frozen=True)
class TriggerJobCommand:
    """
    Start one Trigger.dev task.

    Attributes:
        task_id: Trigger.dev task identifier
        payload: Task payload
        callback: Delivery target (None -> no watcher)
        accepted_message: Message returned to the caller
        include_job_id: Add "_jobId" to the payload
    """

    task_id: str
    payload: dict[str, Any]
    callback: Optional[CallbackTarget] = None
    accepted_message: str = "Job accepted"
    include_job_id: bool = False


@dataclass(frozen=True)
class JobAccepted:
    """Result of TriggerJobUseCase.execute."""

    job_id: str
    trigger_run_id: str
    message: str
    status: str = "accepted"


class TriggerJobUseCase:
    """
    Trigger a task and register the job.

    Usage:
        >>> use_case = TriggerJobUseCase(trigger_client, job_store)
        >>> accepted = use_case.execute(
        ...     TriggerJobCommand(task_id="generate-research", payload=body)
        ... )
        >>> accepted.status
        'accepted'
    """

    def __init__(
        self,
        trigger_client,
        job_store,
        dispatch_watcher: Callable[[WatchOptions], None] = watch_run_and_deliver,
    ) -> None:
        self.trigger_client = trigger_client
        self.job_store = job_store
        self.dispatch_watcher = dispatch_watcher

    def execute(self, command: TriggerJobCommand) -> JobAccepted:
        """
        Trigger command.task_id and store the job.

        Returns:
            JobAccepted with job id and run id

        Raises:
            TriggerApiError: If Trigger.dev rejected or did not answer
        """
        job_id = str(uuid4())

        payload = dict(command.payload)
        if command.include_job_id:
            payload[JOB_ID_PAYLOAD_KEY] = job_id

        handle = self.trigger_client.trigger_task(command.task_id, payload)
        self.job_store.create(job_id, handle.id)

        logger.info(f"Job {job_id} accepted: task {command.task_id}, run {handle.id}")

        if command.callback is not None:
            self.dispatch_watcher(
                WatchOptions(
                    trigger_run_id=handle.id,
                    callback_url=command.callback.url,
                    job_id=job_id,
                    callback_metadata=command.callback.metadata,
                    api_key=command.callback.api_key,
                )
            )

        return JobAccepted(
            job_id=job_id,
            trigger_run_id=handle.id,
            message=command.accepted_message,
        )
