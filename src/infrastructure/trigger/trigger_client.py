"""
Trigger.dev REST Client

Thin synchronous client for the parts of the Trigger.dev v3 API this
service needs: trigger a task, retrieve a run, poll a run to completion.

Responsibility:
    - Authenticate with the project secret key (Bearer token)
    - Trigger tasks and return the run handle
    - Map run JSON to RunOutcome domain value objects
    - Block until a run is terminal (poll_run)
    - Retry transient API failures with exponential backoff

Architecture Notes:
    - Infrastructure Layer (external dependency on httpx)
    - Trigger.dev ships no Python SDK; endpoints follow the public REST API:
        POST /api/v1/tasks/{task_id}/trigger   body {"payload": {...}}
        GET  /api/v3/runs/{run_id}
    - Used by API routers (trigger, status lookup) and Celery delivery task (poll)

Business Rules:
    - Poll interval: 10s, poll budget: 500 checks (~83 minutes), well past
      the 45 minute maximum task duration
    - Transient failures (5xx, network): 3 attempts, backoff 1s, 2s
    - 404 on run lookup -> RunNotFoundError (never retried)

Examples:
    >>> client = TriggerClient(secret_key="tr_dev_xxx")
    >>> handle = client.trigger_task("generate-research", {"client": {...}})
    >>> handle.id
    'run_cm1abc...'
    >>> outcome = client.poll_run(handle.id)
    >>> outcome.status
    'COMPLETED'
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from src.domain.delivery.run_outcome import RunOutcome

from .exceptions import RunNotFoundError, RunPollTimeoutError, TriggerApiError

# Configure logger for this module
logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.trigger.dev"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_POLL_INTERVAL_SECONDS = 10.0
DEFAULT_MAX_POLL_ATTEMPTS = 500
DEFAULT_REQUEST_RETRIES = 3

MAX_LOGGED_BODY_CHARS = 500


@dataclass(frozen=True)
class TriggerHandle:
    """Handle returned when a task is triggered (id is the run id)."""

    id: str


def run_outcome_from_json(data: dict[str, Any]) -> RunOutcome:
    """
    Map a Trigger.dev run JSON object to a RunOutcome.

    Non-object outputs are wrapped as {"value": output} so that callers
    can always treat output as a dict.
    """
    output = data.get("output")
    if output is not None and not isinstance(output, dict):
        output = {"value": output}

    error = data.get("error")
    error_message = None
    if isinstance(error, dict):
        error_message = error.get("message") or None
    elif error:
        error_message = str(error)

    return RunOutcome(
        run_id=data["id"],
        status=str(data.get("status", "")),
        output=output,
        error_message=error_message,
        finished_at=data.get("finishedAt"),
    )


class TriggerClient:
    """
    Synchronous Trigger.dev API client.

    Attributes:
        base_url: API base URL (no trailing slash)
        timeout: Per-request timeout in seconds
        request_retries: Attempts for transient failures
    """

    def __init__(
        self,
        secret_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        request_retries: int = DEFAULT_REQUEST_RETRIES,
        sleep: Callable[[float], None] = time.sleep,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not secret_key:
            raise ValueError("Trigger.dev secret key is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.request_retries = max(1, request_retries)
        self._secret_key = secret_key
        self._sleep = sleep
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._secret_key}",
            "Content-Type": "application/json",
        }

    def _request(
        self, method: str, path: str, json: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Send request with exponential backoff on 5xx / network errors.

        Returns:
            Response with status < 500 (4xx are returned for caller to map)

        Raises:
            TriggerApiError: If every attempt failed
        """
        url = f"{self.base_url}{path}"
        last_error: Optional[TriggerApiError] = None

        for attempt in range(self.request_retries):
            try:
                with httpx.Client(
                    timeout=self.timeout, transport=self._transport
                ) as client:
                    response = client.request(
                        method, url, json=json, headers=self._headers()
                    )

                if response.status_code < 500:
                    return response

                last_error = TriggerApiError(
                    f"Trigger.dev {method} {path} returned {response.status_code}",
                    status_code=response.status_code,
                    body=response.text[:MAX_LOGGED_BODY_CHARS],
                )

            except httpx.HTTPError as e:
                last_error = TriggerApiError(
                    f"Trigger.dev {method} {path} failed: {e.__class__.__name__}: {e}"
                )

            if attempt < self.request_retries - 1:
                delay = 2**attempt
                logger.warning(
                    f"{last_error} (attempt {attempt + 1}/{self.request_retries}). "
                    f"Retrying in {delay}s..."
                )
                self._sleep(delay)

        logger.error(f"{last_error} after {self.request_retries} attempts")
        raise last_error

    def trigger_task(self, task_id: str, payload: dict[str, Any]) -> TriggerHandle:
        """
        Trigger a task run.

        Args:
            task_id: Task identifier (e.g. "generate-roadmap")
            payload: Task payload (JSON-serializable)

        Returns:
            TriggerHandle with the new run id

        Raises:
            TriggerApiError: On non-2xx response or missing run id
        """
        response = self._request(
            "POST", f"/api/v1/tasks/{task_id}/trigger", json={"payload": payload}
        )

        if not response.is_success:
            raise TriggerApiError(
                f"Failed to trigger task {task_id}: HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text[:MAX_LOGGED_BODY_CHARS],
            )

        run_id = response.json().get("id")
        if not run_id:
            raise TriggerApiError(
                f"Trigger.dev response for task {task_id} has no run id",
                status_code=response.status_code,
                body=response.text[:MAX_LOGGED_BODY_CHARS],
            )

        logger.info(f"Triggered task {task_id}: run {run_id}")
        return TriggerHandle(id=run_id)

    def retrieve_run(self, run_id: str) -> RunOutcome:
        """
        Fetch the current state of a run.

        Raises:
            RunNotFoundError: If Trigger.dev answers 404
            TriggerApiError: On any other non-2xx response
        """
        response = self._request("GET", f"/api/v3/runs/{run_id}")

        if response.status_code == 404:
            raise RunNotFoundError(run_id)

        if not response.is_success:
            raise TriggerApiError(
                f"Failed to retrieve run {run_id}: HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text[:MAX_LOGGED_BODY_CHARS],
            )

        return run_outcome_from_json(response.json())

    def poll_run(
        self,
        run_id: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        max_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
    ) -> RunOutcome:
        """
        Block until run reaches a terminal status.

        Args:
            run_id: Run to watch
            poll_interval: Seconds between status checks
            max_attempts: Status checks before giving up

        Returns:
            Terminal RunOutcome

        Raises:
            RunPollTimeoutError: If still running after max_attempts checks
            RunNotFoundError / TriggerApiError: From retrieve_run
        """
        last_status: Optional[str] = None

        for attempt in range(1, max_attempts + 1):
            outcome = self.retrieve_run(run_id)

            if outcome.status != last_status:
                logger.info(f"Run {run_id} status: {outcome.status} (poll {attempt})")
                last_status = outcome.status

            if outcome.is_terminal:
                return outcome

            if attempt < max_attempts:
                self._sleep(poll_interval)

        raise RunPollTimeoutError(run_id, max_attempts, last_status)
