"""
Webhook HTTP Client

POSTs JSON results to caller-supplied callback URLs with bounded retry.

Responsibility:
    - Single JSON POST with optional x-api-key header
    - Retry on non-2xx status or network error
    - Linear backoff between attempts (attempt * base_delay)
    - Raise WebhookDeliveryError when all attempts fail

Architecture Notes:
    - Infrastructure Layer (external dependency on httpx)
    - Synchronous: runs inside Celery worker processes
    - sleep and transport are injectable for tests

Business Rules:
    - Max attempts: 3 (CALLBACK_MAX_RETRIES)
    - Base delay: 5s (CALLBACK_RETRY_DELAY_SECONDS) -> waits 5s, 10s
    - No idempotency key: a lost response after a successful POST leads
      to a duplicate POST on the next attempt

Examples:
    >>> client = WebhookClient(max_attempts=3, base_delay=5.0)
    >>> client.post_with_retry(
    ...     "https://app.example.com/hooks/mm",
    ...     {"job_id": "abc", "status": "completed"},
    ...     api_key="secret",
    ... )
    <Response [200 OK]>
"""

import logging
import time
from typing import Any, Callable, Optional

import httpx

from .exceptions import WebhookDeliveryError

# Configure logger for this module
logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY_SECONDS = 5.0
DEFAULT_TIMEOUT_SECONDS = 30.0

# Response bodies are truncated in logs
MAX_LOGGED_BODY_CHARS = 500


class WebhookClient:
    """
    HTTP client for callback delivery.

    Attributes:
        max_attempts: Default number of POST attempts
        base_delay: Backoff base in seconds; wait before attempt k+1 is k * base_delay
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY_SECONDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.timeout = timeout
        self._sleep = sleep
        self._transport = transport

    def _build_headers(self, api_key: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["x-api-key"] = api_key
        return headers

    def post_json(
        self, url: str, body: Any, api_key: Optional[str] = None
    ) -> httpx.Response:
        """
        Send a single JSON POST.

        Args:
            url: Target URL
            body: JSON-serializable body
            api_key: Value for x-api-key header (omitted when None)

        Returns:
            httpx.Response (any status code)

        Raises:
            httpx.HTTPError: On network/transport failure
        """
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            return client.post(url, json=body, headers=self._build_headers(api_key))

    def post_with_retry(
        self,
        url: str,
        body: Any,
        api_key: Optional[str] = None,
        max_attempts: Optional[int] = None,
    ) -> httpx.Response:
        """
        POST body to url until one attempt returns 2xx.

        Process Flow:
            1. POST (attempt k of N)
            2. 2xx -> return response immediately
            3. non-2xx -> log status + body, network error -> log message
            4. if k < N: sleep k * base_delay and retry
            5. after N failures raise WebhookDeliveryError

        Args:
            url: Callback URL
            body: JSON-serializable payload
            api_key: Optional x-api-key header value
            max_attempts: Override default attempt budget

        Returns:
            Successful httpx.Response

        Raises:
            WebhookDeliveryError: If all attempts failed
        """
        attempts = max_attempts or self.max_attempts
        last_error: Optional[str] = None

        for attempt in range(1, attempts + 1):
            try:
                response = self.post_json(url, body, api_key=api_key)

                if response.is_success:
                    logger.info(
                        f"Callback POST to {url} succeeded on attempt "
                        f"{attempt}/{attempts} ({response.status_code})"
                    )
                    return response

                text = response.text[:MAX_LOGGED_BODY_CHARS]
                last_error = f"HTTP {response.status_code}: {text}"
                logger.warning(
                    f"Callback POST attempt {attempt}/{attempts} "
                    f"got {response.status_code}: {text}"
                )

            except httpx.HTTPError as e:
                last_error = f"{e.__class__.__name__}: {e}"
                logger.warning(
                    f"Callback POST attempt {attempt}/{attempts} failed: {last_error}"
                )

            if attempt < attempts:
                delay = self.base_delay * attempt
                logger.debug(f"Retrying callback POST in {delay}s")
                self._sleep(delay)

        logger.error(f"Failed to deliver webhook to {url} after {attempts} attempts")
        raise WebhookDeliveryError(url, attempts, last_error)
