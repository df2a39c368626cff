"""
Trigger.dev Client Exceptions

Errors raised by TriggerClient when talking to the Trigger.dev REST API.
"""

from typing import Optional


class TriggerApiError(Exception):
    """
    Raised when Trigger.dev returns an unexpected response or is unreachable.

    Attributes:
        status_code: HTTP status code (None for network errors)
        body: Response body text (truncated)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class RunNotFoundError(TriggerApiError):
    """Raised when Trigger.dev does not know the requested run id."""

    def __init__(self, run_id: str) -> None:
        self.run_id = run_id
        super().__init__(f"Trigger.dev run not found: {run_id}", status_code=404)


class RunPollTimeoutError(Exception):
    """
    Raised when a run did not reach a terminal state within the poll budget.

    Attributes:
        run_id: Run being polled
        attempts: Number of status checks made
        last_status: Last status seen
    """

    def __init__(self, run_id: str, attempts: int, last_status: Optional[str]) -> None:
        self.run_id = run_id
        self.attempts = attempts
        self.last_status = last_status
        super().__init__(
            f"Run {run_id} not finished after {attempts} polls "
            f"(last status: {last_status})"
        )
