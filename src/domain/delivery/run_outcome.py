"""
Run Outcome Value Object

Snapshot of a Trigger.dev run as seen by this service: its status, the
output it produced and the error it reported.

Responsibility:
    - Enumerate Trigger.dev v3 run statuses
    - Classify statuses as terminal / successful
    - Derive the failure message delivered to callbacks

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Status is kept as the raw string so statuses added by Trigger.dev
      later do not break parsing; unknown statuses count as non-terminal
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class TriggerRunStatus(str, Enum):
    """
    Run statuses reported by the Trigger.dev v3 API.

    Terminal:
        COMPLETED, CANCELED, FAILED, CRASHED, SYSTEM_FAILURE,
        INTERRUPTED, TIMED_OUT, EXPIRED

    In flight:
        everything else (QUEUED, EXECUTING, REATTEMPTING, ...)
    """

    WAITING_FOR_DEPLOY = "WAITING_FOR_DEPLOY"
    PENDING_VERSION = "PENDING_VERSION"
    DELAYED = "DELAYED"
    QUEUED = "QUEUED"
    DEQUEUED = "DEQUEUED"
    EXECUTING = "EXECUTING"
    WAITING = "WAITING"
    REATTEMPTING = "REATTEMPTING"
    FROZEN = "FROZEN"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"
    FAILED = "FAILED"
    CRASHED = "CRASHED"
    SYSTEM_FAILURE = "SYSTEM_FAILURE"
    INTERRUPTED = "INTERRUPTED"
    TIMED_OUT = "TIMED_OUT"
    EXPIRED = "EXPIRED"


TERMINAL_RUN_STATUSES: frozenset[str] = frozenset(
    {
        TriggerRunStatus.COMPLETED.value,
        TriggerRunStatus.CANCELED.value,
        TriggerRunStatus.FAILED.value,
        TriggerRunStatus.CRASHED.value,
        TriggerRunStatus.SYSTEM_FAILURE.value,
        TriggerRunStatus.INTERRUPTED.value,
        TriggerRunStatus.TIMED_OUT.value,
        TriggerRunStatus.EXPIRED.value,
    }
)


class RunOutcome(BaseModel):
    """
    Immutable snapshot of a Trigger.dev run.

    Attributes:
        run_id: Trigger.dev run id (run_...)
        status: Raw run status string (see TriggerRunStatus)
        output: Task return value, if any
        error_message: Error message reported by the run, if any
        finished_at: When the run reached a terminal state

    Examples:
        >>> outcome = RunOutcome(run_id="run_1", status="FAILED")
        >>> outcome.is_terminal, outcome.is_success
        (True, False)
        >>> outcome.failure_message
        'Run ended with status: FAILED'
    """

    model_config = ConfigDict(frozen=True)

    run_id: str
    status: str
    output: Optional[dict[str, Any]] = None
    error_message: Optional[str] = None
    finished_at: Optional[datetime] = None

    @property
    def is_terminal(self) -> bool:
        """True when the run will not progress further."""
        return self.status in TERMINAL_RUN_STATUSES

    @property
    def is_success(self) -> bool:
        """True only for COMPLETED runs."""
        return self.status == TriggerRunStatus.COMPLETED.value

    @property
    def failure_message(self) -> str:
        """Error reported by the run, or a message naming the final status."""
        return self.error_message or f"Run ended with status: {self.status}"
