"""
Delivery Subdomain

Rules for pushing background run results to caller-supplied webhooks:
run outcome classification and callback payload construction.

Exports:
    - TriggerRunStatus, TERMINAL_RUN_STATUSES, RunOutcome
    - CallbackMetadata, CallbackTarget
    - build_result_payload, build_failure_payload
"""

from .callback import (
    CALLBACK_STATUS_COMPLETED,
    CALLBACK_STATUS_FAILED,
    CallbackMetadata,
    CallbackTarget,
    build_failure_payload,
    build_result_payload,
)
from .run_outcome import TERMINAL_RUN_STATUSES, RunOutcome, TriggerRunStatus

__all__ = [
    "TriggerRunStatus",
    "TERMINAL_RUN_STATUSES",
    "RunOutcome",
    "CallbackMetadata",
    "CallbackTarget",
    "CALLBACK_STATUS_COMPLETED",
    "CALLBACK_STATUS_FAILED",
    "build_result_payload",
    "build_failure_payload",
]
