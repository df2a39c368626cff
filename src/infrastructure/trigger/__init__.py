"""
Trigger.dev Infrastructure Module

REST client for the external background job pipeline.

Exports:
    - TriggerClient: trigger / retrieve / poll runs
    - TriggerHandle: run handle returned by trigger_task
    - TriggerApiError, RunNotFoundError, RunPollTimeoutError
"""

from .exceptions import RunNotFoundError, RunPollTimeoutError, TriggerApiError
from .trigger_client import TriggerClient, TriggerHandle, run_outcome_from_json

__all__ = [
    "TriggerClient",
    "TriggerHandle",
    "run_outcome_from_json",
    "TriggerApiError",
    "RunNotFoundError",
    "RunPollTimeoutError",
]
