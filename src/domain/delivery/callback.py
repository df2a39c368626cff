"""
Callback Payload Rules

Defines where results are pushed (CallbackTarget), which caller metadata is
echoed back (CallbackMetadata) and the exact JSON body the caller receives.

Payload contract (POST body):
    {
        "job_id": "...",
        "trigger_run_id": "run_...",
        "status": "completed" | "failed",
        "deliverable_id": "...",        # only when supplied
        "contract_id": "...",           # only when supplied
        "title": "...",                 # only when supplied
        "output": {                     # only when completed
            "content_raw": "# Report ...",
            "content_structured": {...full run output...}
        },
        "error": "..."                  # only when failed
    }

Architecture Notes:
    - Pure functions, no I/O
    - Used by WebhookDeliveryService (application layer)
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.delivery.run_outcome import RunOutcome
from src.domain.shared.exceptions import InvalidCallbackError

# Metadata keys echoed at the top level of every callback body
ECHOED_METADATA_FIELDS = ("deliverable_id", "contract_id", "title")

CALLBACK_STATUS_COMPLETED = "completed"
CALLBACK_STATUS_FAILED = "failed"


@dataclass(frozen=True)
class CallbackMetadata:
    """
    Caller-supplied identifiers echoed back with the result.

    Any other keys the caller sends are kept in `extra` but never echoed.
    """

    deliverable_id: Optional[str] = None
    contract_id: Optional[str] = None
    title: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "CallbackMetadata":
        """Build metadata from a raw request object (None -> empty metadata)."""
        if not data:
            return cls()

        extra = {k: v for k, v in data.items() if k not in ECHOED_METADATA_FIELDS}
        return cls(
            deliverable_id=data.get("deliverable_id"),
            contract_id=data.get("contract_id"),
            title=data.get("title"),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for task arguments (inverse of from_dict)."""
        data = dict(self.extra)
        for key in ECHOED_METADATA_FIELDS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    def echo_fields(self) -> dict[str, Any]:
        """Metadata fields to copy onto the payload (present and non-empty only)."""
        return {
            key: getattr(self, key)
            for key in ECHOED_METADATA_FIELDS
            if getattr(self, key)
        }


@dataclass(frozen=True)
class CallbackTarget:
    """
    Where and how to deliver a result.

    Attributes:
        url: Absolute http(s) URL receiving the POST
        api_key: Sent as x-api-key header when set
        metadata: Identifiers echoed in the body

    Raises:
        InvalidCallbackError: If url is not an http(s) URL
    """

    url: str
    api_key: Optional[str] = None
    metadata: CallbackMetadata = field(default_factory=CallbackMetadata)

    def __post_init__(self) -> None:
        if not isinstance(self.url, str) or not self.url.startswith(
            ("http://", "https://")
        ):
            raise InvalidCallbackError(
                f"callback_url must be an http(s) URL, got {self.url!r}", url=self.url
            )


def _base_payload(
    job_id: str, trigger_run_id: str, status: str, metadata: Optional[CallbackMetadata]
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "job_id": job_id,
        "trigger_run_id": trigger_run_id,
        "status": status,
    }
    if metadata is not None:
        payload.update(metadata.echo_fields())
    return payload


def build_result_payload(
    job_id: str,
    outcome: RunOutcome,
    metadata: Optional[CallbackMetadata] = None,
) -> dict[str, Any]:
    """
    Build the callback body for a run that reached a terminal state.

    Business Rules:
        - COMPLETED -> status "completed" with output.content_raw taken from
          output.full_document_markdown ("" when absent) and
          output.content_structured holding the whole run output
        - any other status -> status "failed" with non-empty error

    Args:
        job_id: Job id handed out to the caller
        outcome: Terminal run snapshot
        metadata: Caller metadata to echo

    Returns:
        JSON-serializable payload dict

    Examples:
        >>> outcome = RunOutcome(
        ...     run_id="run_1", status="COMPLETED",
        ...     output={"full_document_markdown": "# Report"},
        ... )
        >>> build_result_payload("job-1", outcome)["output"]["content_raw"]
        '# Report'
    """
    if outcome.is_success:
        payload = _base_payload(
            job_id, outcome.run_id, CALLBACK_STATUS_COMPLETED, metadata
        )
        structured = outcome.output or {}
        payload["output"] = {
            "content_raw": structured.get("full_document_markdown") or "",
            "content_structured": structured,
        }
        return payload

    payload = _base_payload(job_id, outcome.run_id, CALLBACK_STATUS_FAILED, metadata)
    payload["error"] = outcome.failure_message
    return payload


def build_failure_payload(
    job_id: str,
    trigger_run_id: str,
    error: BaseException | str,
    metadata: Optional[CallbackMetadata] = None,
) -> dict[str, Any]:
    """
    Build the callback body sent when watching or delivering itself failed.

    Args:
        job_id: Job id handed out to the caller
        trigger_run_id: Run being watched
        error: Exception (or message) that broke the flow
        metadata: Caller metadata to echo

    Returns:
        Payload with status "failed" and "Webhook delivery error: ..." message
    """
    message = str(error) or error.__class__.__name__
    payload = _base_payload(job_id, trigger_run_id, CALLBACK_STATUS_FAILED, metadata)
    payload["error"] = f"Webhook delivery error: {message}"
    return payload
