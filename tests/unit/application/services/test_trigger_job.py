"""
Tests for TriggerJobUseCase.

Covers:
- Job id generation and job store registration
- _jobId injection into the task payload
- Watcher dispatch only when a callback target is given
- Trigger errors propagate without storing a job
"""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from src.application.services.trigger_job import (
    JOB_ID_PAYLOAD_KEY,
    TriggerJobCommand,
    TriggerJobUseCase,
)
from src.domain.delivery import CallbackMetadata, CallbackTarget
from src.infrastructure.trigger import TriggerApiError, TriggerHandle


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def trigger_client():
    client = MagicMock()
    client.trigger_task.return_value = TriggerHandle(id="run_abc")
    return client


@pytest.fixture
def job_store():
    return MagicMock()


@pytest.fixture
def dispatch_watcher():
    return MagicMock()


@pytest.fixture
def use_case(trigger_client, job_store, dispatch_watcher):
    return TriggerJobUseCase(trigger_client, job_store, dispatch_watcher=dispatch_watcher)


# ============================================================================
# TESTS
# ============================================================================


def test_execute_triggers_task_and_stores_job(
    use_case, trigger_client, job_store, dispatch_watcher
):
    payload = {"transcript": []}

    accepted = use_case.execute(
        TriggerJobCommand(
            task_id="analyze-meeting-notes",
            payload=payload,
            accepted_message="Started",
        )
    )

    UUID(accepted.job_id)
    assert accepted.trigger_run_id == "run_abc"
    assert accepted.status == "accepted"
    assert accepted.message == "Started"
    trigger_client.trigger_task.assert_called_once_with(
        "analyze-meeting-notes", {"transcript": []}
    )
    job_store.create.assert_called_once_with(accepted.job_id, "run_abc")
    dispatch_watcher.assert_not_called()


def test_execute_adds_job_id_to_payload_when_requested(use_case, trigger_client):
    payload = {"client": {"company_name": "Acme"}}

    accepted = use_case.execute(
        TriggerJobCommand(task_id="generate-roadmap", payload=payload, include_job_id=True)
    )

    sent = trigger_client.trigger_task.call_args.args[1]
    assert sent[JOB_ID_PAYLOAD_KEY] == accepted.job_id
    assert JOB_ID_PAYLOAD_KEY not in payload


def test_execute_dispatches_watcher_for_callback(use_case, dispatch_watcher):
    callback = CallbackTarget(
        url="https://app.example.com/hooks/mm",
        api_key="secret",
        metadata=CallbackMetadata(title="Q3"),
    )

    accepted = use_case.execute(
        TriggerJobCommand(task_id="generate-seo-audit", payload={}, callback=callback)
    )

    (options,) = dispatch_watcher.call_args.args
    assert options.trigger_run_id == "run_abc"
    assert options.job_id == accepted.job_id
    assert options.callback_url == "https://app.example.com/hooks/mm"
    assert options.api_key == "secret"
    assert options.callback_metadata.title == "Q3"


def test_execute_trigger_error_propagates(
    use_case, trigger_client, job_store, dispatch_watcher
):
    trigger_client.trigger_task.side_effect = TriggerApiError("down", status_code=503)

    with pytest.raises(TriggerApiError):
        use_case.execute(TriggerJobCommand(task_id="generate-research", payload={}))

    job_store.create.assert_not_called()
    dispatch_watcher.assert_not_called()


def test_each_execution_gets_new_job_id(use_case):
    command = TriggerJobCommand(task_id="generate-research", payload={})
    assert use_case.execute(command).job_id != use_case.execute(command).job_id
