"""
Tests for Celery delivery task.

The task is run eagerly with .apply(); the delivery service is patched.
"""

from unittest.mock import MagicMock, patch

from src.application.services.webhook_delivery import WatchOptions
from src.application.tasks.delivery_tasks import (
    build_delivery_service,
    watch_run_and_deliver_task,
)
from src.shared.config import Settings

TASK_KWARGS = {
    "trigger_run_id": "run_abc",
    "callback_url": "https://app.example.com/hooks/mm",
    "job_id": "job-1",
    "callback_metadata": {"deliverable_id": "d-1"},
}

WORKER_SETTINGS = Settings(api_key="worker-key", trigger_secret_key="tr_dev_x")


def test_task_is_registered_without_retries():
    assert watch_run_and_deliver_task.name == "watch_run_and_deliver"
    assert watch_run_and_deliver_task.max_retries == 0


@patch(
    "src.application.tasks.delivery_tasks.get_settings", return_value=WORKER_SETTINGS
)
@patch("src.application.tasks.delivery_tasks.build_delivery_service")
def test_task_runs_delivery_with_worker_api_key(mock_build, mock_get_settings):
    service = MagicMock()
    service.deliver_when_complete.return_value = True
    mock_build.return_value = service

    result = watch_run_and_deliver_task.apply(kwargs=TASK_KWARGS).get()

    assert result == {"job_id": "job-1", "trigger_run_id": "run_abc", "delivered": True}
    mock_build.assert_called_once_with(WORKER_SETTINGS)
    (options,) = service.deliver_when_complete.call_args.args
    assert options == WatchOptions.from_task_kwargs(**TASK_KWARGS, api_key="worker-key")


@patch(
    "src.application.tasks.delivery_tasks.get_settings", return_value=WORKER_SETTINGS
)
@patch("src.application.tasks.delivery_tasks.build_delivery_service")
def test_task_reports_failed_delivery(mock_build, mock_get_settings):
    service = MagicMock()
    service.deliver_when_complete.return_value = False
    mock_build.return_value = service

    result = watch_run_and_deliver_task.apply(kwargs=TASK_KWARGS).get()

    assert result["delivered"] is False


def test_build_delivery_service_uses_settings():
    settings = Settings(
        api_key="k",
        trigger_secret_key="tr_dev_x",
        trigger_api_url="https://trigger.internal",
        callback_max_retries=4,
        callback_retry_delay_seconds=2.0,
        run_poll_interval_seconds=3.0,
        run_poll_max_attempts=7,
        job_ttl_seconds=60,
    )

    service = build_delivery_service(settings)

    assert service.trigger_client.base_url == "https://trigger.internal"
    assert service.webhook_client.max_attempts == 4
    assert service.webhook_client.base_delay == 2.0
    assert service.poll_interval == 3.0
    assert service.max_poll_attempts == 7
    assert service.job_store.ttl_seconds == 60
