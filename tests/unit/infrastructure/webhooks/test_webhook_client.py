"""
Tests for WebhookClient.

Uses httpx.MockTransport so no network is touched, and a recording
sleep so backoff delays can be asserted without waiting.
"""

import json

import httpx
import pytest

from src.infrastructure.webhooks import WebhookClient, WebhookDeliveryError

CALLBACK_URL = "https://app.example.com/hooks/mm"


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def sleeps():
    return []


def _client(handler, sleeps, **kwargs):
    return WebhookClient(
        sleep=sleeps.append, transport=httpx.MockTransport(handler), **kwargs
    )


def _responses(*statuses):
    """Handler returning the given statuses in order, recording requests."""
    requests = []
    queue = list(statuses)

    def handler(request):
        requests.append(request)
        return httpx.Response(queue.pop(0), text="body")

    return handler, requests


# ============================================================================
# post_json
# ============================================================================


def test_post_json_sends_body_and_api_key(sleeps):
    handler, requests = _responses(200)
    client = _client(handler, sleeps)

    response = client.post_json(CALLBACK_URL, {"job_id": "j-1"}, api_key="secret")

    assert response.status_code == 200
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == CALLBACK_URL
    assert request.headers["x-api-key"] == "secret"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"job_id": "j-1"}


def test_post_json_without_api_key_omits_header(sleeps):
    handler, requests = _responses(200)

    _client(handler, sleeps).post_json(CALLBACK_URL, {})

    assert "x-api-key" not in requests[0].headers


# ============================================================================
# post_with_retry
# ============================================================================


def test_first_attempt_success_does_not_sleep(sleeps):
    handler, requests = _responses(204)

    response = _client(handler, sleeps).post_with_retry(CALLBACK_URL, {})

    assert response.status_code == 204
    assert len(requests) == 1
    assert sleeps == []


def test_success_on_third_attempt_uses_linear_backoff(sleeps):
    handler, requests = _responses(500, 503, 200)

    response = _client(handler, sleeps).post_with_retry(CALLBACK_URL, {"a": 1})

    assert response.status_code == 200
    assert len(requests) == 3
    assert sleeps == [5.0, 10.0]


def test_all_attempts_fail_raises_delivery_error(sleeps):
    handler, requests = _responses(500, 500, 502)

    with pytest.raises(WebhookDeliveryError) as exc_info:
        _client(handler, sleeps).post_with_retry(CALLBACK_URL, {})

    assert len(requests) == 3
    assert sleeps == [5.0, 10.0]
    error = exc_info.value
    assert error.url == CALLBACK_URL
    assert error.attempts == 3
    assert error.last_error == "HTTP 502: body"


def test_client_errors_are_retried_too(sleeps):
    handler, requests = _responses(400, 401)

    with pytest.raises(WebhookDeliveryError):
        _client(handler, sleeps, max_attempts=2, base_delay=1.0).post_with_retry(
            CALLBACK_URL, {}
        )

    assert len(requests) == 2
    assert sleeps == [1.0]


def test_network_error_is_retried(sleeps):
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200)

    response = _client(handler, sleeps).post_with_retry(CALLBACK_URL, {})

    assert response.status_code == 200
    assert sleeps == [5.0]


def test_per_call_attempt_override(sleeps):
    handler, requests = _responses(500)

    with pytest.raises(WebhookDeliveryError) as exc_info:
        _client(handler, sleeps).post_with_retry(CALLBACK_URL, {}, max_attempts=1)

    assert exc_info.value.attempts == 1
    assert len(requests) == 1
    assert sleeps == []


def test_invalid_max_attempts():
    with pytest.raises(ValueError):
        WebhookClient(max_attempts=0)
