"""
Tests for RedisJobStore.

Redis is replaced by an in-memory dict behind a MagicMock so the stored
JSON and TTL can be inspected.
"""

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import RedisError

from src.application.models import JobStatus
from src.infrastructure.persistence.redis.job_store import RedisJobStore


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def fake_redis():
    storage = {}
    client = MagicMock()
    client.storage = storage
    client.setex.side_effect = lambda key, ttl, value: storage.__setitem__(key, value)
    client.get.side_effect = storage.get
    return client


@pytest.fixture
def store(fake_redis):
    return RedisJobStore(redis_client=fake_redis, ttl_seconds=3600)


# ============================================================================
# create / get
# ============================================================================


def test_create_stores_accepted_record_with_ttl(store, fake_redis):
    record = store.create("job-1", "run_abc")

    key, ttl, raw = fake_redis.setex.call_args.args
    assert key == "job:job-1"
    assert ttl == 3600
    assert json.loads(raw) == record
    assert record["status"] == "accepted"
    assert record["trigger_run_id"] == "run_abc"
    assert record["output"] is None
    assert record["error"] is None
    assert record["created_at"] == record["updated_at"]


def test_get_returns_record(store):
    store.create("job-1", "run_abc")
    assert store.get("job-1")["id"] == "job-1"


def test_get_unknown_job_returns_none(store):
    assert store.get("missing") is None


def test_get_propagates_redis_error(store, fake_redis):
    fake_redis.get.side_effect = RedisError("down")

    with pytest.raises(RedisError):
        store.get("job-1")


def test_create_swallows_redis_error(store, fake_redis):
    fake_redis.setex.side_effect = RedisError("down")

    record = store.create("job-1", "run_abc")

    assert record["id"] == "job-1"


# ============================================================================
# updates
# ============================================================================


def test_update_status_accepts_enum_and_progress(store):
    store.create("job-1", "run_abc")

    store.update_status(
        "job-1", JobStatus.PROCESSING, progress="Trigger.dev run status: EXECUTING"
    )

    record = store.get("job-1")
    assert record["status"] == "processing"
    assert record["progress"] == "Trigger.dev run status: EXECUTING"


def test_update_status_keeps_progress_when_not_given(store):
    store.create("job-1", "run_abc")
    store.update_status("job-1", "processing", progress="step 1")

    store.update_status("job-1", "processing")

    assert store.get("job-1")["progress"] == "step 1"


def test_set_output_marks_complete(store):
    store.create("job-1", "run_abc")

    store.set_output("job-1", {"full_document_markdown": "# Doc"})

    record = store.get("job-1")
    assert record["status"] == "complete"
    assert record["output"] == {"full_document_markdown": "# Doc"}


def test_set_error_marks_failed(store):
    store.create("job-1", "run_abc")

    store.set_error("job-1", "Run ended with status: CRASHED")

    record = store.get("job-1")
    assert record["status"] == "failed"
    assert record["error"] == "Run ended with status: CRASHED"


def test_update_unknown_job_is_noop(store, fake_redis):
    assert store.set_output("missing", {}) is None
    fake_redis.setex.assert_not_called()


def test_update_with_redis_down_returns_none(store, fake_redis):
    fake_redis.get.side_effect = RedisError("down")
    assert store.update_status("job-1", "processing") is None
