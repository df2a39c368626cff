"""
Redis Job Store

Short-lived job records that map the job ids handed to callers onto
Trigger.dev runs, plus the last known status, output and error.

Responsibility:
    - Create a job record when a task is triggered
    - Update status / progress, attach output or error
    - Expire records automatically after the TTL

Architecture Notes:
    - Infrastructure Layer (external dependency on Redis)
    - One JSON string per job under "job:{job_id}", written with SETEX so
      every write refreshes the TTL
    - Shared between API processes and Celery workers
    - Status values are the application JobStatus strings; the store does
      not interpret them

Storage Format:
    {
        "id": "7f0c...",
        "status": "accepted",          # accepted/processing/complete/failed
        "progress": null,              # e.g. "Trigger.dev run status: EXECUTING"
        "output": null,                # run output once complete
        "error": null,                 # error message once failed
        "trigger_run_id": "run_...",
        "created_at": "2025-03-01T10:30:45.123+00:00",
        "updated_at": "2025-03-01T10:31:02.004+00:00"
    }

Error Handling:
    - Writes: RedisError is logged, not raised (the triggered run keeps
      going whether or not its record was stored)
    - Reads: RedisError propagates to the caller

Examples:
    >>> store = RedisJobStore()
    >>> store.create("job-1", "run_abc")
    >>> store.update_status("job-1", "processing", progress="Trigger.dev run status: EXECUTING")
    >>> store.get("job-1")["status"]
    'processing'
"""

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from redis import Redis
from redis.exceptions import RedisError

from .connection import get_redis_client

# Configure logger for this module
logger = logging.getLogger(__name__)

DEFAULT_JOB_TTL_SECONDS = 3600


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _status_value(status: Any) -> str:
    return status.value if isinstance(status, Enum) else str(status)


class RedisJobStore:
    """
    Job records in Redis with a fixed TTL.

    Attributes:
        ttl_seconds: Lifetime of a record after its last write
    """

    def __init__(
        self,
        redis_client: Optional[Redis] = None,
        ttl_seconds: int = DEFAULT_JOB_TTL_SECONDS,
    ) -> None:
        self._redis = redis_client
        self.ttl_seconds = ttl_seconds

    @property
    def redis(self) -> Redis:
        """Redis client (pooled client is fetched lazily on first use)."""
        if self._redis is None:
            self._redis = get_redis_client()
        return self._redis

    @staticmethod
    def _key(job_id: str) -> str:
        return f"job:{job_id}"

    def _write(self, record: dict[str, Any]) -> None:
        try:
            self.redis.setex(
                self._key(record["id"]), self.ttl_seconds, json.dumps(record)
            )
        except RedisError as e:
            logger.warning(f"Redis error while saving job {record['id']}: {e}")

    def create(self, job_id: str, trigger_run_id: str) -> dict[str, Any]:
        """
        Store a new job in status "accepted".

        Args:
            job_id: Job id handed to the caller
            trigger_run_id: Run triggered for the job

        Returns:
            The stored record
        """
        now = _now_iso()
        record = {
            "id": job_id,
            "status": "accepted",
            "progress": None,
            "output": None,
            "error": None,
            "trigger_run_id": trigger_run_id,
            "created_at": now,
            "updated_at": now,
        }
        self._write(record)
        logger.info(f"Job {job_id} created for run {trigger_run_id}")
        return record

    def get(self, job_id: str) -> Optional[dict[str, Any]]:
        """
        Load a job record.

        Returns:
            Record dict, or None when unknown or expired

        Raises:
            RedisError: If Redis is unreachable
        """
        raw = self.redis.get(self._key(job_id))
        if raw is None:
            return None
        return json.loads(raw)

    def _update(self, job_id: str, **changes: Any) -> Optional[dict[str, Any]]:
        try:
            record = self.get(job_id)
        except RedisError as e:
            logger.warning(f"Redis error while loading job {job_id}: {e}")
            return None

        if record is None:
            logger.debug(f"Job {job_id} not found, update skipped")
            return None

        record.update(changes)
        record["updated_at"] = _now_iso()
        self._write(record)
        return record

    def update_status(
        self, job_id: str, status: Any, progress: Optional[str] = None
    ) -> Optional[dict[str, Any]]:
        """Set status (and progress text when given). No-op for unknown jobs."""
        changes: dict[str, Any] = {"status": _status_value(status)}
        if progress is not None:
            changes["progress"] = progress
        return self._update(job_id, **changes)

    def set_output(self, job_id: str, output: Any) -> Optional[dict[str, Any]]:
        """Mark job complete with run output. No-op for unknown jobs."""
        return self._update(job_id, status="complete", output=output)

    def set_error(self, job_id: str, error: str) -> Optional[dict[str, Any]]:
        """Mark job failed with error message. No-op for unknown jobs."""
        return self._update(job_id, status="failed", error=error)
