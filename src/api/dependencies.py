"""
API Dependency Injection

Builds Application Layer handlers with their infrastructure collaborators.
Routers depend on these providers; tests swap them through
app.dependency_overrides.
"""

from fastapi import Depends

from src.application.queries.get_job_status import GetJobStatusQueryHandler
from src.application.services.trigger_job import TriggerJobUseCase
from src.infrastructure.persistence.redis.job_store import RedisJobStore
from src.infrastructure.trigger.trigger_client import TriggerClient
from src.shared.config import Settings, get_settings


def get_trigger_client(settings: Settings = Depends(get_settings)) -> TriggerClient:
    return TriggerClient(
        secret_key=settings.trigger_secret_key,
        base_url=settings.trigger_api_url,
    )


def get_job_store(settings: Settings = Depends(get_settings)) -> RedisJobStore:
    return RedisJobStore(ttl_seconds=settings.job_ttl_seconds)


def get_trigger_job_use_case(
    trigger_client: TriggerClient = Depends(get_trigger_client),
    job_store: RedisJobStore = Depends(get_job_store),
) -> TriggerJobUseCase:
    """TriggerJobUseCase with Celery-dispatched delivery watcher."""
    return TriggerJobUseCase(trigger_client=trigger_client, job_store=job_store)


def get_job_status_query_handler(
    trigger_client: TriggerClient = Depends(get_trigger_client),
    job_store: RedisJobStore = Depends(get_job_store),
) -> GetJobStatusQueryHandler:
    return GetJobStatusQueryHandler(job_store=job_store, trigger_client=trigger_client)
