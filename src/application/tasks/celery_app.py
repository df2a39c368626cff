"""
Celery application for background run watching and callback delivery.

Architecture Note:
- Part of Application Layer (orchestration)
- Broker and result backend from environment (default local Redis)
- Tasks live in src.application.tasks (autodiscovered)

Worker:
    celery -A src.application.tasks.celery_app worker --loglevel=info
"""

import logging
import os
from datetime import datetime

from celery import Celery
from celery.signals import setup_logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

celery_app = Celery(
    "master_marketer",
    broker=os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0"),
    backend=os.environ.get("CELERY_RESULT_BACKEND", "redis://localhost:6379/1"),
)

celery_app.conf.update(
    task_track_started=True,
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    result_expires=3600,  # Results expire after 1 hour
    worker_prefetch_multiplier=1,  # Watcher tasks block for minutes
)

# Registers @celery_app.task functions in delivery_tasks.py
celery_app.autodiscover_tasks(["src.application.tasks"], related_name="delivery_tasks")


@setup_logging.connect
def configure_worker_logging(**kwargs) -> None:
    """Use the same log format as the API process."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format=LOG_FORMAT,
    )


@celery_app.task(name="health_check")
def health_check() -> dict:
    """
    Verify broker, result backend and worker are wired up.

    Returns:
        dict: status, message, timestamp, worker hostname

    Example:
        >>> health_check.delay().get(timeout=5)["status"]
        'ok'
    """
    return {
        "status": "ok",
        "message": "Celery worker is healthy",
        "timestamp": datetime.now().isoformat(),
        "worker": (
            celery_app.current_task.request.hostname
            if celery_app.current_task
            else "unknown"
        ),
    }
