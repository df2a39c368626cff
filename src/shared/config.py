"""
Application Settings

Environment-backed configuration shared by the API, the Celery worker
and the diagnostic scripts.

Responsibility:
    - Load .env file (python-dotenv) once at import time
    - Read required and optional settings from environment
    - Provide typed, immutable Settings object
    - Fail fast with ConfigurationError when required keys are missing

Architecture Notes:
    - Part of Shared layer (cross-cutting concern)
    - Settings are cached per process (get_settings)
    - Tests call reset_settings() after changing environment variables

Environment Variables:
    Required:
        - API_KEY: Shared secret for inbound x-api-key auth and outbound callbacks
        - TRIGGER_SECRET_KEY: Trigger.dev secret key (tr_dev_... / tr_prod_...)

    Optional:
        - TRIGGER_API_URL: Trigger.dev API base URL (default https://api.trigger.dev)
        - ENVIRONMENT: development | production | test (default development)
        - PORT: HTTP port (default 10000)
        - CALLBACK_MAX_RETRIES: Webhook POST attempts (default 3)
        - CALLBACK_RETRY_DELAY_SECONDS: Linear backoff base (default 5)
        - CALLBACK_TIMEOUT_SECONDS: Per-attempt HTTP timeout (default 30)
        - RUN_POLL_INTERVAL_SECONDS: Trigger.dev poll interval (default 10)
        - RUN_POLL_MAX_ATTEMPTS: Trigger.dev poll budget (default 500)
        - JOB_TTL_SECONDS: Job record expiry in Redis (default 3600)
        - CORS_ALLOWED_ORIGINS: Comma separated origins (default "*")
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ("development", "production", "test")

_settings: Optional["Settings"] = None
_settings_lock = threading.Lock()


class ConfigurationError(Exception):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, message: str, missing_keys: Optional[list[str]] = None) -> None:
        self.missing_keys = missing_keys or []
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Attributes:
        api_key: Shared API key (inbound auth + outbound callback auth)
        trigger_secret_key: Trigger.dev secret key
        trigger_api_url: Trigger.dev REST API base URL
        environment: Runtime environment name
        port: HTTP port for uvicorn
        callback_max_retries: Number of webhook POST attempts
        callback_retry_delay_seconds: Base delay for linear backoff (attempt * base)
        callback_timeout_seconds: Timeout for a single webhook POST
        run_poll_interval_seconds: Delay between Trigger.dev run status checks
        run_poll_max_attempts: Max status checks before giving up on a run
        job_ttl_seconds: Job record lifetime in Redis
        cors_allowed_origins: Origins allowed by CORS middleware
    """

    api_key: str
    trigger_secret_key: str
    trigger_api_url: str = "https://api.trigger.dev"
    environment: str = "development"
    port: int = 10000
    callback_max_retries: int = 3
    callback_retry_delay_seconds: float = 5.0
    callback_timeout_seconds: float = 30.0
    run_poll_interval_seconds: float = 10.0
    run_poll_max_attempts: int = 500
    job_ttl_seconds: int = 3600
    cors_allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build Settings from environment variables.

        Raises:
            ConfigurationError: If API_KEY or TRIGGER_SECRET_KEY is missing,
                ENVIRONMENT is not recognised, or a numeric value cannot be parsed.
        """
        missing = [
            key for key in ("API_KEY", "TRIGGER_SECRET_KEY") if not os.getenv(key)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing_keys=missing,
            )

        environment = os.getenv("ENVIRONMENT", "development")
        if environment not in VALID_ENVIRONMENTS:
            raise ConfigurationError(
                f"Invalid ENVIRONMENT '{environment}'. "
                f"Valid: {', '.join(VALID_ENVIRONMENTS)}"
            )

        origins = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        try:
            return cls(
                api_key=os.environ["API_KEY"],
                trigger_secret_key=os.environ["TRIGGER_SECRET_KEY"],
                trigger_api_url=os.getenv(
                    "TRIGGER_API_URL", "https://api.trigger.dev"
                ).rstrip("/"),
                environment=environment,
                port=int(os.getenv("PORT", "10000")),
                callback_max_retries=int(os.getenv("CALLBACK_MAX_RETRIES", "3")),
                callback_retry_delay_seconds=float(
                    os.getenv("CALLBACK_RETRY_DELAY_SECONDS", "5")
                ),
                callback_timeout_seconds=float(
                    os.getenv("CALLBACK_TIMEOUT_SECONDS", "30")
                ),
                run_poll_interval_seconds=float(
                    os.getenv("RUN_POLL_INTERVAL_SECONDS", "10")
                ),
                run_poll_max_attempts=int(os.getenv("RUN_POLL_MAX_ATTEMPTS", "500")),
                job_ttl_seconds=int(os.getenv("JOB_TTL_SECONDS", "3600")),
                cors_allowed_origins=origins or ["*"],
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e


def get_settings() -> Settings:
    """
    Get process-wide settings (thread-safe lazy singleton).

    Returns:
        Settings loaded from environment on first call

    Raises:
        ConfigurationError: If required settings are missing
    """
    global _settings

    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = Settings.from_env()
                logger.info(
                    f"Settings loaded: environment={_settings.environment}, "
                    f"trigger_api_url={_settings.trigger_api_url}"
                )

    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads environment."""
    global _settings

    with _settings_lock:
        _settings = None
