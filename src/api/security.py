"""
API Key Authentication

Every /api route except health requires the shared API key in the
x-api-key header.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Header

from src.shared.config import Settings, get_settings

logger = logging.getLogger(__name__)


class InvalidApiKeyError(Exception):
    """Raised when x-api-key is missing or wrong (mapped to 401)."""

    def __init__(self) -> None:
        super().__init__("Invalid or missing API key")


def require_api_key(
    x_api_key: Optional[str] = Header(default=None, alias="x-api-key"),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    FastAPI dependency guarding protected routers.

    Raises:
        InvalidApiKeyError: If header is absent or does not match API_KEY
    """
    if not x_api_key or not secrets.compare_digest(
        x_api_key.encode(), settings.api_key.encode()
    ):
        logger.warning("Rejected request with invalid or missing API key")
        raise InvalidApiKeyError()
