"""
Webhook Delivery Exceptions

Raised by WebhookClient when a callback could not be delivered.
"""

from typing import Optional


class WebhookDeliveryError(Exception):
    """
    Raised after every POST attempt to a callback URL failed.

    Attributes:
        url: Callback URL
        attempts: Number of attempts made
        last_error: Description of the last failure (status + body, or exception)
    """

    def __init__(self, url: str, attempts: int, last_error: Optional[str] = None) -> None:
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        message = f"Failed to deliver webhook to {url} after {attempts} attempts"
        if last_error:
            message = f"{message}. Last error: {last_error}"
        super().__init__(message)
