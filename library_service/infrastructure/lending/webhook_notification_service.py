"""
Adapter: Webhook notification channel.

Implements NotificationService port.
Delivers a user's notifications by POSTing JSON to a webhook URL.
One attempt per call; retries are the orchestrator's concern.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlparse

import httpx

from library_service.domain.lending.errors import NotificationDeliveryError
from library_service.domain.lending.ports import NotificationService

logger = logging.getLogger(__name__)


class WebhookNotificationService(NotificationService):
    """Notification channel backed by an HTTP webhook.

    Args:
        url: Full webhook URL (must be http/https).
        timeout: HTTP timeout in seconds.
        transport: Optional httpx transport, e.g. for tests.

    Raises:
        ValueError: If the URL scheme is not http or https.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            msg = f"Invalid webhook URL scheme: {parsed.scheme}"
            raise ValueError(msg)
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def send_notification(self, message: str) -> None:
        """POST the message to the webhook.

        Raises:
            NotificationDeliveryError: On transport failure or a non-2xx answer.
        """
        payload = {
            "event": "book_reviews",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "message": message,
        }
        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = client.post(
                    self._url,
                    json=payload,
                    headers={"X-Library-Event": "book_reviews"},
                )
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Webhook POST to %s failed: %s", self._url, exc)
            raise NotificationDeliveryError(str(exc)) from exc
