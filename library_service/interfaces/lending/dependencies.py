"""
Dependency wiring for the lending bounded context.

Builds a Library with its infrastructure adapters via constructor
injection. This is the composition root for the lending context.
"""

from typing import Optional

from library_service.application.lending.library import Library
from library_service.core.config import Settings, settings
from library_service.domain.lending.ports import DatabaseService, ReviewService
from library_service.infrastructure.lending.http_review_service import (
    HttpReviewService,
)
from library_service.infrastructure.lending.in_memory_database import (
    InMemoryDatabaseService,
)
from library_service.infrastructure.lending.webhook_notification_service import (
    WebhookNotificationService,
)


def get_review_service(config: Settings = settings) -> HttpReviewService:
    """Build the HTTP review client from settings."""
    return HttpReviewService(
        base_url=config.review_service_url,
        timeout=config.review_service_timeout,
    )


def get_webhook_notification_service(
    url: str, config: Settings = settings
) -> WebhookNotificationService:
    """Build a user's webhook notification channel from settings."""
    return WebhookNotificationService(
        url=url, timeout=config.notification_webhook_timeout
    )


def get_library(
    database_service: Optional[DatabaseService] = None,
    review_service: Optional[ReviewService] = None,
    config: Settings = settings,
) -> Library:
    """Build a Library, defaulting any adapter that is not supplied.

    Args:
        database_service: Store to use. Defaults to a fresh in-memory one.
        review_service: Review session to use. Defaults to the HTTP client.
        config: Settings to read URLs, timeouts and retry limits from.
    """
    return Library(
        database_service=database_service or InMemoryDatabaseService(),
        review_service=review_service or get_review_service(config),
        max_notification_attempts=config.notification_max_attempts,
    )
