"""
Domain entities for the lending bounded context.

Entities are created by callers and handed to the Library orchestrator.
They contain no framework imports and no IO beyond delegating to the
notification channel a user owns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from library_service.domain.lending.ports import NotificationService


@dataclass
class Book:
    """A catalog book identified by its ISBN-13.

    The borrowed flag is the only mutable state. It moves between
    available and borrowed through borrow() and return_book().
    """

    isbn: str
    title: str
    author: str
    borrowed: bool = False

    @property
    def is_borrowed(self) -> bool:
        return self.borrowed

    def borrow(self) -> None:
        """Mark the book as borrowed."""
        self.borrowed = True

    def return_book(self) -> None:
        """Mark the book as available again."""
        self.borrowed = False


@dataclass(frozen=True)
class User:
    """A library member with a private notification channel."""

    id: str
    name: str
    notification_service: Optional[NotificationService] = None

    def send_notification(self, message: str) -> None:
        """Deliver a message through the user's notification channel.

        Raises:
            NotificationDeliveryError: If the channel fails to deliver.
        """
        if self.notification_service is None:
            raise ValueError(f"User {self.id} has no notification channel")
        self.notification_service.send_notification(message)
