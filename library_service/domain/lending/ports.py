"""
Port interfaces (ABCs) for the lending bounded context.

Ports define the contracts the Library orchestrator requires from the
outside world: a database, a review backend and per-user notification
channels. Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from library_service.domain.lending.entities import Book, User


class DatabaseService(ABC):
    """Port for storing users, books and borrow records.

    Every call is treated as atomic and immediately consistent.
    """

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Return the registered user, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def register_user(self, user_id: str, user: User) -> None:
        """Persist a new user under its id."""
        raise NotImplementedError

    @abstractmethod
    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        """Return the stored book, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def add_book(self, isbn: str, book: Book) -> None:
        """Persist a new book under its ISBN."""
        raise NotImplementedError

    @abstractmethod
    def borrow_book(self, isbn: str, user_id: str) -> None:
        """Record that a user borrowed a book."""
        raise NotImplementedError

    @abstractmethod
    def return_book(self, isbn: str) -> None:
        """Clear the borrow record of a book."""
        raise NotImplementedError


class ReviewService(ABC):
    """Port for reading book reviews from the review backend.

    An instance is a session: close() must be called once the caller is
    done with it.
    """

    @abstractmethod
    def get_reviews_for_book(self, isbn: str) -> list[str]:
        """Return the reviews for a book, in backend order.

        Raises:
            ReviewError: If the review backend is unavailable.
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Release the review session."""
        raise NotImplementedError


class NotificationService(ABC):
    """Port for delivering a message to a single user."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver a message.

        Raises:
            NotificationDeliveryError: If delivery fails.
        """
        raise NotImplementedError
