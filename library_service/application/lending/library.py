"""
Use case orchestrator: the Library.

Composes the domain validators with the database, review and
notification ports to register users, manage the catalog, lend books
and notify readers about reviews.

Input validation always happens before any gateway is touched.
Failure cases: every LibraryDomainError subclass in
library_service.domain.lending.errors.
"""

import logging
from contextlib import closing
from typing import Optional

from library_service.application.lending.dtos import NotificationOutcome
from library_service.domain.lending.entities import Book, User
from library_service.domain.lending.errors import (
    BookAlreadyBorrowedError,
    BookAlreadyExistsError,
    BookNotBorrowedError,
    BookNotFoundError,
    InvalidArgumentError,
    LibraryDomainError,
    NoReviewsFoundError,
    NotificationDeliveryError,
    NotificationFailedError,
    ReviewError,
    ReviewServiceUnavailableError,
    UserAlreadyExistsError,
    UserNotRegisteredError,
)
from library_service.domain.lending.ports import DatabaseService, ReviewService
from library_service.domain.lending.validators import (
    is_author_valid,
    is_isbn_valid,
    is_non_empty,
    is_valid_user_id,
)

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_ATTEMPTS = 5


def _invalid(message: str) -> InvalidArgumentError:
    logger.warning("Rejected input: %s", message)
    return InvalidArgumentError(message)


def _require_valid_isbn(isbn: Optional[str]) -> None:
    if not is_isbn_valid(isbn):
        raise _invalid("Invalid ISBN.")


def _require_valid_user_id(user_id: Optional[str]) -> None:
    if not is_valid_user_id(user_id):
        raise _invalid("Invalid user Id.")


def format_review_message(title: str, reviews: list[str]) -> str:
    """Build the single notification message for a book's reviews."""
    return f"Reviews for '{title}':\n" + "\n".join(reviews)


class Library:
    """Orchestrates the lending operations of a library.

    Args:
        database_service: Port to the user/book store.
        review_service: Review backend session. It is closed at the end of
            every review notification, whatever the outcome.
        max_notification_attempts: Total send attempts before a review
            notification fails.
    """

    def __init__(
        self,
        database_service: DatabaseService,
        review_service: ReviewService,
        max_notification_attempts: int = DEFAULT_NOTIFICATION_ATTEMPTS,
    ) -> None:
        if max_notification_attempts < 1:
            raise ValueError("max_notification_attempts must be at least 1")
        self._database_service = database_service
        self._review_service = review_service
        self._max_notification_attempts = max_notification_attempts

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def register_user(self, user: Optional[User]) -> None:
        """Register a new user.

        Raises:
            InvalidArgumentError: If the user, its id, name or
                notification channel is missing or malformed.
            UserAlreadyExistsError: If the id is already registered.
        """
        if user is None:
            raise _invalid("Invalid user.")
        _require_valid_user_id(user.id)
        if not is_non_empty(user.name):
            raise _invalid("Invalid user name.")
        if user.notification_service is None:
            raise _invalid("Invalid notification service.")

        if self._database_service.get_user_by_id(user.id) is not None:
            raise UserAlreadyExistsError(user.id)

        self._database_service.register_user(user.id, user)
        logger.info("Registered user=%s", user.id)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def add_book(self, book: Optional[Book]) -> None:
        """Add a new, unborrowed book to the catalog.

        Raises:
            InvalidArgumentError: If the book, ISBN, title or author is
                invalid, or the book is already flagged as borrowed.
            BookAlreadyExistsError: If the ISBN is already stored.
        """
        if book is None:
            raise _invalid("Invalid book.")
        _require_valid_isbn(book.isbn)
        if not is_non_empty(book.title):
            raise _invalid("Invalid title.")
        if not is_author_valid(book.author):
            raise _invalid("Invalid author.")
        if book.borrowed:
            raise _invalid("Book with invalid borrowed state.")

        if self._database_service.get_book_by_isbn(book.isbn) is not None:
            raise BookAlreadyExistsError(book.isbn)

        self._database_service.add_book(book.isbn, book)
        logger.info("Added book isbn=%s", book.isbn)

    def get_book_by_isbn(self, isbn: Optional[str], user_id: Optional[str]) -> Book:
        """Return an available book and notify the user about its reviews.

        The notification is best effort: its outcome never affects the
        return value and its failures never reach the caller.

        Raises:
            InvalidArgumentError: If the ISBN or user id is malformed.
            BookNotFoundError: If no such book exists.
            BookAlreadyBorrowedError: If the book is currently borrowed.
        """
        _require_valid_isbn(isbn)
        _require_valid_user_id(user_id)

        book = self._database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        if book.borrowed:
            raise BookAlreadyBorrowedError(isbn, "Book was already borrowed!")

        self.try_notify_user_with_book_reviews(isbn, user_id)
        return book

    # ------------------------------------------------------------------
    # Lending
    # ------------------------------------------------------------------

    def borrow_book(self, isbn: Optional[str], user_id: Optional[str]) -> None:
        """Lend an available book to a registered user.

        The book flag and the database borrow record change together:
        if the database write fails the flag is restored.

        Raises:
            InvalidArgumentError: If the ISBN or user id is malformed.
            BookNotFoundError: If no such book exists.
            UserNotRegisteredError: If no such user exists.
            BookAlreadyBorrowedError: If the book is already lent out.
        """
        _require_valid_isbn(isbn)
        book = self._database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)

        _require_valid_user_id(user_id)
        if self._database_service.get_user_by_id(user_id) is None:
            raise UserNotRegisteredError(user_id)

        if book.borrowed:
            raise BookAlreadyBorrowedError(isbn)

        book.borrow()
        try:
            self._database_service.borrow_book(isbn, user_id)
        except Exception:
            book.return_book()
            raise
        logger.info("Book isbn=%s borrowed by user=%s", isbn, user_id)

    def return_book(self, isbn: Optional[str]) -> None:
        """Mark a borrowed book as returned.

        Raises:
            InvalidArgumentError: If the ISBN is malformed.
            BookNotFoundError: If no such book exists.
            BookNotBorrowedError: If the book is not lent out.
        """
        _require_valid_isbn(isbn)
        book = self._database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        if not book.borrowed:
            raise BookNotBorrowedError(isbn)

        book.return_book()
        try:
            self._database_service.return_book(isbn)
        except Exception:
            book.borrow()
            raise
        logger.info("Book isbn=%s returned", isbn)

    # ------------------------------------------------------------------
    # Review notifications
    # ------------------------------------------------------------------

    def notify_user_with_book_reviews(
        self, isbn: Optional[str], user_id: Optional[str]
    ) -> int:
        """Send a book's reviews to a user.

        The review session is held for the rest of the call once the book
        and user lookups succeed, and is closed exactly once on every exit
        path. Sending is retried on delivery failure, without backoff.

        Args:
            isbn: ISBN of the reviewed book.
            user_id: Id of the registered recipient.

        Returns:
            The number of send attempts it took to deliver the message.

        Raises:
            InvalidArgumentError: If the ISBN or user id is malformed.
            BookNotFoundError: If no such book exists.
            UserNotRegisteredError: If no such user exists.
            ReviewServiceUnavailableError: If the review backend fails.
            NoReviewsFoundError: If the book has no reviews.
            NotificationFailedError: If every send attempt fails.
        """
        _require_valid_isbn(isbn)
        _require_valid_user_id(user_id)

        book = self._database_service.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        user = self._database_service.get_user_by_id(user_id)
        if user is None:
            raise UserNotRegisteredError(user_id)

        with closing(self._review_service) as review_service:
            try:
                reviews = review_service.get_reviews_for_book(isbn)
            except ReviewError as exc:
                logger.error("Review backend failed for isbn=%s: %s", isbn, exc)
                raise ReviewServiceUnavailableError() from exc

            if not reviews:
                raise NoReviewsFoundError(isbn)

            message = format_review_message(book.title, reviews)
            return self._send_with_retry(user, message)

    def try_notify_user_with_book_reviews(
        self, isbn: Optional[str], user_id: Optional[str]
    ) -> NotificationOutcome:
        """Run notify_user_with_book_reviews without ever raising.

        Any failure, including ones that cannot happen for inputs that were
        already validated, is logged and reported in the outcome.
        """
        try:
            attempts = self.notify_user_with_book_reviews(isbn, user_id)
        except LibraryDomainError as exc:
            logger.warning(
                "Review notification skipped for isbn=%s user=%s: %s",
                isbn,
                user_id,
                exc.message,
            )
            return NotificationOutcome(
                isbn=isbn,
                user_id=user_id,
                success=False,
                attempts=(
                    exc.attempts if isinstance(exc, NotificationFailedError) else 0
                ),
                error=exc.message,
                error_kind=exc.kind,
            )
        except Exception as exc:
            logger.warning(
                "Review notification crashed for isbn=%s user=%s: %s",
                isbn,
                user_id,
                type(exc).__name__,
            )
            return NotificationOutcome(
                isbn=isbn, user_id=user_id, success=False, error=str(exc)
            )

        return NotificationOutcome(
            isbn=isbn, user_id=user_id, success=True, attempts=attempts
        )

    def _send_with_retry(self, user: User, message: str) -> int:
        last_error: Optional[NotificationDeliveryError] = None
        for attempt in range(1, self._max_notification_attempts + 1):
            try:
                user.send_notification(message)
            except NotificationDeliveryError as exc:
                last_error = exc
                logger.warning(
                    "Notification attempt %d/%d to user=%s failed: %s",
                    attempt,
                    self._max_notification_attempts,
                    user.id,
                    exc,
                )
                continue
            logger.info("Notified user=%s on attempt %d", user.id, attempt)
            return attempt

        raise NotificationFailedError(
            user.id, self._max_notification_attempts
        ) from last_error
