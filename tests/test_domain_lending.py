"""
Tests for the lending domain layer.

Tests entities and error classes in isolation.
No external dependencies or IO required.
"""

from unittest.mock import MagicMock

import pytest

from library_service.domain.lending.entities import Book, User
from library_service.domain.lending.errors import (
    BookAlreadyBorrowedError,
    BookAlreadyExistsError,
    BookNotBorrowedError,
    BookNotFoundError,
    ErrorKind,
    InvalidArgumentError,
    LibraryDomainError,
    NoReviewsFoundError,
    NotificationFailedError,
    ReviewServiceUnavailableError,
    UserAlreadyExistsError,
    UserNotRegisteredError,
)
from library_service.domain.lending.ports import NotificationService


class TestBookEntity:
    """Tests for the Book entity."""

    def test_new_book_is_available(self) -> None:
        book = Book(isbn="9780306406157", title="Dune", author="Frank Herbert")
        assert book.borrowed is False
        assert book.is_borrowed is False

    def test_borrow_then_return(self) -> None:
        book = Book(isbn="9780306406157", title="Dune", author="Frank Herbert")
        book.borrow()
        assert book.is_borrowed
        book.return_book()
        assert not book.is_borrowed


class TestUserEntity:
    """Tests for the User entity."""

    def test_send_notification_delegates_to_channel(self) -> None:
        channel = MagicMock(spec=NotificationService)
        user = User(id="123456789012", name="Alice", notification_service=channel)

        user.send_notification("hello")

        channel.send_notification.assert_called_once_with("hello")

    def test_send_notification_without_channel_raises(self) -> None:
        user = User(id="123456789012", name="Alice")
        with pytest.raises(ValueError):
            user.send_notification("hello")

    def test_user_is_immutable(self) -> None:
        user = User(id="123456789012", name="Alice")
        with pytest.raises(AttributeError):
            user.id = "999999999999"


class TestDomainErrors:
    """Tests for domain error classes."""

    @pytest.mark.parametrize(
        ("error", "message", "kind"),
        [
            (InvalidArgumentError("Invalid ISBN."), "Invalid ISBN.", ErrorKind.INVALID_ARGUMENT),
            (BookNotFoundError("isbn"), "Book not found!", ErrorKind.NOT_FOUND),
            (UserNotRegisteredError("id"), "User not found!", ErrorKind.NOT_FOUND),
            (UserAlreadyExistsError("id"), "User already exists.", ErrorKind.CONFLICT),
            (BookAlreadyExistsError("isbn"), "Book already exists.", ErrorKind.CONFLICT),
            (BookAlreadyBorrowedError("isbn"), "Book is already borrowed!", ErrorKind.CONFLICT),
            (BookNotBorrowedError("isbn"), "Book wasn't borrowed!", ErrorKind.CONFLICT),
            (NoReviewsFoundError("isbn"), "No reviews found!", ErrorKind.NOT_FOUND),
            (
                ReviewServiceUnavailableError(),
                "Review service unavailable!",
                ErrorKind.BACKEND_UNAVAILABLE,
            ),
            (
                NotificationFailedError("id", 5),
                "Notification failed!",
                ErrorKind.EXHAUSTED_RETRY,
            ),
        ],
    )
    def test_message_and_kind(self, error, message, kind) -> None:
        assert isinstance(error, LibraryDomainError)
        assert error.message == message
        assert str(error) == message
        assert error.kind is kind

    def test_invalid_argument_is_value_error(self) -> None:
        assert isinstance(InvalidArgumentError("Invalid user."), ValueError)

    def test_errors_keep_their_subject(self) -> None:
        assert BookNotFoundError("9780306406157").isbn == "9780306406157"
        assert UserNotRegisteredError("123456789012").user_id == "123456789012"
        assert NotificationFailedError("123456789012", 5).attempts == 5

    def test_already_borrowed_message_can_be_overridden(self) -> None:
        error = BookAlreadyBorrowedError("isbn", "Book was already borrowed!")
        assert error.message == "Book was already borrowed!"
