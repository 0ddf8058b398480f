"""
Domain-specific errors for the lending bounded context.

All errors raised from the domain and application layers are defined here.
Each error carries an ErrorKind so callers can branch on the failure class
without matching on concrete types or messages.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """High-level failure categories."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    EXHAUSTED_RETRY = "exhausted_retry"


class LibraryDomainError(Exception):
    """Base error for all lending domain errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(LibraryDomainError, ValueError):
    """Raised when caller input fails validation.

    Always raised before any gateway is touched.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class BookNotFoundError(LibraryDomainError):
    """Raised when no book with the given ISBN exists."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, isbn: str) -> None:
        super().__init__("Book not found!")
        self.isbn = isbn


class UserNotRegisteredError(LibraryDomainError):
    """Raised when no user with the given id is registered."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found!")
        self.user_id = user_id


class UserAlreadyExistsError(LibraryDomainError):
    """Raised when registering a user id that is already taken."""

    kind = ErrorKind.CONFLICT

    def __init__(self, user_id: str) -> None:
        super().__init__("User already exists.")
        self.user_id = user_id


class BookAlreadyExistsError(LibraryDomainError):
    """Raised when adding a book whose ISBN is already stored."""

    kind = ErrorKind.CONFLICT

    def __init__(self, isbn: str) -> None:
        super().__init__("Book already exists.")
        self.isbn = isbn


class BookAlreadyBorrowedError(LibraryDomainError):
    """Raised when a borrowed book is requested or borrowed again."""

    kind = ErrorKind.CONFLICT

    def __init__(self, isbn: str, message: str = "Book is already borrowed!") -> None:
        super().__init__(message)
        self.isbn = isbn


class BookNotBorrowedError(LibraryDomainError):
    """Raised when returning a book that is not borrowed."""

    kind = ErrorKind.CONFLICT

    def __init__(self, isbn: str) -> None:
        super().__init__("Book wasn't borrowed!")
        self.isbn = isbn


class NoReviewsFoundError(LibraryDomainError):
    """Raised when the review backend has no reviews for a book."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, isbn: str) -> None:
        super().__init__("No reviews found!")
        self.isbn = isbn


class ReviewServiceUnavailableError(LibraryDomainError):
    """Raised when the review backend reports an internal error."""

    kind = ErrorKind.BACKEND_UNAVAILABLE

    def __init__(self) -> None:
        super().__init__("Review service unavailable!")


class NotificationFailedError(LibraryDomainError):
    """Raised when every notification attempt has failed."""

    kind = ErrorKind.EXHAUSTED_RETRY

    def __init__(self, user_id: str, attempts: int) -> None:
        super().__init__("Notification failed!")
        self.user_id = user_id
        self.attempts = attempts


# ------------------------------------------------------------------
# Gateway-side errors (raised by collaborators, translated above)
# ------------------------------------------------------------------


class ReviewError(Exception):
    """Raised by a ReviewService when the review backend fails."""


class NotificationDeliveryError(Exception):
    """Raised by a NotificationService when a message cannot be delivered."""
