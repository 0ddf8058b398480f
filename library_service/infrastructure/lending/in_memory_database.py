"""
Adapter: In-memory database.

Implements DatabaseService port.
Keeps users, books and borrow records in process memory. Suitable for
development, demos and integration tests; nothing survives a restart.
"""

import logging
from typing import Optional

from library_service.domain.lending.entities import Book, User
from library_service.domain.lending.ports import DatabaseService

logger = logging.getLogger(__name__)


class InMemoryDatabaseService(DatabaseService):
    """Dict-backed implementation of the DatabaseService port.

    Stored objects are kept by reference, so a Book returned by
    get_book_by_isbn is the same object the orchestrator mutates.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._books: dict[str, Book] = {}
        self._borrowers: dict[str, str] = {}

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def register_user(self, user_id: str, user: User) -> None:
        """Store a user.

        Raises:
            KeyError: If the id is already taken.
        """
        if user_id in self._users:
            raise KeyError(f"Duplicate user id: {user_id}")
        self._users[user_id] = user

    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def add_book(self, isbn: str, book: Book) -> None:
        """Store a book.

        Raises:
            KeyError: If the ISBN is already taken.
        """
        if isbn in self._books:
            raise KeyError(f"Duplicate ISBN: {isbn}")
        self._books[isbn] = book

    def borrow_book(self, isbn: str, user_id: str) -> None:
        """Record a borrow.

        Raises:
            KeyError: If the book or user is unknown.
        """
        if isbn not in self._books:
            raise KeyError(f"Unknown ISBN: {isbn}")
        if user_id not in self._users:
            raise KeyError(f"Unknown user id: {user_id}")
        self._borrowers[isbn] = user_id
        logger.debug("Borrow recorded isbn=%s user=%s", isbn, user_id)

    def return_book(self, isbn: str) -> None:
        """Drop the borrow record of a book, if any."""
        self._borrowers.pop(isbn, None)
        logger.debug("Borrow cleared isbn=%s", isbn)

    def get_borrower(self, isbn: str) -> Optional[str]:
        """Return the id of the user currently holding a book."""
        return self._borrowers.get(isbn)
