"""
Domain service: input validation for the lending context.

Pure functions. No IO, no side effects, never raise on bad input.
"""

import re
from typing import Optional

USER_ID_PATTERN = re.compile(r"[0-9]{12}")
ISBN_LENGTH = 13
AUTHOR_SEPARATORS = frozenset(" -'.")


def is_valid_user_id(user_id: Optional[str]) -> bool:
    """Return True if the id is exactly 12 decimal digits."""
    if user_id is None:
        return False
    return USER_ID_PATTERN.fullmatch(user_id) is not None


def is_isbn_valid(isbn: Optional[str]) -> bool:
    """Return True if the value is a valid ISBN-13.

    Hyphens are stripped first. The check digit is computed with
    alternating weights 1 and 3 over the first 12 digits.

    Args:
        isbn: Candidate ISBN, e.g. "978-0-306-40615-7".

    Returns:
        True when the value has 13 digits and a matching check digit.
    """
    if isbn is None:
        return False

    digits = isbn.replace("-", "")
    if len(digits) != ISBN_LENGTH or not digits.isascii() or not digits.isdigit():
        return False

    total = sum(
        int(digit) * (1 if position % 2 == 0 else 3)
        for position, digit in enumerate(digits[:12])
    )
    check_digit = (10 - total % 10) % 10
    return check_digit == int(digits[12])


def is_author_valid(name: Optional[str]) -> bool:
    """Return True if the name follows the author grammar.

    A valid name starts and ends with a letter and contains only letters
    and single separators (space, hyphen, apostrophe, period). Two
    separators may never be adjacent, except an initial's period followed
    by a space ("J.R.R. Tolkien").
    """
    if not name:
        return False
    if not name[0].isalpha() or not name[-1].isalpha():
        return False

    previous: Optional[str] = None
    for char in name:
        if char.isalpha():
            previous = None
            continue
        if char not in AUTHOR_SEPARATORS:
            return False
        if previous is not None and (previous, char) != (".", " "):
            return False
        previous = char
    return True


def is_non_empty(value: Optional[str]) -> bool:
    """Return True for any string other than None or ""."""
    return bool(value)
