"""
Data Transfer Objects for the lending application layer.

Plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from library_service.domain.lending.errors import ErrorKind


@dataclass(frozen=True)
class NotificationOutcome:
    """Result of a best-effort review notification.

    Attributes:
        isbn: ISBN the reviews were requested for.
        user_id: Recipient of the notification.
        success: True when the message was delivered.
        attempts: Number of send attempts made (0 if sending never started).
        error: Failure message, when success is False.
        error_kind: Failure category for domain errors; None for
            unexpected errors or on success.
    """

    isbn: str
    user_id: str
    success: bool
    attempts: int = 0
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
