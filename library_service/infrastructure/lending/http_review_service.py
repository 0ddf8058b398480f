"""
Adapter: Review backend over HTTP.

Implements ReviewService port.
Fetches reviews with GET {base_url}/books/{isbn}/reviews, which must
answer with a JSON array of strings.
"""

import logging
from typing import Optional

import httpx

from library_service.domain.lending.errors import ReviewError
from library_service.domain.lending.ports import ReviewService

logger = logging.getLogger(__name__)


class HttpReviewService(ReviewService):
    """HTTP client for the review backend.

    The underlying httpx.Client is opened on first use and released by
    close(); a later request opens a fresh one.

    Args:
        base_url: Root URL of the review backend.
        timeout: HTTP timeout in seconds.
        transport: Optional httpx transport, e.g. for tests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def get_reviews_for_book(self, isbn: str) -> list[str]:
        """Return the reviews for a book.

        Raises:
            ReviewError: On transport failure, a non-2xx answer or a
                payload that is not a list of strings.
        """
        try:
            resp = self._get_client().get(f"/books/{isbn}/reviews")
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as exc:
            raise ReviewError(f"Review backend request failed: {exc}") from exc
        except ValueError as exc:
            raise ReviewError("Review backend returned invalid JSON") from exc

        if not isinstance(payload, list) or not all(
            isinstance(review, str) for review in payload
        ):
            raise ReviewError("Review backend returned an unexpected payload")

        logger.debug("Fetched %d reviews for isbn=%s", len(payload), isbn)
        return payload

    def close(self) -> None:
        """Close the HTTP session, if one is open."""
        if self._client is not None:
            self._client.close()
            self._client = None
