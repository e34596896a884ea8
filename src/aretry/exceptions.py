r"""Exceptions raised by the HTTP retry wrapper."""

from __future__ import annotations

__all__ = ["HttpStatusError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HttpStatusError(Exception):
    """Raised when an HTTP response is promoted to an error.

    ``fetch_with_retry`` raises this exception for rate-limited (429) and
    server error (5xx) responses so that the retry predicates can decide
    whether to try again. The numeric status is exposed as ``status``,
    the attribute inspected by the default retry predicate.

    Args:
        message: The error message.
        status: The HTTP status code of the response.
        reason_phrase: The reason phrase of the response (e.g.,
            "Service Unavailable").
        method: The HTTP method of the request.
        url: The URL of the request.
        response: The promoted response, if available.

    Example:
        ```pycon
        >>> from aretry.exceptions import HttpStatusError
        >>> error = HttpStatusError("Server error: 503 Service Unavailable", status=503)
        >>> error.status
        503
        >>> str(error)
        'Server error: 503 Service Unavailable'

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        reason_phrase: str = "",
        method: str | None = None,
        url: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason_phrase = reason_phrase
        self.method = method
        self.url = url
        self.response = response

    @property
    def status_code(self) -> int:
        """Alias of ``status`` following the ``httpx`` naming."""
        return self.status

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, status={self.status}, "
            f"method={self.method!r}, url={self.url!r})"
        )
