r"""Retryability predicates.

This module provides the predicates deciding whether a failed attempt
should be followed by another one. A predicate receives the raised
exception and returns ``True`` to retry.
"""

from __future__ import annotations

__all__ = [
    "get_status_code",
    "is_retryable_error",
    "is_retryable_http_error",
    "is_server_error_status",
]

import asyncio
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

# Status returned by servers applying rate limiting
TOO_MANY_REQUESTS = 429

_ABORT_ERROR_NAMES = frozenset({"AbortError"})


def get_status_code(error: BaseException) -> int | None:
    """Return the numeric HTTP status carried by an error, if any.

    The ``status`` attribute is looked up first, then ``status_code``.
    Non-integer values are ignored.

    Args:
        error: The error to inspect.

    Returns:
        The status code, or None if the error does not carry one.

    Example:
        ```pycon
        >>> from aretry.exceptions import HttpStatusError
        >>> from aretry.predicates import get_status_code
        >>> get_status_code(HttpStatusError("Server error: 502 Bad Gateway", status=502))
        502
        >>> get_status_code(ValueError("bad input")) is None
        True

        ```
    """
    for name in ("status", "status_code"):
        value = getattr(error, name, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def is_server_error_status(status: int | None) -> bool:
    """Return True if ``status`` is in the ``[500, 600)`` range."""
    return status is not None and 500 <= status < 600


def is_retryable_error(error: BaseException) -> bool:
    """Default retry predicate.

    An error is retryable when:
    - its message contains "Network request failed" or "timeout";
    - it carries a ``status`` (or ``status_code``) in ``[500, 600)``;
    - it is an abort, cancellation or timeout kind (``AbortError``,
      ``TimeoutError``, ``httpx.TimeoutException``);
    - it is an ``httpx.TransportError``, i.e. the request never got a
      response.

    Every other error is not retryable.

    Args:
        error: The error raised by the failed attempt.

    Returns:
        True if the attempt should be retried.

    Example:
        ```pycon
        >>> from aretry.predicates import is_retryable_error
        >>> is_retryable_error(RuntimeError("Network request failed"))
        True
        >>> is_retryable_error(ValueError("bad input"))
        False

        ```
    """
    message = str(error)
    if "Network request failed" in message:
        return True
    if "timeout" in message:
        return True
    if is_server_error_status(get_status_code(error)):
        return True
    if type(error).__name__ in _ABORT_ERROR_NAMES:
        return True
    return isinstance(
        error, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException, httpx.TransportError)
    )


def is_retryable_http_error(
    error: BaseException,
    fallback: Callable[[BaseException], bool] | None = None,
) -> bool:
    """Retry predicate used by ``fetch_with_retry``.

    Rate-limited (429) and server error (5xx) statuses are always
    retryable. Any other error is delegated to ``fallback``, or to
    ``is_retryable_error`` when no fallback is given.

    Args:
        error: The error raised by the failed attempt.
        fallback: Optional caller-supplied predicate.

    Returns:
        True if the attempt should be retried.

    Example:
        ```pycon
        >>> from aretry.exceptions import HttpStatusError
        >>> from aretry.predicates import is_retryable_http_error
        >>> is_retryable_http_error(HttpStatusError("Rate limited", status=429))
        True
        >>> is_retryable_http_error(ValueError("bad input"), fallback=lambda error: True)
        True

        ```
    """
    status = get_status_code(error)
    if status == TOO_MANY_REQUESTS or is_server_error_status(status):
        return True
    if fallback is not None:
        return fallback(error)
    return is_retryable_error(error)
