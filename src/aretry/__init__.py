r"""aretry - Retry utilities with exponential backoff for asyncio.

This package provides a generic retry executor for coroutines, built on
exponential backoff with jitter and pluggable retry predicates, together
with an HTTP wrapper built on top of the httpx library.

Key Features:
    - ``with_retry``: retry any zero-argument coroutine function
    - ``fetch_with_retry``: HTTP requests retried on 429 and 5xx responses,
      network failures and timeouts
    - ``make_retryable``: turn a coroutine function into a retrying one
    - Exponential backoff capped by a maximum delay, plus random jitter
    - Errors are propagated unchanged, never wrapped
    - Retry observer callback and structured logging

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import make_retryable, with_retry
    >>> async def load_devotional():
    ...     return {"title": "Morning"}
    ...
    >>> asyncio.run(with_retry(load_devotional, max_attempts=5))
    {'title': 'Morning'}
    >>> retryable = make_retryable(load_devotional, initial_delay=0.5)
    >>> asyncio.run(retryable())
    {'title': 'Morning'}

    ```
"""

from __future__ import annotations

__all__ = [
    "HttpStatusError",
    "RetryConfig",
    "__version__",
    "fetch_with_retry",
    "is_retryable_error",
    "is_retryable_http_error",
    "make_retryable",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.core.config import RetryConfig
from aretry.exceptions import HttpStatusError
from aretry.executor import with_retry
from aretry.fetch import fetch_with_retry
from aretry.predicates import is_retryable_error, is_retryable_http_error
from aretry.retryable import make_retryable

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
