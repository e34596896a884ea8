r"""Contains the HTTP request wrapper with automatic retry logic."""

from __future__ import annotations

__all__ = ["fetch_with_retry", "raise_for_retryable_status"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.core.config import DEFAULT_TIMEOUT, RetryConfig
from aretry.core.validation import validate_timeout
from aretry.exceptions import HttpStatusError
from aretry.executor import with_retry
from aretry.predicates import TOO_MANY_REQUESTS, is_retryable_http_error

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def raise_for_retryable_status(response: httpx.Response, method: str, url: str) -> httpx.Response:
    """Promote rate-limited and server error responses to errors.

    Responses with a status >= 500 raise ``HttpStatusError`` with the
    message ``"Server error: <status> <reason>"``, and 429 responses raise
    ``HttpStatusError`` with the message ``"Rate limited: 429 <reason>"``.
    Every other response, including other 4xx statuses, is returned
    unchanged.

    Args:
        response: The HTTP response to classify.
        method: The HTTP method of the request.
        url: The URL of the request.

    Returns:
        The response, if it was not promoted.

    Raises:
        HttpStatusError: If the response status is 429 or >= 500.
    """
    status = response.status_code
    if status >= 500:
        prefix = "Server error"
    elif status == TOO_MANY_REQUESTS:
        prefix = "Rate limited"
    else:
        return response

    logger.debug(f"{method} request to {url} returned status {status}")
    raise HttpStatusError(
        f"{prefix}: {status} {response.reason_phrase}".rstrip(),
        status=status,
        reason_phrase=response.reason_phrase,
        method=method,
        url=url,
        response=response,
    )


async def fetch_with_retry(
    url: str,
    method: str = "GET",
    *,
    client: httpx.AsyncClient | None = None,
    config: RetryConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    max_attempts: int | None = None,
    initial_delay: float | None = None,
    max_delay: float | None = None,
    backoff_multiplier: float | None = None,
    jitter_factor: float | None = None,
    should_retry: Callable[[BaseException], bool] | None = None,
    on_retry: Callable[[int, BaseException], None] | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request with automatic retry logic.

    Each attempt sends the request with ``client.request(method, url,
    **kwargs)``. Rate-limited (429) and server error (5xx) responses are
    promoted to ``HttpStatusError`` and retried. If the last attempt is
    still rate-limited, its 429 response is returned rather than raised.
    Every other non-5xx response, including 4xx errors such as 404, is
    returned to the caller as-is.

    Errors that are neither 429 nor 5xx are classified by
    ``should_retry`` when provided, or by the default predicate otherwise,
    which retries network failures and timeouts.

    Args:
        url: The URL to send the request to.
        method: The HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS).
        client: An optional httpx.AsyncClient object to use for making
            requests. If None, a new client is created and closed after use.
        config: An optional RetryConfig used as the base configuration.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.
        max_attempts: Maximum number of attempts, including the first one.
            Overrides config.max_attempts if provided.
        initial_delay: Delay in seconds before the first retry.
            Overrides config.initial_delay if provided.
        max_delay: Cap in seconds for a single backoff delay.
            Overrides config.max_delay if provided.
        backoff_multiplier: Growth factor of the delay.
            Overrides config.backoff_multiplier if provided.
        jitter_factor: Fraction of the delay used as jitter upper bound.
            Overrides config.jitter_factor if provided.
        should_retry: Predicate consulted for errors that are neither
            rate-limited nor server errors. Overrides config.should_retry
            if provided.
        on_retry: Observer called with ``(attempt, error)`` before each
            retry delay. Overrides config.on_retry if provided.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient.request()`` (e.g. ``headers``, ``json``).

    Returns:
        The first response that was not promoted to an error, or the
        429 response of the last attempt.

    Raises:
        HttpStatusError: If the last attempt returned a 5xx response.
        httpx.HTTPError: If the request failed at the transport level and
            was not retried, or failed on the last attempt.
        ValueError: If timeout or the retry configuration is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import fetch_with_retry
        >>> async def example():
        ...     response = await fetch_with_retry(
        ...         "https://api.example.com/verses/john-3-16",
        ...         headers={"Accept": "application/json"},
        ...         max_attempts=5,
        ...     )
        ...     return response.status_code
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    validate_timeout(timeout)

    base_config = config if config is not None else RetryConfig()
    fallback = should_retry if should_retry is not None else base_config.should_retry

    def should_retry_http(error: BaseException) -> bool:
        return is_retryable_http_error(error, fallback=fallback)

    effective_config = base_config.merge(
        max_attempts=max_attempts,
        initial_delay=initial_delay,
        max_delay=max_delay,
        backoff_multiplier=backoff_multiplier,
        jitter_factor=jitter_factor,
        should_retry=should_retry_http,
        on_retry=on_retry,
    )

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=timeout)

    async def send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        return raise_for_retryable_status(response, method=method, url=url)

    try:
        return await with_retry(send, config=effective_config)
    except HttpStatusError as exc:
        # Rate limiting is only promoted to drive retries
        if exc.status == TOO_MANY_REQUESTS and exc.response is not None:
            return exc.response
        raise
    finally:
        if owns_client:
            await client.aclose()
