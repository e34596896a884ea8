r"""Contains the asynchronous retry executor.

``with_retry`` runs a zero-argument coroutine function until it succeeds,
the retry predicate rejects the error, or the maximum number of attempts
is reached. It is a plain function: every call owns its own attempt
counter and state, so concurrent calls never interfere.
"""

from __future__ import annotations

__all__ = ["with_retry"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import RetryConfig
from aretry.utils.sleep import calculate_sleep_time
from aretry.utils.structured_logging import log_retry_event

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    config: RetryConfig | None = None,
    max_attempts: int | None = None,
    initial_delay: float | None = None,
    max_delay: float | None = None,
    backoff_multiplier: float | None = None,
    jitter_factor: float | None = None,
    should_retry: Callable[[BaseException], bool] | None = None,
    on_retry: Callable[[int, BaseException], None] | None = None,
) -> T:
    """Await an operation with automatic retry and exponential backoff.

    The operation is attempted up to ``max_attempts`` times. After a
    failed attempt (other than the last one), ``should_retry`` decides
    whether to try again. If it does, the executor waits
    ``min(initial_delay * backoff_multiplier ** (attempt - 1), max_delay)``
    seconds plus a random jitter of up to ``jitter_factor`` times that
    delay, then calls the operation again.

    The first attempt is never gated by ``should_retry``, and the
    predicate is not consulted after the last attempt. A successful
    attempt returns immediately, without any delay.

    Errors are never wrapped: a rejected error is re-raised as soon as
    the predicate rejects it, and when all attempts fail the error of the
    last attempt is re-raised.

    Exceptions raised by ``on_retry`` are not caught: they propagate to
    the caller and end the retry sequence. Cancelling the enclosing task
    cancels the pending attempt or sleep, since ``asyncio.CancelledError``
    is never caught.

    Args:
        operation: Zero-argument function returning an awaitable, called
            once per attempt.
        config: An optional RetryConfig used as the base configuration.
            Defaults to ``RetryConfig()``.
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
        should_retry: Predicate deciding whether an error is retryable.
            Overrides config.should_retry if provided.
        on_retry: Observer called with ``(attempt, error)`` before each
            retry delay. Overrides config.on_retry if provided.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error rejected by ``should_retry``, or the error of
            the last attempt when all attempts failed.
        ValueError: If the effective configuration is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import with_retry
        >>> async def load_verse():
        ...     return "John 3:16"
        ...
        >>> asyncio.run(with_retry(load_verse, max_attempts=5, initial_delay=0.5))
        'John 3:16'

        ```
    """
    effective_config = (config if config is not None else RetryConfig()).merge(
        max_attempts=max_attempts,
        initial_delay=initial_delay,
        max_delay=max_delay,
        backoff_multiplier=backoff_multiplier,
        jitter_factor=jitter_factor,
        should_retry=should_retry,
        on_retry=on_retry,
    )
    backoff_strategy = effective_config.backoff_strategy
    total = effective_config.max_attempts
    last_error: Exception | None = None

    for attempt in range(1, total + 1):
        try:
            return await operation()
        except Exception as exc:
            last_error = exc

            if attempt == total:
                break

            if not effective_config.should_retry(exc):
                logger.debug(
                    f"Attempt {attempt}/{total} failed with non-retryable "
                    f"{type(exc).__name__}: {exc}"
                )
                raise

            sleep_time = calculate_sleep_time(
                attempt=attempt,
                backoff_strategy=backoff_strategy,
                jitter_factor=effective_config.jitter_factor,
            )
            log_retry_event(
                logger,
                logging.WARNING,
                f"Attempt {attempt}/{total} failed. Retrying in {sleep_time:.2f}s...",
                attempt=attempt,
                max_attempts=total,
                error=exc,
                delay=sleep_time,
            )
            if effective_config.on_retry is not None:
                effective_config.on_retry(attempt, exc)

        await asyncio.sleep(sleep_time)

    log_retry_event(
        logger,
        logging.ERROR,
        f"All {total} attempts failed. Giving up.",
        attempt=total,
        max_attempts=total,
        error=last_error,
    )
    raise last_error
