r"""Contains the adapter turning coroutine functions into retrying ones."""

from __future__ import annotations

__all__ = ["make_retryable"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.core.config import RetryConfig
from aretry.executor import with_retry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


def make_retryable(
    func: Callable[..., Awaitable[T]],
    *,
    config: RetryConfig | None = None,
    **overrides: Any,
) -> Callable[..., Awaitable[T]]:
    """Create a retrying version of a coroutine function.

    The returned function accepts the same arguments as ``func``. Each
    call captures its arguments and runs ``func(*args, **kwargs)`` through
    ``with_retry``, so every attempt receives the same arguments.

    Args:
        func: The coroutine function to wrap.
        config: An optional RetryConfig used as the base configuration.
        **overrides: Retry parameters overriding the config, with the same
            names as the keyword arguments of ``with_retry`` (e.g.
            ``max_attempts``, ``initial_delay``, ``should_retry``).

    Returns:
        A coroutine function with the same signature as ``func``.

    Raises:
        TypeError: If an override is not a retry parameter.
        ValueError: If the resulting configuration is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import make_retryable
        >>> async def get_verse(reference, translation="KJV"):
        ...     return f"{reference} ({translation})"
        ...
        >>> retryable_get_verse = make_retryable(get_verse, max_attempts=5)
        >>> asyncio.run(retryable_get_verse("John 3:16"))
        'John 3:16 (KJV)'

        ```
    """
    effective_config = (config if config is not None else RetryConfig()).merge(**overrides)

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await with_retry(lambda: func(*args, **kwargs), config=effective_config)

    return wrapper
