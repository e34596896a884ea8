r"""Parameter validation utilities for retry logic.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executor.
"""

from __future__ import annotations

__all__ = ["validate_retry_params", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_attempts: int,
    initial_delay: float = 0.0,
    max_delay: float = 1.0,
    backoff_multiplier: float = 1.0,
    jitter_factor: float = 0.0,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Maximum number of attempts, including the first one.
            Must be an integer >= 1.
        initial_delay: Delay in seconds before the first retry. Must be >= 0.
        max_delay: Cap in seconds for a single backoff delay. Must be > 0.
        backoff_multiplier: Growth factor applied to the delay after each
            failed attempt. Must be > 0.
        jitter_factor: Fraction of the delay used as the upper bound of the
            random jitter. Must be >= 0.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3)
        >>> validate_retry_params(max_attempts=3, initial_delay=1.0, max_delay=10.0)

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise ValueError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if initial_delay < 0:
        msg = f"initial_delay must be >= 0, got {initial_delay}"
        raise ValueError(msg)
    if max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)
    if backoff_multiplier <= 0:
        msg = f"backoff_multiplier must be > 0, got {backoff_multiplier}"
        raise ValueError(msg)
    if jitter_factor < 0:
        msg = f"jitter_factor must be >= 0, got {jitter_factor}"
        raise ValueError(msg)
