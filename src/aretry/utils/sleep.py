r"""Sleep time calculation utilities.

This module provides the function computing the delay to wait between
two attempts, combining a backoff strategy with random jitter.
"""

from __future__ import annotations

__all__ = ["calculate_sleep_time"]

import logging
import random
from typing import TYPE_CHECKING

from aretry.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def calculate_sleep_time(
    attempt: int,
    backoff_strategy: BaseBackoffStrategy | None = None,
    jitter_factor: float = 0.0,
) -> float:
    """Calculate sleep time for retry with backoff strategy and jitter.

    The sleep time is calculated as follows:
    1. base_sleep_time = backoff_strategy.calculate(attempt)
    2. jitter = random.random() * jitter_factor * base_sleep_time
    3. total_sleep_time = base_sleep_time + jitter

    The jitter is drawn freshly on every call and always lies in
    ``[0, jitter_factor * base_sleep_time)``.

    Args:
        attempt: The number of the attempt that just failed (1-indexed).
        backoff_strategy: BaseBackoffStrategy instance or None.
            Defaults to ``ExponentialBackoff()``.
        jitter_factor: Factor for adding random jitter to backoff delays.
            Set to 0 to disable jitter.

    Returns:
        The calculated sleep time in seconds, including any jitter applied.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> from aretry.utils.sleep import calculate_sleep_time
        >>> calculate_sleep_time(attempt=1, jitter_factor=0.0)
        1.0
        >>> calculate_sleep_time(attempt=3, jitter_factor=0.0)
        4.0
        >>> calculate_sleep_time(
        ...     attempt=3, backoff_strategy=ExponentialBackoff(max_delay=3.0)
        ... )
        3.0

        ```
    """
    if backoff_strategy is None:
        backoff_strategy = ExponentialBackoff()
    sleep_time = backoff_strategy.calculate(attempt)

    if jitter_factor > 0:
        jitter = random.random() * jitter_factor * sleep_time  # noqa: S311
        total_sleep_time = sleep_time + jitter
        logger.debug(
            f"Waiting {total_sleep_time:.2f}s before retry (base={sleep_time:.2f}s, jitter={jitter:.2f}s)"
        )
    else:
        total_sleep_time = sleep_time
        logger.debug(f"Waiting {total_sleep_time:.2f}s before retry")

    return total_sleep_time
