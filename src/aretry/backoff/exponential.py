r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as:
    ``min(initial_delay * multiplier ** (attempt - 1), max_delay)``.

    Args:
        initial_delay: The delay in seconds after the first failed attempt.
        multiplier: Growth factor applied after each further failure.
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial_delay=1.0, max_delay=10.0)
        >>> backoff.calculate(1)
        1.0
        >>> backoff.calculate(2)
        2.0
        >>> backoff.calculate(3)
        4.0
        >>> backoff.calculate(10)  # Would be 512.0, but capped
        10.0

        ```
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        multiplier: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        if initial_delay < 0:
            msg = f"initial_delay must be non-negative, got {initial_delay}"
            raise ValueError(msg)
        if multiplier <= 0:
            msg = f"multiplier must be positive, got {multiplier}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.initial_delay = initial_delay
        self.multiplier = multiplier
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay}, "
            f"multiplier={self.multiplier}, max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).

        Returns:
            The calculated delay, capped at max_delay if set.
        """
        try:
            delay = self.initial_delay * (self.multiplier ** (attempt - 1))
        except OverflowError:
            if self.max_delay is None:
                raise
            return self.max_delay
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
