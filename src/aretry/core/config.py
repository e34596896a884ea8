r"""Configuration dataclass and defaults for the retry executor.

This module provides the default retry constants and a dataclass-based
configuration object shared by ``with_retry``, ``fetch_with_retry`` and
``make_retryable``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_JITTER_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_TIMEOUT",
    "RetryConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff.exponential import ExponentialBackoff
from aretry.core.validation import validate_retry_params
from aretry.predicates import is_retryable_error

if TYPE_CHECKING:
    from collections.abc import Callable


# Default timeout in seconds for HTTP requests issued by fetch_with_retry
DEFAULT_TIMEOUT = 10.0

# Total number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Delay before the first retry, in seconds
DEFAULT_INITIAL_DELAY = 1.0

# Upper bound of a single backoff delay (before jitter), in seconds
DEFAULT_MAX_DELAY = 10.0

# Delay before retry n+1 = initial_delay * backoff_multiplier ** (n - 1)
# With the defaults: 1s, 2s, 4s, 8s, 10s, 10s, ...
DEFAULT_BACKOFF_MULTIPLIER = 2.0

# Jitter is drawn uniformly from [0, jitter_factor * delay)
DEFAULT_JITTER_FACTOR = 0.3


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    A ``RetryConfig`` is treated as immutable: ``merge`` always returns a
    new instance and never modifies the receiver.

    Args:
        max_attempts: Maximum number of attempts, including the first one.
            Must be >= 1.
        initial_delay: Delay in seconds before the first retry. Must be >= 0.
        max_delay: Cap in seconds for a single backoff delay. Must be > 0.
        backoff_multiplier: Growth factor applied to the delay after each
            failed attempt. Must be > 0.
        jitter_factor: Fraction of the delay used as the upper bound of the
            random jitter added to it. Must be >= 0.
        should_retry: Predicate deciding whether an error is worth another
            attempt. Defaults to ``is_retryable_error``.
        on_retry: Optional observer called with ``(attempt, error)`` right
            before sleeping ahead of the next attempt.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_attempts
        3
        >>> merged = config.merge(max_attempts=5)
        >>> merged.max_attempts
        5
        >>> merged.initial_delay
        1.0
        >>> config.max_attempts  # Original unchanged
        3

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER
    jitter_factor: float = DEFAULT_JITTER_FACTOR
    should_retry: Callable[[BaseException], bool] = field(default=is_retryable_error)
    on_retry: Callable[[int, BaseException], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
            backoff_multiplier=self.backoff_multiplier,
            jitter_factor=self.jitter_factor,
        )

    @property
    def backoff_strategy(self) -> ExponentialBackoff:
        """The exponential backoff strategy described by this config."""
        return ExponentialBackoff(
            initial_delay=self.initial_delay,
            multiplier=self.backoff_multiplier,
            max_delay=self.max_delay,
        )

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so a partial override
        keeps every other field of the current config.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryConfig
            >>> config = RetryConfig(max_attempts=4)
            >>> config.merge(initial_delay=0.5, max_attempts=None).max_attempts
            4

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with retry configuration parameters.
        """
        return {
            "max_attempts": self.max_attempts,
            "initial_delay": self.initial_delay,
            "max_delay": self.max_delay,
            "backoff_multiplier": self.backoff_multiplier,
            "jitter_factor": self.jitter_factor,
            "should_retry": self.should_retry,
            "on_retry": self.on_retry,
        }
