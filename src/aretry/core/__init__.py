r"""Core configuration and validation for the retry executor."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_JITTER_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_TIMEOUT",
    "RetryConfig",
    "validate_retry_params",
    "validate_timeout",
]

from aretry.core.config import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_TIMEOUT,
    RetryConfig,
)
from aretry.core.validation import validate_retry_params, validate_timeout
