r"""Unit tests for the RetryConfig dataclass."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.backoff import ExponentialBackoff
from aretry.core import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    RetryConfig,
)
from aretry.predicates import is_retryable_error

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test that RetryConfig uses correct default values."""
    config = RetryConfig()

    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS == 3
    assert config.initial_delay == DEFAULT_INITIAL_DELAY == 1.0
    assert config.max_delay == DEFAULT_MAX_DELAY == 10.0
    assert config.backoff_multiplier == DEFAULT_BACKOFF_MULTIPLIER == 2.0
    assert config.jitter_factor == DEFAULT_JITTER_FACTOR == 0.3
    assert config.should_retry is is_retryable_error
    assert config.on_retry is None


@pytest.mark.parametrize("max_attempts", [1, 5, 10])
def test_retry_config_max_attempts(max_attempts: int) -> None:
    assert RetryConfig(max_attempts=max_attempts).max_attempts == max_attempts


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_retry_config_invalid_max_attempts(max_attempts: int) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryConfig(max_attempts=max_attempts)


def test_retry_config_invalid_initial_delay() -> None:
    with pytest.raises(ValueError, match=r"initial_delay must be >= 0"):
        RetryConfig(initial_delay=-0.5)


def test_retry_config_invalid_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be > 0"):
        RetryConfig(max_delay=0)


def test_retry_config_invalid_backoff_multiplier() -> None:
    with pytest.raises(ValueError, match=r"backoff_multiplier must be > 0"):
        RetryConfig(backoff_multiplier=0)


def test_retry_config_invalid_jitter_factor() -> None:
    with pytest.raises(ValueError, match=r"jitter_factor must be >= 0"):
        RetryConfig(jitter_factor=-0.1)


def test_retry_config_merge_partial_override_keeps_other_fields() -> None:
    """Test that a partial override never discards unrelated values."""
    on_retry = Mock()
    config = RetryConfig(max_attempts=5, initial_delay=0.5, on_retry=on_retry)

    merged = config.merge(max_delay=2.0)

    assert merged.max_attempts == 5
    assert merged.initial_delay == 0.5
    assert merged.max_delay == 2.0
    assert merged.backoff_multiplier == DEFAULT_BACKOFF_MULTIPLIER
    assert merged.should_retry is is_retryable_error
    assert merged.on_retry is on_retry


def test_retry_config_merge_ignores_none() -> None:
    config = RetryConfig(max_attempts=4)
    merged = config.merge(max_attempts=None, should_retry=None)
    assert merged.max_attempts == 4
    assert merged.should_retry is is_retryable_error


def test_retry_config_merge_does_not_mutate_original() -> None:
    config = RetryConfig()
    merged = config.merge(max_attempts=7, should_retry=bool)

    assert merged is not config
    assert merged.max_attempts == 7
    assert merged.should_retry is bool
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert config.should_retry is is_retryable_error


def test_retry_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryConfig().merge(max_attempts=0)


def test_retry_config_merge_unknown_field() -> None:
    with pytest.raises(TypeError):
        RetryConfig().merge(retries=3)


def test_retry_config_backoff_strategy() -> None:
    strategy = RetryConfig(initial_delay=0.5, backoff_multiplier=3.0, max_delay=4.0).backoff_strategy
    assert isinstance(strategy, ExponentialBackoff)
    assert strategy.initial_delay == 0.5
    assert strategy.multiplier == 3.0
    assert strategy.max_delay == 4.0


def test_retry_config_to_dict() -> None:
    assert RetryConfig(max_attempts=5).to_dict() == {
        "max_attempts": 5,
        "initial_delay": 1.0,
        "max_delay": 10.0,
        "backoff_multiplier": 2.0,
        "jitter_factor": 0.3,
        "should_retry": is_retryable_error,
        "on_retry": None,
    }
