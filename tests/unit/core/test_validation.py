from __future__ import annotations

import httpx
import pytest

from aretry.core import validate_retry_params, validate_timeout

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 10, 30.0, httpx.Timeout(5.0)])
def test_validate_timeout_valid(timeout: float | httpx.Timeout) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_retry_params     #
###########################################


def test_validate_retry_params_valid() -> None:
    validate_retry_params(
        max_attempts=1, initial_delay=0.0, max_delay=0.1, backoff_multiplier=1.0, jitter_factor=0.0
    )


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"max_attempts": 0}, r"max_attempts must be >= 1, got 0"),
        ({"max_attempts": 2.5}, r"max_attempts must be an integer, got 2.5"),
        ({"max_attempts": True}, r"max_attempts must be an integer, got True"),
        ({"max_attempts": "3"}, r"max_attempts must be an integer, got '3'"),
        ({"max_attempts": 3, "initial_delay": -1}, r"initial_delay must be >= 0, got -1"),
        ({"max_attempts": 3, "max_delay": -2}, r"max_delay must be > 0, got -2"),
        ({"max_attempts": 3, "backoff_multiplier": -1}, r"backoff_multiplier must be > 0"),
        ({"max_attempts": 3, "jitter_factor": -0.3}, r"jitter_factor must be >= 0"),
    ],
)
def test_validate_retry_params_invalid(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        validate_retry_params(**kwargs)
