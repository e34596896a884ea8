r"""Utility functions for delay calculation and structured logging."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "calculate_sleep_time",
    "clear_correlation_id",
    "get_correlation_id",
    "log_retry_event",
    "log_structured",
    "set_correlation_id",
]

from aretry.utils.sleep import calculate_sleep_time
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_retry_event,
    log_structured,
    set_correlation_id,
)
