r"""Structured logging utilities for retry diagnostics.

The executor reports every retry and every exhausted sequence through
the standard ``logging`` module. The records carry machine-readable
fields (``attempt``, ``max_attempts``, ``delay``, ``error_type``) that
are rendered as JSON when ``StructuredFormatter`` is installed.

Structured output is opt-in:

```python
import logging
from aretry.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())
logging.getLogger("aretry").addHandler(handler)
```

A correlation ID can be attached to all records emitted in the current
context (task or thread):

```python
from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

set_correlation_id("verse-lookup-42")
try:
    await with_retry(fetch_verse)
finally:
    clear_correlation_id()
```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_retry_event",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes present on every LogRecord; anything else was passed via ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The value is stored in a context variable, so concurrent tasks each
    see their own correlation ID.

    Args:
        correlation_id: The correlation ID to set (e.g., request ID, trace ID).

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("request-456")
        >>> get_correlation_id()
        'request-456'
        >>> clear_correlation_id()

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as a single JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``correlation_id`` when one is set,
    ``exception`` when exception info is attached, and every field
    passed through the ``extra`` argument of the logging call.

    Values that are not JSON serializable are rendered with ``repr``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(
            {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES}
        )
        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the record creation time as ISO 8601 UTC with milliseconds."""
        if datefmt is not None:
            return time.strftime(datefmt, time.gmtime(record.created))
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the record.
    """
    logger.log(level, message, extra=extra)


def log_retry_event(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    attempt: int,
    max_attempts: int,
    error: BaseException,
    delay: float | None = None,
) -> None:
    """Log a retry lifecycle event with the standard retry fields.

    Args:
        logger: Logger to use.
        level: Log level, WARNING for a retry and ERROR for exhaustion.
        message: Human readable message.
        attempt: The number of the attempt that failed (1-indexed).
        max_attempts: The configured maximum number of attempts.
        error: The error raised by the failed attempt.
        delay: The delay in seconds before the next attempt, if any.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.utils.structured_logging import log_retry_event
        >>> log_retry_event(
        ...     logging.getLogger("demo"),
        ...     logging.WARNING,
        ...     "Attempt 1/3 failed",
        ...     attempt=1,
        ...     max_attempts=3,
        ...     error=TimeoutError("timeout"),
        ...     delay=1.2,
        ... )

        ```
    """
    fields: dict[str, Any] = {
        "attempt": attempt,
        "max_attempts": max_attempts,
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    if delay is not None:
        fields["delay"] = round(delay, 3)
    log_structured(logger, level, message, **fields)
