r"""Backoff strategies for retry delays."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.exponential import ExponentialBackoff
