from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def no_jitter() -> Generator[Mock, None, None]:
    """Patch random.random so that the jitter is always zero."""
    with patch("random.random", return_value=0.0) as mock:
        yield mock


@pytest.fixture
def mock_async_client() -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(spec=httpx.AsyncClient, aclose=AsyncMock())


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing on_retry observers."""
    return Mock()


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Return a factory building real httpx responses bound to a request."""

    def factory(status_code: int, url: str = "https://api.example.com/verses") -> httpx.Response:
        return httpx.Response(status_code, request=httpx.Request("GET", url))

    return factory
