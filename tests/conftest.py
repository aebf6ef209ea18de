"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test_openweather_api_key_123"


@pytest.fixture
def mock_openweather_response() -> dict:
    """Mock OpenWeatherMap API response (metric units)."""
    return {
        "name": "London",
        "main": {"temp": 14.2, "feels_like": 13.4, "humidity": 72, "pressure": 1013},
        "weather": [{"main": "Rain", "description": "light rain", "icon": "10d"}],
        "wind": {"speed": 4.1},
        "dt": 1640995200,
        "sys": {"country": "GB"},
    }


def make_session(status: int = 200, payload=None, error: Exception = None) -> MagicMock:
    """
    Build a mock aiohttp session whose ``get`` yields one response.

    If ``error`` is given, entering the request context raises it instead.
    """
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)

    request_ctx = MagicMock()
    if error is not None:
        request_ctx.__aenter__ = AsyncMock(side_effect=error)
    else:
        request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=request_ctx)
    return session


@pytest.fixture
def session_factory():
    """Factory fixture for mock aiohttp sessions."""
    return make_session
