"""
External API client for OpenWeatherMap service.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

import aiohttp
from pydantic import BaseModel, Field, ValidationError

from weather_widget.config import ExternalAPIConfig
from weather_widget.models import ErrorKind, WeatherObservation

logger = logging.getLogger(__name__)


class WeatherAPIError(Exception):
    """Base exception for weather lookup failures."""

    kind: ErrorKind = ErrorKind.PROVIDER

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(WeatherAPIError):
    """The API key is missing."""

    kind = ErrorKind.CONFIGURATION


class InvalidQueryError(WeatherAPIError):
    """The city name is empty."""

    kind = ErrorKind.INVALID_QUERY


class NotFoundError(WeatherAPIError):
    """The provider does not know the city."""

    kind = ErrorKind.NOT_FOUND


class ProviderError(WeatherAPIError):
    """The provider answered with a non-success status."""

    kind = ErrorKind.PROVIDER


class NetworkError(WeatherAPIError):
    """No response was received."""

    kind = ErrorKind.NETWORK


class MalformedResponseError(WeatherAPIError):
    """The provider's payload is missing required fields."""

    kind = ErrorKind.MALFORMED_RESPONSE


class _Sys(BaseModel):
    country: str


class _Main(BaseModel):
    temp: float
    feels_like: float
    humidity: int


class _Condition(BaseModel):
    main: str
    description: str
    icon: str


class _Wind(BaseModel):
    speed: float


class OpenWeatherMapResponse(BaseModel):
    """Model for OpenWeatherMap current weather response."""

    name: str = Field(..., description="City name")
    sys: _Sys = Field(..., description="Country information")
    main: _Main = Field(..., description="Main weather data")
    weather: List[_Condition] = Field(
        ..., min_length=1, description="Weather conditions"
    )
    wind: _Wind = Field(..., description="Wind data")

    def to_observation(self) -> WeatherObservation:
        """Convert the provider payload to our internal format."""
        condition = self.weather[0]
        return WeatherObservation(
            name=self.name,
            country=self.sys.country,
            temperature=self.main.temp,
            feels_like=self.main.feels_like,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            condition=condition.main,
            description=condition.description,
            icon=condition.icon,
        )


class OpenWeatherMapClient:
    """
    Asynchronous client for the OpenWeatherMap current weather API.

    Each call makes exactly one request; failures are raised immediately as
    ``WeatherAPIError`` subclasses and never retried.
    """

    def __init__(
        self,
        api_key: Optional[str],
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the OpenWeatherMap client.

        Args:
            api_key: OpenWeatherMap API key
            timeout: Request timeout in seconds (defaults to config value)
            base_url: API base URL (defaults to config value)
            session: Shared aiohttp session; the client never closes it
        """
        self.api_key = (api_key or "").strip()
        self.base_url = (base_url or ExternalAPIConfig.OPENWEATHER_BASE_URL).rstrip(
            "/"
        )
        self.timeout = aiohttp.ClientTimeout(
            total=timeout or ExternalAPIConfig.OPENWEATHER_TIMEOUT
        )
        self._session = session

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            yield session

    async def get_weather(self, city: str) -> WeatherObservation:
        """
        Get current weather for a single city.

        Args:
            city: Name of the city

        Returns:
            WeatherObservation: Normalized weather data

        Raises:
            ConfigurationError: If no API key is configured
            InvalidQueryError: If the city name is empty
            NotFoundError: If the provider answers 404
            ProviderError: For any other non-success status
            NetworkError: If no response is received
            MalformedResponseError: If required fields are missing
        """
        if not self.api_key:
            logger.error("OpenWeatherMap API key is not configured")
            raise ConfigurationError("Weather API key is missing")

        query = (city or "").strip()
        if not query:
            raise InvalidQueryError("City name cannot be empty")

        params = {
            "q": query,
            "appid": self.api_key,
            "units": ExternalAPIConfig.UNITS,
        }
        url = f"{self.base_url}/weather"

        try:
            async with self._session_scope() as session:
                logger.debug("Requesting weather data for city: %s", query)

                async with session.get(
                    url, params=params, timeout=self.timeout
                ) as response:
                    status = response.status
                    payload = await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            reason = str(e) or e.__class__.__name__
            logger.error("Network error fetching weather for %s: %s", query, reason)
            raise NetworkError(f"Network error: {reason}") from e

        if status == 200:
            logger.debug("Successfully fetched weather for %s", query)
            return self._parse_observation(query, payload)

        if status == 404:
            error_msg = f"City '{query}' not found. Please check the city name."
            logger.warning(error_msg)
            raise NotFoundError(error_msg, status_code=404)

        if status == 401:
            logger.error("Invalid API key")
            raise ProviderError("Invalid API key", status_code=401)

        provider_msg = (
            payload.get("message") if isinstance(payload, dict) else None
        ) or "Unknown API error"
        logger.error(
            "API error for %s: %s (status: %d)",
            query,
            provider_msg,
            status,
        )
        raise ProviderError(
            "Unable to fetch weather data. Please try again later.",
            status_code=status,
        )

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError:
            return None

    @staticmethod
    def _parse_observation(city: str, payload: Any) -> WeatherObservation:
        if not isinstance(payload, dict):
            logger.error("Non-JSON weather payload for %s", city)
            raise MalformedResponseError(
                "Received an unexpected response from the weather provider.",
                status_code=200,
            )
        try:
            return OpenWeatherMapResponse.model_validate(payload).to_observation()
        except ValidationError as e:
            logger.error(
                "Weather payload for %s is missing required fields: %s",
                city,
                e.errors(include_url=False),
            )
            raise MalformedResponseError(
                "Received an unexpected response from the weather provider.",
                status_code=200,
            ) from e
