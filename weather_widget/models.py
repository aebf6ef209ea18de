"""
Pydantic models for weather observations and widget query state.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class PresentationCategory(str, Enum):
    """Closed set of background categories the widget can show."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    THUNDERSTORM = "thunderstorm"
    MISTY = "misty"
    DEFAULT = "default"


class ErrorKind(str, Enum):
    """Failure categories surfaced by the weather client."""

    CONFIGURATION = "configuration"
    INVALID_QUERY = "invalid_query"
    NOT_FOUND = "not_found"
    PROVIDER = "provider"
    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"


class WeatherObservation(BaseModel):
    """Normalized current conditions for one city."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    condition: str
    description: str
    icon: str


class Idle(BaseModel):
    """No query has been issued yet."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A request for ``city`` is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    city: str


class Success(BaseModel):
    """The latest query resolved with an observation."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    observation: WeatherObservation
    category: PresentationCategory


class Failure(BaseModel):
    """The latest query failed; ``message`` is meant for the user."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    error: ErrorKind
    message: str
    city: Optional[str] = None


QueryState = Union[Idle, Loading, Success, Failure]
