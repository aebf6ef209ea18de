"""
Display values for the widget's query state.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from weather_widget.config import ExternalAPIConfig
from weather_widget.models import Failure, Loading, QueryState, Success, WeatherObservation

LOADING_TEXT = "Loading weather data..."


class WeatherDetails(BaseModel):
    """Formatted weather details for one observation."""

    model_config = ConfigDict(frozen=True)

    heading: str
    temperature: str
    icon_url: str
    weather: str
    description: str
    feels_like: str
    humidity: str
    wind_speed: str

    @classmethod
    def from_observation(cls, observation: WeatherObservation) -> "WeatherDetails":
        return cls(
            heading=f"{observation.name}, {observation.country}",
            temperature=f"{round_half_up(observation.temperature)}°C",
            icon_url=icon_url(observation.icon),
            weather=observation.condition,
            description=observation.description,
            feels_like=f"{round_half_up(observation.feels_like)}°C",
            humidity=f"{observation.humidity}%",
            wind_speed=f"{observation.wind_speed:g} m/s",
        )

    def lines(self) -> List[str]:
        return [
            self.heading,
            self.temperature,
            f"Weather: {self.weather}",
            f"Description: {self.description}",
            f"Feels Like: {self.feels_like}",
            f"Humidity: {self.humidity}",
            f"Wind Speed: {self.wind_speed}",
        ]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, -2.5 -> -2."""
    return math.floor(value + 0.5)


def icon_url(icon: str) -> str:
    """Return the provider's 2x icon image URL."""
    return ExternalAPIConfig.ICON_URL_TEMPLATE.format(icon=icon)


def render_state(state: QueryState) -> Optional[str]:
    """
    Render a query state as plain text.

    Returns None for the idle state, which has nothing to show.
    """
    if isinstance(state, Loading):
        return LOADING_TEXT
    if isinstance(state, Failure):
        return state.message
    if isinstance(state, Success):
        return "\n".join(WeatherDetails.from_observation(state.observation).lines())
    return None
