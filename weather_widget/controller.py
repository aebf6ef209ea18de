"""
Presentation controller driving the widget's query lifecycle.
"""

import logging
from typing import Callable, List, Optional

from weather_widget.classifier import classify
from weather_widget.external_api import OpenWeatherMapClient, WeatherAPIError
from weather_widget.models import (
    Failure,
    Idle,
    Loading,
    PresentationCategory,
    QueryState,
    Success,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[QueryState], None]
CategoryListener = Callable[[PresentationCategory], None]


class PresentationController:
    """
    Owns the widget's ``QueryState`` and moves it through
    idle -> loading -> success/failure for each submitted city.

    Submissions may overlap. Every submit takes the next request sequence
    number and only the resolution carrying the latest number is applied, so
    a slow response for an earlier city never overwrites a newer one.
    """

    def __init__(
        self,
        client: OpenWeatherMapClient,
        on_state_change: Optional[StateListener] = None,
        on_category_change: Optional[CategoryListener] = None,
    ):
        """
        Initialize the controller.

        Args:
            client: Weather client used for lookups
            on_state_change: Called with each newly applied state
            on_category_change: Called once whenever the category changes
        """
        self.client = client
        self._state: QueryState = Idle()
        self._category = PresentationCategory.DEFAULT
        self._sequence = 0
        self._state_listeners: List[StateListener] = []
        self._category_listeners: List[CategoryListener] = []

        if on_state_change:
            self.add_state_listener(on_state_change)
        if on_category_change:
            self.add_category_listener(on_category_change)

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def category(self) -> PresentationCategory:
        return self._category

    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def add_category_listener(self, listener: CategoryListener) -> None:
        self._category_listeners.append(listener)

    async def submit(self, city: str) -> QueryState:
        """
        Look up the weather for ``city``.

        Blank input is ignored and leaves the current state untouched.

        Args:
            city: Raw user input

        Returns:
            QueryState: The controller state after this submission resolves
        """
        query = (city or "").strip()
        if not query:
            logger.debug("Ignoring empty city submission")
            return self._state

        self._sequence += 1
        sequence = self._sequence
        self._set_state(Loading(city=query))

        try:
            observation = await self.client.get_weather(query)
        except WeatherAPIError as e:
            if self._is_stale(sequence, query):
                return self._state
            logger.warning("Weather lookup for %s failed: %s", query, e.message)
            self._set_category(PresentationCategory.DEFAULT)
            self._set_state(Failure(error=e.kind, message=e.message, city=query))
            return self._state

        if self._is_stale(sequence, query):
            return self._state

        category = classify(observation.condition, observation.description)
        logger.info(
            "Weather for %s: %s (%s) -> %s",
            observation.name,
            observation.condition,
            observation.description,
            category.value,
        )
        self._set_category(category)
        self._set_state(Success(observation=observation, category=category))
        return self._state

    def _is_stale(self, sequence: int, city: str) -> bool:
        if sequence == self._sequence:
            return False
        logger.debug(
            "Dropping stale response for %s (request %d, latest %d)",
            city,
            sequence,
            self._sequence,
        )
        return True

    def _set_state(self, state: QueryState) -> None:
        self._state = state
        for listener in self._state_listeners:
            listener(state)

    def _set_category(self, category: PresentationCategory) -> None:
        if category == self._category:
            return
        self._category = category
        for listener in self._category_listeners:
            listener(category)
