"""
Condition classifier mapping provider weather conditions to background
presentation categories.
"""

import logging
from typing import Optional, Tuple

from weather_widget.models import PresentationCategory

logger = logging.getLogger(__name__)

# Evaluated in order, first match wins.
CONDITION_GROUPS: Tuple[Tuple[Tuple[str, ...], PresentationCategory], ...] = (
    (("clear",), PresentationCategory.CLEAR),
    (("clouds",), PresentationCategory.CLOUDY),
    (("rain", "drizzle"), PresentationCategory.RAINY),
    (("snow", "sleet"), PresentationCategory.SNOWY),
    (("thunderstorm",), PresentationCategory.THUNDERSTORM),
    (
        (
            "mist",
            "smoke",
            "haze",
            "dust",
            "fog",
            "sand",
            "ash",
            "squall",
            "tornado",
        ),
        PresentationCategory.MISTY,
    ),
)


def classify(
    primary_category: Optional[str], description: Optional[str] = None
) -> PresentationCategory:
    """
    Classify a weather condition into a presentation category.

    Matching is case-insensitive substring containment on the provider's
    primary category (e.g. "Rain", "Clouds"). Anything that matches no group
    falls back to ``PresentationCategory.DEFAULT``.

    Args:
        primary_category: Provider's coarse condition, ``weather[0].main``
        description: Provider's free-text refinement, ``weather[0].description``

    Returns:
        PresentationCategory: Always one of the fixed categories
    """
    main = (primary_category or "").lower()

    for keywords, category in CONDITION_GROUPS:
        if any(keyword in main for keyword in keywords):
            return category

    logger.debug(
        "No presentation category for condition %r (%r)",
        primary_category,
        (description or "").lower(),
    )
    return PresentationCategory.DEFAULT
