"""
Background styles for each presentation category.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from weather_widget.models import PresentationCategory


class BackgroundStyle(BaseModel):
    """CSS class and optional looping video shown behind the widget."""

    model_config = ConfigDict(frozen=True)

    css_class: str
    video: Optional[str] = None


BACKGROUNDS: Dict[PresentationCategory, BackgroundStyle] = {
    PresentationCategory.CLEAR: BackgroundStyle(
        css_class="clear", video="videos/clear.mp4"
    ),
    PresentationCategory.CLOUDY: BackgroundStyle(
        css_class="cloudy", video="videos/cloudy.mp4"
    ),
    PresentationCategory.RAINY: BackgroundStyle(
        css_class="rainy", video="videos/rainy.mp4"
    ),
    PresentationCategory.SNOWY: BackgroundStyle(
        css_class="snowy", video="videos/snowy.mp4"
    ),
    PresentationCategory.THUNDERSTORM: BackgroundStyle(
        css_class="thunderstorm", video="videos/thunderstorm.mp4"
    ),
    PresentationCategory.MISTY: BackgroundStyle(
        css_class="misty", video="videos/misty.mp4"
    ),
    PresentationCategory.DEFAULT: BackgroundStyle(css_class="default"),
}


def background_for(category: PresentationCategory) -> BackgroundStyle:
    """Return the background style for a presentation category."""
    return BACKGROUNDS[PresentationCategory(category)]
