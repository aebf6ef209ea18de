"""
Weather lookup widget: OpenWeatherMap client, condition classifier and
presentation controller.
"""

__version__ = "1.0.0"
