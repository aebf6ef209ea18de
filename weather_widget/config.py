"""
Configuration constants for the weather widget.
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv


class ExternalAPIConfig:
    """External API configuration"""

    OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
    OPENWEATHER_TIMEOUT = 10
    UNITS = "metric"
    ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"


class WidgetConfig:
    """Widget-specific configuration"""

    API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_api_key(env_file: Optional[str] = None) -> str:
    """
    Read the OpenWeatherMap API key from the environment.

    A ``.env`` file is loaded first if present, searched for from the
    current working directory unless ``env_file`` is given. Variables
    already set in the process environment take precedence.

    Args:
        env_file: Optional path to a dotenv file

    Returns:
        str: The stripped API key, or an empty string when it is not set
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    return os.getenv(WidgetConfig.API_KEY_ENV_VAR, "").strip()


def resolve_log_level(level: Optional[str] = None) -> str:
    """Return a known level name, falling back to INFO."""
    name = (level or WidgetConfig.LOG_LEVEL or "").strip().upper()
    if name not in WidgetConfig.LOG_LEVELS:
        return "INFO"
    return name


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the widget."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format=WidgetConfig.LOG_FORMAT,
    )
