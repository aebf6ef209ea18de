"""
Command-line front end for the weather widget.

Run with a city for a single lookup, or without one for an interactive
prompt: python -m weather_widget.cli [CITY]
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, List, Optional

from weather_widget.config import (
    WidgetConfig,
    configure_logging,
    load_api_key,
    resolve_log_level,
)
from weather_widget.controller import PresentationController
from weather_widget.external_api import OpenWeatherMapClient
from weather_widget.models import Failure, PresentationCategory, QueryState, Success
from weather_widget.presentation import background_for
from weather_widget.view import render_state

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("quit", "exit")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Look up current weather for a city")
    parser.add_argument("city", nargs="?", help="City name (omit for interactive mode)")
    parser.add_argument(
        "--api-key",
        help=f"OpenWeatherMap API key (overrides {WidgetConfig.API_KEY_ENV_VAR})",
    )
    parser.add_argument(
        "--log-level",
        default=resolve_log_level(),
        choices=WidgetConfig.LOG_LEVELS,
        type=str.upper,
        help="Logging level",
    )
    return parser.parse_args(argv)


def build_controller(
    api_key: str, output: Callable[[str], None] = print
) -> PresentationController:
    """Wire a controller whose state and background changes go to ``output``."""

    def show_state(state: QueryState) -> None:
        text = render_state(state)
        if text:
            output(text)

    def show_background(category: PresentationCategory) -> None:
        style = background_for(category)
        logger.info(
            "Background changed to %s (video: %s)", style.css_class, style.video
        )

    return PresentationController(
        OpenWeatherMapClient(api_key),
        on_state_change=show_state,
        on_category_change=show_background,
    )


async def run_interactive(
    controller: PresentationController,
    read_line: Callable[[str], str] = input,
) -> None:
    """Prompt for cities until EOF or an exit command."""
    while True:
        try:
            city = await asyncio.to_thread(read_line, "Enter city name: ")
        except EOFError:
            break
        if city.strip().lower() in EXIT_COMMANDS:
            break
        await controller.submit(city)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    api_key = args.api_key or load_api_key()
    controller = build_controller(api_key)

    if args.city is None:
        asyncio.run(run_interactive(controller))
        return 0

    state = asyncio.run(controller.submit(args.city))
    if isinstance(state, Success):
        return 0
    if isinstance(state, Failure):
        return 1
    print("Please enter a city name.", file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main())
