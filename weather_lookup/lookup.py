# ABOUTME: Terminal front end: looks a city up through the backend and renders the result.
# ABOUTME: Holds the lookup state (last city, snapshot, error) and the argparse entry point.

import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import BaseModel

from weather_lookup.api import ApiError, fetch_weather
from weather_lookup.config import backend_url
from weather_lookup.models import WeatherSnapshot
from weather_lookup.render import UIState, WeatherRenderer

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An unexpected error occurred. Please try again."


class AppState(BaseModel):
    """What the front end currently shows and what it searched for last."""

    ui_state: UIState = UIState.IDLE
    weather_data: WeatherSnapshot | None = None
    error_message: str | None = None
    last_searched_city: str | None = None


async def search_weather(
    city: str,
    client: httpx.AsyncClient,
    renderer: WeatherRenderer,
    state: AppState,
) -> AppState:
    """Run one lookup: show loading, fetch, then render either the data or the error."""
    state.last_searched_city = city
    state.ui_state = UIState.LOADING
    renderer.show_loading()

    try:
        data = await fetch_weather(client, city)
    except ApiError as e:
        state.error_message = e.message
    except Exception:
        logger.exception("Lookup for %r failed", city)
        state.error_message = GENERIC_ERROR
    else:
        state.weather_data = data
        state.ui_state = UIState.SUCCESS
        state.error_message = None
        renderer.show_weather_data(data)
        return state

    state.ui_state = UIState.ERROR
    state.weather_data = None
    renderer.show_error(state.error_message)
    return state


async def retry(client: httpx.AsyncClient, renderer: WeatherRenderer, state: AppState) -> AppState:
    """Repeat the last search, if there was one."""
    if state.last_searched_city:
        return await search_weather(state.last_searched_city, client, renderer, state)
    return state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather-lookup", description="Look up current weather and a 7-day forecast.")
    parser.add_argument("city", help='City name, e.g. "New York"')
    parser.add_argument("--backend-url", default=None, help="Backend base URL (default: $WEATHER_BACKEND_URL)")
    return parser


async def run(city: str, base_url: str) -> AppState:
    renderer = WeatherRenderer()
    async with httpx.AsyncClient(base_url=base_url) as client:
        return await search_weather(city, client, renderer, AppState())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.city.strip():
        print("Please enter a city name", file=sys.stderr)
        return 2
    state = asyncio.run(run(args.city, args.backend_url or backend_url()))
    return 0 if state.ui_state == UIState.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
