# ABOUTME: ASGI entry point for the weather lookup backend.
# ABOUTME: Wires settings, cache, upstream client and app together and serves them with uvicorn.

import logging
import sys
from contextlib import asynccontextmanager

import httpx
import uvicorn

from weather_lookup.app import create_app
from weather_lookup.cache import TTLCache
from weather_lookup.config import ConfigError, Settings, load_settings
from weather_lookup.models import WeatherSnapshot
from weather_lookup.weather_client import WeatherClient

logger = logging.getLogger(__name__)


def build_app(settings: Settings):
    """Create the app with its own HTTP client and cache, closing the client on shutdown."""
    http_client = httpx.AsyncClient()
    cache = TTLCache[WeatherSnapshot](ttl_ms=settings.cache_ttl_ms)
    weather_client = WeatherClient(settings.weather_api_key, http_client, cache)

    @asynccontextmanager
    async def lifespan(app):
        yield
        await http_client.aclose()

    return create_app(weather_client, lifespan=lifespan)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    base = f"http://{settings.host}:{settings.port}"
    logger.info("Backend server running at %s", base)
    logger.info("Health check: %s/health", base)
    logger.info("Weather API: %s/api/weather?city=Boston", base)

    uvicorn.run(build_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
