# ABOUTME: Upstream client for the WeatherAPI.com forecast endpoint.
# ABOUTME: Serves from the TTL cache when possible and classifies provider failures into typed errors.

import logging

import httpx

from weather_lookup.cache import TTLCache
from weather_lookup.errors import NotFoundError, UpstreamError
from weather_lookup.models import WeatherSnapshot
from weather_lookup.normalizer import normalize_response

logger = logging.getLogger(__name__)

WEATHER_API_BASE = "https://api.weatherapi.com/v1"
FORECAST_URL = f"{WEATHER_API_BASE}/forecast.json"
FORECAST_DAYS = 7

# WeatherAPI.com error codes: 1006 no matching location, 2006 key missing,
# 2007 monthly quota exceeded, 2008 key disabled.
NO_MATCHING_LOCATION = 1006


class WeatherClient:
    """Resolves a city name to a WeatherSnapshot, consulting the cache first."""

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient,
        cache: TTLCache[WeatherSnapshot] | None = None,
    ):
        self.api_key = api_key
        self.http_client = http_client
        self.cache = cache if cache is not None else TTLCache[WeatherSnapshot]()

    async def get_weather(self, city: str) -> WeatherSnapshot:
        """Return the snapshot for city, fetching and caching it on a miss.

        Raises NotFoundError when the provider has no matching location and
        UpstreamError for every other provider or network failure.
        """
        cached = self.cache.get(city)
        if cached is not None:
            logger.debug("Cache hit for %r", city)
            return cached

        logger.debug("Cache miss for %r, fetching from provider", city)
        try:
            resp = await self.http_client.get(
                FORECAST_URL,
                params={
                    "key": self.api_key,
                    "q": city,
                    "days": FORECAST_DAYS,
                    "aqi": "no",
                    "alerts": "no",
                },
            )
        except httpx.RequestError as e:
            raise UpstreamError(f"Failed to connect to weather service: {e}") from e

        if not resp.is_success:
            raise classify_error_response(resp)

        snapshot = normalize_response(resp.json())
        self.cache.set(city, snapshot)
        return snapshot

    def clear_cache(self) -> None:
        self.cache.clear()

    def get_cache_size(self) -> int:
        return self.cache.size()


def classify_error_response(resp: httpx.Response) -> NotFoundError | UpstreamError:
    """Turn a non-2xx provider response into the matching error."""
    error = _error_block(resp)

    if error.get("code") == NO_MATCHING_LOCATION:
        return NotFoundError("City not found")
    if resp.status_code in (401, 403):
        return UpstreamError("Invalid API key")
    if resp.status_code == 429:
        return UpstreamError("Rate limit exceeded")
    return UpstreamError(error.get("message") or f"Weather API error: {resp.status_code}")


def _error_block(resp: httpx.Response) -> dict:
    """Extract {"code", "message"} from a provider error body, or {} if there is none."""
    try:
        data = resp.json()
    except ValueError:
        return {}
    if not isinstance(data, dict) or not isinstance(data.get("error"), dict):
        return {}
    return data["error"]
