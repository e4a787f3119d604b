# ABOUTME: Front-end client for the weather lookup backend's /api/weather endpoint.
# ABOUTME: Turns backend failures into ApiError with a user-facing message and status code.

import httpx

from weather_lookup.models import WeatherSnapshot

WEATHER_PATH = "/api/weather"


class ApiError(Exception):
    """A failed lookup. status_code is the HTTP status, or 0 when the backend was unreachable."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


async def fetch_weather(client: httpx.AsyncClient, city: str) -> WeatherSnapshot:
    """Fetch the snapshot for city from the backend the client's base_url points at."""
    trimmed = city.strip()
    if not trimmed:
        raise ApiError("Please enter a city name", 400)

    try:
        resp = await client.get(WEATHER_PATH, params={"city": trimmed})
    except httpx.RequestError as e:
        raise ApiError("Unable to connect to the weather service. Please check your connection.", 0) from e

    if not resp.is_success:
        raise _api_error(resp, trimmed)

    return WeatherSnapshot.model_validate(resp.json())


def _api_error(resp: httpx.Response, city: str) -> ApiError:
    backend_message = _backend_error_message(resp)

    if resp.status_code == 400:
        return ApiError(backend_message or "Invalid request", 400)
    if resp.status_code == 404:
        return ApiError(f'City "{city}" not found. Please check the spelling and try again.', 404)
    if resp.status_code == 502:
        return ApiError("The weather service is temporarily unavailable. Please try again later.", 502)
    return ApiError(backend_message or "An unexpected error occurred", resp.status_code)


def _backend_error_message(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return None
