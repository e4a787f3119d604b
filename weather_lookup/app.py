# ABOUTME: Starlette app exposing /health and /api/weather over the upstream weather client.
# ABOUTME: Validates the city parameter and maps pipeline errors to HTTP statuses.

import logging
import re

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_lookup.errors import (
    NotFoundError,
    UnexpectedError,
    UpstreamError,
    ValidationError,
    WeatherLookupError,
)
from weather_lookup.weather_client import WeatherClient

logger = logging.getLogger(__name__)

MAX_CITY_LENGTH = 100

# Letters, whitespace, hyphens, apostrophes, commas and periods
VALID_CITY = re.compile(r"^[a-zA-Z\s\-',.]+$")

CITY_NOT_FOUND = "City not found"
UPSTREAM_FAILURE = "Upstream weather service error"
INTERNAL_ERROR = "Internal server error"


def validate_city(raw: str | None) -> str:
    """Check the city query parameter and return it stripped.

    Checks run in order (presence, emptiness, length, characters) and the
    first failure raises ValidationError.
    """
    if raw is None:
        raise ValidationError("Missing required parameter: city")

    city = raw.strip()
    if not city:
        raise ValidationError("City parameter cannot be empty")
    if len(city) > MAX_CITY_LENGTH:
        raise ValidationError(f"City parameter is too long (max {MAX_CITY_LENGTH} characters)")
    if not VALID_CITY.match(city):
        raise ValidationError("City parameter contains invalid characters")
    return city


def error_response(error: WeatherLookupError) -> JSONResponse:
    return JSONResponse({"error": error.message}, status_code=error.status_code)


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"ok": True})


async def weather(request: Request) -> JSONResponse:
    """GET /api/weather?city=<name>"""
    try:
        values = request.query_params.getlist("city")
        # A repeated city parameter is treated as absent
        city = validate_city(values[0] if len(values) == 1 else None)
    except ValidationError as e:
        return error_response(e)

    weather_client: WeatherClient = request.app.state.weather_client
    try:
        snapshot = await weather_client.get_weather(city)
    except NotFoundError:
        return error_response(NotFoundError(CITY_NOT_FOUND))
    except UpstreamError as e:
        # Provider detail stays in the log
        logger.error("Upstream weather API error: %s", e.message)
        return error_response(UpstreamError(UPSTREAM_FAILURE))
    except Exception:
        logger.exception("Unexpected error while fetching weather for %r", city)
        return error_response(UnexpectedError(INTERNAL_ERROR))

    return JSONResponse(snapshot.to_json_dict())


async def not_found(request: Request, exc: HTTPException) -> JSONResponse:
    """Unknown paths and known paths with an unsupported method both answer 404."""
    return JSONResponse({"error": "Not found"}, status_code=404)


async def server_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"error": INTERNAL_ERROR}, status_code=500)


def create_app(weather_client: WeatherClient, lifespan=None) -> Starlette:
    """Build the ASGI app around an already configured weather client."""
    app = Starlette(
        lifespan=lifespan,
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/api/weather", weather, methods=["GET"]),
        ],
        middleware=[Middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"])],
        exception_handlers={404: not_found, 405: not_found, 500: server_error},
    )
    app.state.weather_client = weather_client
    return app
