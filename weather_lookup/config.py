# ABOUTME: Environment-driven settings for the backend server and the terminal client.
# ABOUTME: Reads .env via python-dotenv, then validates values into a frozen Settings model.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

DEFAULT_PORT = 3000
DEFAULT_CACHE_TTL_SECONDS = 600
DEFAULT_BACKEND_URL = "http://localhost:3000"

MISSING_KEY_MESSAGE = (
    "WEATHER_API_KEY environment variable is not set. "
    "Create a .env file in the project root with your API key "
    "(see .env.example). Get a free API key at: https://www.weatherapi.com/"
)


class ConfigError(Exception):
    """Raised when the environment does not describe a runnable configuration."""


class Settings(BaseModel):
    """Backend server configuration."""

    model_config = ConfigDict(frozen=True)

    weather_api_key: str
    host: str = "127.0.0.1"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    cache_ttl_seconds: int = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=0)
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @property
    def cache_ttl_ms(self) -> int:
        return self.cache_ttl_seconds * 1000


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment, failing fast on a missing API key.

    When env is None the process environment is used after loading .env.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    api_key = env.get("WEATHER_API_KEY", "").strip()
    if not api_key:
        raise ConfigError(MISSING_KEY_MESSAGE)

    try:
        return Settings(
            weather_api_key=api_key,
            host=env.get("HOST", "127.0.0.1"),
            port=_setting(env, "PORT", DEFAULT_PORT),
            cache_ttl_seconds=_setting(env, "CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def backend_url(env: dict[str, str] | None = None) -> str:
    """Base URL of the backend the terminal client talks to."""
    if env is None:
        load_dotenv()
        env = dict(os.environ)
    return env.get("WEATHER_BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")


def _setting(env: dict[str, str], name: str, default: int) -> str | int:
    """Raw value of name, or default when it is unset or blank. Settings does the conversion."""
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()
