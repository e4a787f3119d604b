# ABOUTME: Pydantic BaseModels for the normalized weather snapshot served by the backend.
# ABOUTME: Attributes are snake_case in Python and camelCase on the wire.

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_SNAPSHOT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CurrentConditions(BaseModel):
    """Current conditions at the resolved location."""

    model_config = _SNAPSHOT_CONFIG

    temp_c: float
    temp_f: float
    condition: str
    condition_icon: str
    wind_kph: float
    humidity: int
    feels_like_c: float


class ForecastDay(BaseModel):
    """One day of the 7-day forecast."""

    model_config = _SNAPSHOT_CONFIG

    date: date
    min_c: float
    max_c: float
    min_f: float
    max_f: float
    condition: str
    condition_icon: str
    precip_chance: int


class WeatherSnapshot(BaseModel):
    """Normalized weather for one city: location, current conditions and forecast."""

    model_config = _SNAPSHOT_CONFIG

    city: str
    country: str
    latitude: float
    longitude: float
    timezone: str
    current: CurrentConditions
    forecast: tuple[ForecastDay, ...] = ()

    def to_json_dict(self) -> dict:
        """Dump with the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
