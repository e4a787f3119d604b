# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides a WeatherAPI.com forecast payload and the snapshot it normalizes to.

import copy

import pytest

from weather_lookup.normalizer import normalize_response

BOSTON_PAYLOAD = {
    "location": {
        "name": "Boston",
        "region": "Massachusetts",
        "country": "United States of America",
        "lat": 42.36,
        "lon": -71.06,
        "tz_id": "America/New_York",
        "localtime_epoch": 1700000000,
        "localtime": "2024-01-15 10:00",
    },
    "current": {
        "last_updated_epoch": 1700000000,
        "last_updated": "2024-01-15 10:00",
        "temp_c": 5.5,
        "temp_f": 41.9,
        "is_day": 1,
        "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png", "code": 1003},
        "wind_mph": 12.5,
        "wind_kph": 20.1,
        "wind_degree": 180,
        "wind_dir": "S",
        "pressure_mb": 1015,
        "humidity": 65,
        "cloud": 25,
        "feelslike_c": 2.5,
        "feelslike_f": 36.5,
        "uv": 2,
    },
    "forecast": {
        "forecastday": [
            {
                "date": "2024-01-15",
                "date_epoch": 1705276800,
                "day": {
                    "maxtemp_c": 8.5,
                    "maxtemp_f": 47.3,
                    "mintemp_c": 2.1,
                    "mintemp_f": 35.8,
                    "avgtemp_c": 5.3,
                    "maxwind_kph": 24.5,
                    "totalprecip_mm": 0.5,
                    "avghumidity": 70,
                    "daily_will_it_rain": 1,
                    "daily_chance_of_rain": 35,
                    "daily_will_it_snow": 0,
                    "daily_chance_of_snow": 10,
                    "condition": {
                        "text": "Patchy rain possible",
                        "icon": "//cdn.weatherapi.com/weather/64x64/day/176.png",
                        "code": 1063,
                    },
                    "uv": 2,
                },
                "astro": {"sunrise": "07:10 AM", "sunset": "04:35 PM", "moon_phase": "Waxing Crescent"},
                "hour": [],
            },
            {
                "date": "2024-01-16",
                "date_epoch": 1705363200,
                "day": {
                    "maxtemp_c": 6.2,
                    "maxtemp_f": 43.2,
                    "mintemp_c": 0.5,
                    "mintemp_f": 32.9,
                    "avgtemp_c": 3.4,
                    "maxwind_kph": 19.5,
                    "totalprecip_mm": 0,
                    "avghumidity": 60,
                    "daily_will_it_rain": 0,
                    "daily_chance_of_rain": 0,
                    "daily_will_it_snow": 0,
                    "daily_chance_of_snow": 0,
                    "condition": {"text": "Sunny", "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png", "code": 1000},
                    "uv": 3,
                },
                "astro": {"sunrise": "07:10 AM", "sunset": "04:36 PM", "moon_phase": "Waxing Crescent"},
                "hour": [],
            },
        ]
    },
}


@pytest.fixture
def provider_payload() -> dict:
    """A fresh copy of the Boston forecast.json body, safe to mutate per test."""
    return copy.deepcopy(BOSTON_PAYLOAD)


@pytest.fixture
def boston_snapshot(provider_payload):
    return normalize_response(provider_payload)
