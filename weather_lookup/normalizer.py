# ABOUTME: Maps a WeatherAPI.com forecast payload onto the public WeatherSnapshot shape.
# ABOUTME: Values are copied as given; Celsius and Fahrenheit are never derived from each other.

from weather_lookup.models import CurrentConditions, ForecastDay, WeatherSnapshot


def normalize_response(data: dict) -> WeatherSnapshot:
    """Convert a successful forecast.json body into a WeatherSnapshot."""
    location = data["location"]
    return WeatherSnapshot(
        city=location["name"],
        country=location["country"],
        latitude=location["lat"],
        longitude=location["lon"],
        timezone=location["tz_id"],
        current=parse_current(data["current"]),
        forecast=tuple(parse_forecast_day(day) for day in data["forecast"]["forecastday"]),
    )


def parse_current(raw: dict) -> CurrentConditions:
    """Pick the current-conditions fields the front end shows."""
    return CurrentConditions(
        temp_c=raw["temp_c"],
        temp_f=raw["temp_f"],
        condition=raw["condition"]["text"],
        condition_icon=raw["condition"]["icon"],
        wind_kph=raw["wind_kph"],
        humidity=raw["humidity"],
        feels_like_c=raw["feelslike_c"],
    )


def parse_forecast_day(raw: dict) -> ForecastDay:
    """Flatten one forecastday entry; only the day block is consumed (astro and hour are ignored)."""
    day = raw["day"]
    return ForecastDay(
        date=raw["date"],
        min_c=day["mintemp_c"],
        max_c=day["maxtemp_c"],
        min_f=day["mintemp_f"],
        max_f=day["maxtemp_f"],
        condition=day["condition"]["text"],
        condition_icon=day["condition"]["icon"],
        # Worst case of the two, not an average
        precip_chance=max(day["daily_chance_of_rain"], day["daily_chance_of_snow"]),
    )
