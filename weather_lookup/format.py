# ABOUTME: Pure string formatting helpers for displaying weather snapshots.
# ABOUTME: Rounding is half-up to the nearest integer; dates use the en-US short forms.

from datetime import date, timedelta
from decimal import ROUND_FLOOR, Decimal

ICON_CDN_BASE = "https://cdn.weatherapi.com/weather/64x64/day/"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (20.5 -> 21, -2.5 -> -2)."""
    # Decimal arithmetic, so values just below .5 are not pushed over by float addition
    return int((Decimal(repr(value)) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def format_temperature(temp_c: float, temp_f: float | None = None, unit: str = "C") -> str:
    """Format a temperature with its unit; Fahrenheit is used only when it is given."""
    if unit == "F" and temp_f is not None:
        return f"{round_half_up(temp_f)}°F"
    return f"{round_half_up(temp_c)}°C"


def format_date(date_string: str, pattern: str | None = None) -> str:
    """Format an ISO date, by default as e.g. "Mon, Jan 15"."""
    d = date.fromisoformat(date_string)
    if pattern is not None:
        return d.strftime(pattern)
    return f"{d:%a}, {d:%b} {d.day}"


def format_day_of_week(date_string: str, today: date | None = None) -> str:
    """Name the day relative to today: "Today", "Tomorrow", else the short weekday."""
    d = date.fromisoformat(date_string)
    today = today or date.today()
    if d == today:
        return "Today"
    if d == today + timedelta(days=1):
        return "Tomorrow"
    return f"{d:%a}"


def format_wind_speed(kph: float) -> str:
    return f"{round_half_up(kph)} km/h"


def format_humidity(percent: int) -> str:
    return f"{percent}%"


def format_precip_chance(percent: int) -> str:
    """Format as e.g. "50% rain", or an empty string when the chance is zero."""
    if percent == 0:
        return ""
    return f"{percent}% rain"


def format_coordinates(lat: float, lon: float) -> str:
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.2f}°{lat_dir}, {abs(lon):.2f}°{lon_dir}"


def get_icon_url(icon_path: str) -> str:
    """Complete a provider icon path into an absolute https URL."""
    # The provider returns protocol-relative paths like //cdn.weatherapi.com/weather/64x64/day/116.png
    if icon_path.startswith("//"):
        return f"https:{icon_path}"
    if icon_path.startswith("http"):
        return icon_path
    return f"{ICON_CDN_BASE}{icon_path}"


def format_location(city: str, country: str) -> str:
    return f"{city}, {country}"
