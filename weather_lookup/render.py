# ABOUTME: Terminal renderer for weather lookups built on rich.
# ABOUTME: Shows one of loading, error, or weather-data states and draws the forecast as a table.

from datetime import date
from enum import Enum

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from weather_lookup.format import (
    format_coordinates,
    format_day_of_week,
    format_humidity,
    format_location,
    format_precip_chance,
    format_temperature,
    format_wind_speed,
    get_icon_url,
)
from weather_lookup.models import CurrentConditions, ForecastDay, WeatherSnapshot


class UIState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class WeatherRenderer:
    """Presentation surface for a lookup.

    Only one state is visible at a time; state tracks which one was drawn last.
    """

    def __init__(self, console: Console | None = None, today: date | None = None):
        self.console = console or Console()
        self.today = today
        self.state = UIState.IDLE
        self.error_message: str | None = None

    def show_loading(self) -> None:
        self.state = UIState.LOADING
        self.error_message = None
        self.console.print("[cyan]Loading weather data...[/cyan]")

    def show_error(self, message: str) -> None:
        self.state = UIState.ERROR
        self.error_message = message
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def show_weather_data(self, data: WeatherSnapshot) -> None:
        self.state = UIState.SUCCESS
        self.error_message = None
        self.console.print(self.current_panel(data))
        self.console.print(self.forecast_table(data.forecast))

    def hide_all_states(self) -> None:
        self.state = UIState.IDLE
        self.error_message = None

    def current_panel(self, data: WeatherSnapshot) -> Panel:
        current: CurrentConditions = data.current
        lines = [
            f"[bold]{format_temperature(current.temp_c, current.temp_f)}[/bold]  {escape(current.condition)}",
            f"Feels like {format_temperature(current.feels_like_c)}",
            f"Humidity: {format_humidity(current.humidity)}",
            f"Wind: {format_wind_speed(current.wind_kph)}",
            f"[dim]{escape(get_icon_url(current.condition_icon))}[/dim]",
        ]
        return Panel(
            "\n".join(lines),
            title=escape(format_location(data.city, data.country)),
            subtitle=format_coordinates(data.latitude, data.longitude),
        )

    def forecast_table(self, forecast: tuple[ForecastDay, ...]) -> Table:
        table = Table(title="7-Day Forecast")
        table.add_column("Day")
        table.add_column("Condition")
        table.add_column("High", justify="right")
        table.add_column("Low", justify="right")
        table.add_column("Precip", justify="right")
        for day in forecast:
            table.add_row(
                format_day_of_week(day.date.isoformat(), today=self.today),
                escape(day.condition),
                format_temperature(day.max_c, day.max_f),
                format_temperature(day.min_c, day.min_f),
                format_precip_chance(day.precip_chance),
            )
        return table
