from .models import UnitSystem, HourlyForecast, DailyForecast
from .backend import AccuWeatherBackend, select_forecast_window
from .formatting import format_hourly_forecast, format_daily_forecast, format_forecast_date

__all__ = [
    "UnitSystem",
    "HourlyForecast",
    "DailyForecast",
    "AccuWeatherBackend",
    "select_forecast_window",
    "format_hourly_forecast",
    "format_daily_forecast",
    "format_forecast_date",
]
