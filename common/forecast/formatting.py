"""ABOUTME: Formatting utilities that turn forecast records into display lines.

One line per record, provider order preserved. Rendering is locale-independent
so output is identical on every host.
"""

from datetime import datetime
from typing import List, Sequence

from .models import DailyForecast, HourlyForecast, Number, UnitSystem

DEGREE_SIGN = "°"
PRECIPITATION_SUFFIX = " (Precipitation expected)"

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_number(value: Number) -> str:
    """Render a provider number, dropping a zero fractional part (20.0 -> "20")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(value: Number, unit_symbol: str) -> str:
    return f"{format_number(value)}{DEGREE_SIGN}{unit_symbol}"


def format_forecast_date(value: str) -> str:
    """Render an ISO-8601 provider date as "Sunday, May 4, 2025".

    The calendar date is taken in the provider's own UTC offset. Values that
    are not ISO-8601 are returned unchanged.
    """
    try:
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.fromisoformat(text)
    except (AttributeError, TypeError, ValueError):
        return str(value)
    weekday = WEEKDAY_NAMES[parsed.weekday()]
    month = MONTH_ABBREVIATIONS[parsed.month - 1]
    return f"{weekday}, {month} {parsed.day}, {parsed.year}"


def format_hourly_forecast(forecast: Sequence[HourlyForecast]) -> List[str]:
    """Format hourly records as "{timestamp}: {temp}°{unit}, {condition}".

    The unit letter comes from the provider record.
    """
    return [
        f"{hour.timestamp}: {format_temperature(hour.temperature, hour.unit_symbol)}, {hour.condition}"
        for hour in forecast
    ]


def format_daily_forecast(
    forecast: Sequence[DailyForecast],
    units: UnitSystem = UnitSystem.METRIC
) -> List[str]:
    """Format daily records as one line per day.

    Example:
        "Sunday, May 4, 2025: 15°C to 25°C, Day: Partly sunny, Night: Mostly clear"

    The unit letter follows the requested unit system, not the provider's own
    annotation. The precipitation suffix is appended when either half of the
    day expects precipitation.

    Args:
        forecast: Daily records in provider order
        units: Unit system requested by the caller

    Returns:
        List of display lines, one per record
    """
    symbol = units.symbol
    lines = []
    for day in forecast:
        line = (
            f"{format_forecast_date(day.date)}: "
            f"{format_temperature(day.min_temperature, symbol)} to "
            f"{format_temperature(day.max_temperature, symbol)}, "
            f"Day: {day.day_condition}, Night: {day.night_condition}"
        )
        if day.has_precipitation:
            line += PRECIPITATION_SUFFIX
        lines.append(line)
    return lines
