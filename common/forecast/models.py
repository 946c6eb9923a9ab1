"""ABOUTME: Forecast record data classes parsed from AccuWeather responses.

Defines the standardized hourly and daily forecast records that the provider
client produces and the formatter renders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

Number = Union[int, float]


class UnitSystem(str, Enum):
    """Valid unit systems."""
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def symbol(self) -> str:
        """Temperature unit letter shown after the degree sign."""
        return "C" if self is UnitSystem.METRIC else "F"

    @property
    def metric_flag(self) -> str:
        """Value of the provider's ``metric`` query parameter."""
        return "true" if self is UnitSystem.METRIC else "false"


@dataclass(frozen=True)
class HourlyForecast:
    """One hour of an AccuWeather 12-hour forecast.

    Attributes:
        timestamp: Provider timestamp, kept verbatim (e.g. "2025-05-04T15:00:00+02:00")
        temperature: Temperature value
        unit_symbol: Provider unit letter ("C" or "F")
        condition: Icon phrase (e.g. "Sunny")
    """
    timestamp: str
    temperature: Number
    unit_symbol: str
    condition: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "HourlyForecast":
        """Build a record from one element of the hourly forecast array.

        Raises:
            KeyError, TypeError, AttributeError: If the element lacks a required field
        """
        temperature = item["Temperature"]
        return cls(
            timestamp=item["DateTime"],
            temperature=temperature["Value"],
            unit_symbol=temperature["Unit"],
            condition=item["IconPhrase"],
        )


@dataclass(frozen=True)
class DailyForecast:
    """One day of an AccuWeather daily forecast.

    Attributes:
        date: Provider date, kept verbatim (e.g. "2025-05-04T07:00:00+02:00")
        min_temperature: Minimum temperature value
        max_temperature: Maximum temperature value
        day_condition: Daytime icon phrase
        night_condition: Nighttime icon phrase
        day_precipitation: Whether precipitation is expected during the day
        night_precipitation: Whether precipitation is expected during the night
    """
    date: str
    min_temperature: Number
    max_temperature: Number
    day_condition: str
    night_condition: str
    day_precipitation: bool = False
    night_precipitation: bool = False

    @property
    def has_precipitation(self) -> bool:
        return self.day_precipitation or self.night_precipitation

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "DailyForecast":
        """Build a record from one entry of ``DailyForecasts``.

        Raises:
            KeyError, TypeError, AttributeError: If the entry lacks a required field
        """
        temperature = item["Temperature"]
        day = item["Day"]
        night = item["Night"]
        return cls(
            date=item["Date"],
            min_temperature=temperature["Minimum"]["Value"],
            max_temperature=temperature["Maximum"]["Value"],
            day_condition=day["IconPhrase"],
            night_condition=night["IconPhrase"],
            day_precipitation=bool(day.get("HasPrecipitation", False)),
            night_precipitation=bool(night.get("HasPrecipitation", False)),
        )
