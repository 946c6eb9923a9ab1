"""ABOUTME: AccuWeather API client - location search followed by forecast retrieval.

Every lookup is two dependent round-trips: the free-text location is resolved
to an AccuWeather location key, then the forecast is fetched for that key.
Transport faults are classified once here and surface as ProviderFailure.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from ..config import DEFAULT_ACCUWEATHER_BASE_URL
from ..error_handling import (
    FailureKind,
    ProviderFailure,
    STAGE_FORECAST,
    STAGE_LOCATION_SEARCH,
)
from ..http_utils import DEFAULT_HTTP_TIMEOUT, classify_http_error, safe_http_get
from .models import DailyForecast, HourlyForecast, UnitSystem

logger = logging.getLogger(__name__)

LOCATION_SEARCH_PATH = "/locations/v1/cities/search"
HOURLY_FORECAST_PATH = "/forecasts/v1/hourly/12hour/{location_key}"
DAILY_FORECAST_PATH = "/forecasts/v1/daily/{days}day/{location_key}"

DEFAULT_FORECAST_DAYS = 5


def select_forecast_window(days: int = DEFAULT_FORECAST_DAYS) -> int:
    """Project a requested day count onto one of the provider's daily windows.

    1 -> 1, 2-5 -> 5, 6-10 -> 10, anything larger -> 15.

    Args:
        days: Requested number of forecast days

    Returns:
        Window length in days (1, 5, 10 or 15)
    """
    if days == 1:
        return 1
    if days <= 5:
        return 5
    if days <= 10:
        return 10
    return 15


class AccuWeatherBackend:
    """AccuWeather API client.

    Holds no connection between calls: each request opens and closes its own
    httpx client, so one instance serves exactly one tool invocation.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_ACCUWEATHER_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize AccuWeather client.

        Args:
            api_key: AccuWeather API key
            base_url: Provider root URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport override (used by tests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "accuweather"

    async def _get_json(self, path: str, params: Dict[str, Any], stage: str) -> Any:
        """GET a provider path and decode its JSON body.

        Returns:
            Decoded body, or None when the body is not JSON

        Raises:
            ProviderFailure: If the request fails at the HTTP or transport level
        """
        url = f"{self.base_url}{path}"
        request_params = {"apikey": self.api_key, **params}
        try:
            resp = await safe_http_get(
                url,
                params=request_params,
                timeout=self.timeout,
                transport=self._transport,
            )
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            failure = classify_http_error(e, stage)
            logger.error(f"AccuWeather {stage} request to {path} failed: {failure.kind.value}")
            raise failure from e

        try:
            return resp.json()
        except ValueError:
            logger.warning(f"AccuWeather {stage} response from {path} is not JSON")
            return None

    async def search_location(self, location: str) -> str:
        """Resolve free-text location to an AccuWeather location key.

        Args:
            location: Location name (e.g. "Paris")

        Returns:
            Key of the first matching location

        Raises:
            ProviderFailure: NO_LOCATION_MATCH for an empty result set,
                MALFORMED if the first match carries no key, or the
                classified transport failure
        """
        logger.debug(f"Searching AccuWeather location: '{location}'")
        data = await self._get_json(LOCATION_SEARCH_PATH, {"q": location}, STAGE_LOCATION_SEARCH)

        if not data or not isinstance(data, list):
            logger.warning(f"Location not found: '{location}'")
            raise ProviderFailure(FailureKind.NO_LOCATION_MATCH, STAGE_LOCATION_SEARCH)

        first = data[0]
        location_key = first.get("Key") if isinstance(first, dict) else None
        if not location_key:
            logger.error(f"Location search for '{location}' returned a match without a key")
            raise ProviderFailure(FailureKind.MALFORMED, STAGE_LOCATION_SEARCH)

        logger.info(f"Resolved '{location}' to location key {location_key}")
        return str(location_key)

    async def get_hourly_forecast(
        self,
        location_key: str,
        units: UnitSystem = UnitSystem.METRIC
    ) -> List[HourlyForecast]:
        """Fetch the 12-hour forecast for a location key.

        Raises:
            ProviderFailure: NO_FORECAST_DATA if the body is absent, malformed
                or empty, or the classified transport failure
        """
        path = HOURLY_FORECAST_PATH.format(location_key=quote(location_key, safe=""))
        data = await self._get_json(path, {"metric": units.metric_flag}, STAGE_FORECAST)

        if not data or not isinstance(data, list):
            raise ProviderFailure(FailureKind.NO_FORECAST_DATA, STAGE_FORECAST)

        try:
            forecast = [HourlyForecast.from_api(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Malformed hourly forecast for key {location_key}: {e}")
            raise ProviderFailure(FailureKind.NO_FORECAST_DATA, STAGE_FORECAST) from e

        logger.debug(f"Fetched hourly forecast with {len(forecast)} entries")
        return forecast

    async def get_daily_forecast(
        self,
        location_key: str,
        days: int = DEFAULT_FORECAST_DAYS,
        units: UnitSystem = UnitSystem.METRIC
    ) -> List[DailyForecast]:
        """Fetch the daily forecast for a location key.

        The requested day count is mapped onto a provider window with
        select_forecast_window before the request is made.

        Raises:
            ProviderFailure: NO_FORECAST_DATA if ``DailyForecasts`` is absent,
                malformed or empty, or the classified transport failure
        """
        window = select_forecast_window(days)
        path = DAILY_FORECAST_PATH.format(days=window, location_key=quote(location_key, safe=""))
        data = await self._get_json(path, {"metric": units.metric_flag}, STAGE_FORECAST)

        daily = data.get("DailyForecasts") if isinstance(data, dict) else None
        if not daily or not isinstance(daily, list):
            raise ProviderFailure(FailureKind.NO_FORECAST_DATA, STAGE_FORECAST)

        try:
            forecast = [DailyForecast.from_api(item) for item in daily]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Malformed daily forecast for key {location_key}: {e}")
            raise ProviderFailure(FailureKind.NO_FORECAST_DATA, STAGE_FORECAST) from e

        logger.debug(f"Fetched {window}-day forecast with {len(forecast)} entries")
        return forecast
