"""ABOUTME: Pytest configuration and shared fixtures for weather MCP server tests.

Provides sample AccuWeather payloads and a recording httpx.MockTransport so
tests can assert on every outbound provider call without touching the network.
"""

from typing import Any, Callable, List

import httpx
import pytest

TEST_API_KEY = "test-key"
TEST_LOCATION_KEY = "LOC123"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays queued responses and records each request.

    Each queued item is an httpx.Response, or an exception instance to raise
    for that request.
    """

    def __init__(self, responses: List[Any]):
        self.requests: List[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.url}")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture(autouse=True)
def weather_env(monkeypatch, tmp_path):
    """Run every test with a known credential and no .env from the working tree."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ACCUWEATHER_API_KEY", TEST_API_KEY)
    monkeypatch.delenv("ACCUWEATHER_BASE_URL", raising=False)
    monkeypatch.delenv("ACCUWEATHER_TIMEOUT", raising=False)
    monkeypatch.delenv("WEATHER_REQUIRE_SESSION_ID", raising=False)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Fixture providing a factory for recording transports.

    Usage:
        transport = make_transport(httpx.Response(200, json=[...]), ...)
    """
    def _make(*responses: Any) -> RecordingTransport:
        return RecordingTransport(list(responses))
    return _make


@pytest.fixture
def location_search_data():
    """Fixture providing a sample AccuWeather city search response."""
    return [{"Key": TEST_LOCATION_KEY, "LocalizedName": "Paris"}]


@pytest.fixture
def hourly_forecast_data():
    """Fixture providing a sample AccuWeather 12-hour forecast response."""
    return [
        {
            "DateTime": "2025-05-04T15:00:00+02:00",
            "Temperature": {"Value": 20, "Unit": "C"},
            "IconPhrase": "Sunny",
        },
        {
            "DateTime": "2025-05-04T16:00:00+02:00",
            "Temperature": {"Value": 21.5, "Unit": "C"},
            "IconPhrase": "Partly sunny",
        },
    ]


@pytest.fixture
def daily_forecast_data():
    """Fixture providing a sample AccuWeather daily forecast response."""
    return {
        "DailyForecasts": [
            {
                "Date": "2025-05-04T07:00:00+02:00",
                "Temperature": {
                    "Minimum": {"Value": 15, "Unit": "C"},
                    "Maximum": {"Value": 25, "Unit": "C"},
                },
                "Day": {"IconPhrase": "Partly sunny", "HasPrecipitation": False},
                "Night": {"IconPhrase": "Mostly clear", "HasPrecipitation": False},
            },
            {
                "Date": "2025-05-05T07:00:00+02:00",
                "Temperature": {
                    "Minimum": {"Value": 12, "Unit": "C"},
                    "Maximum": {"Value": 18, "Unit": "C"},
                },
                "Day": {"IconPhrase": "Showers", "HasPrecipitation": True},
                "Night": {"IconPhrase": "Cloudy", "HasPrecipitation": False},
            },
        ]
    }
