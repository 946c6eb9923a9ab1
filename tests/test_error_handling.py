"""ABOUTME: Tests for failure normalization and the error envelope."""

import pytest

from common.error_handling import (
    ERROR_FETCH_FAILED,
    ERROR_NETWORK_ERROR,
    ERROR_UNAUTHORIZED,
    FailureKind,
    HTTPStatusCodes,
    ProviderFailure,
    STAGE_FORECAST,
    STAGE_LOCATION_SEARCH,
    ToolFailure,
    create_error_result,
    create_missing_api_key_error,
    create_provider_failure_error,
    create_unexpected_error,
    create_unknown_tool_error,
    create_validation_error,
)


class TestHTTPStatusCodes:
    """Tests for status code helpers."""

    def test_unauthorized(self):
        assert HTTPStatusCodes.is_unauthorized(401)
        assert not HTTPStatusCodes.is_unauthorized(403)

    def test_not_found(self):
        assert HTTPStatusCodes.is_not_found(404)
        assert not HTTPStatusCodes.is_not_found(400)


class TestProviderFailureMessages:
    """Tests for provider failure to message mapping."""

    @pytest.mark.parametrize(
        "kind,stage,expected",
        [
            (FailureKind.NO_LOCATION_MATCH, STAGE_LOCATION_SEARCH, "No location found for: Paris"),
            (FailureKind.NO_FORECAST_DATA, STAGE_FORECAST, "No daily forecast data available for location: Paris"),
            (FailureKind.UNAUTHORIZED, STAGE_LOCATION_SEARCH, "Invalid AccuWeather API key. Please check your credentials."),
            (FailureKind.UNAUTHORIZED, STAGE_FORECAST, "Invalid AccuWeather API key. Please check your credentials."),
            (FailureKind.NOT_FOUND, STAGE_FORECAST, "Location not found: Paris"),
            (FailureKind.UNREACHABLE, STAGE_FORECAST, "Network error: Unable to connect to AccuWeather API."),
            (FailureKind.MALFORMED, STAGE_LOCATION_SEARCH, "An error occurred while fetching weather data."),
        ],
    )
    def test_messages(self, kind, stage, expected):
        failure = create_provider_failure_error(ProviderFailure(kind, stage), "Paris", "daily")
        assert failure.message == expected

    def test_granularity_in_empty_data_message(self):
        failure = create_provider_failure_error(
            ProviderFailure(FailureKind.NO_FORECAST_DATA, STAGE_FORECAST), "Oslo", "hourly"
        )
        assert failure.message == "No hourly forecast data available for location: Oslo"

    def test_http_error_with_provider_message(self):
        failure = create_provider_failure_error(
            ProviderFailure(FailureKind.HTTP_ERROR, STAGE_FORECAST, 400, "Invalid location key"),
            "Paris",
            "hourly",
        )
        assert failure.message == "AccuWeather API error (400): Invalid location key"

    def test_http_error_without_provider_message(self):
        failure = create_provider_failure_error(
            ProviderFailure(FailureKind.HTTP_ERROR, STAGE_FORECAST, 502), "Paris", "hourly"
        )
        assert failure.message == "AccuWeather API error (502): Request failed with status code 502"

    def test_error_codes(self):
        assert create_provider_failure_error(
            ProviderFailure(FailureKind.UNAUTHORIZED, STAGE_FORECAST, 401), "Paris", "daily"
        ).error_code == ERROR_UNAUTHORIZED
        assert create_provider_failure_error(
            ProviderFailure(FailureKind.UNREACHABLE, STAGE_FORECAST), "Paris", "daily"
        ).error_code == ERROR_NETWORK_ERROR
        assert create_provider_failure_error(
            ProviderFailure(FailureKind.MALFORMED, STAGE_FORECAST), "Paris", "daily"
        ).error_code == ERROR_FETCH_FAILED

    def test_context_records_stage_and_status(self):
        failure = create_provider_failure_error(
            ProviderFailure(FailureKind.UNAUTHORIZED, STAGE_FORECAST, 401), "Paris", "daily"
        )
        assert failure.context == {"location": "Paris", "stage": STAGE_FORECAST, "status_code": 401}


class TestOtherMessages:
    """Tests for the remaining message builders."""

    def test_validation_joins_violations(self):
        failure = create_validation_error(["location: Required", "units: Invalid"])
        assert failure.message == "Invalid input: location: Required, units: Invalid"

    def test_missing_api_key(self):
        assert create_missing_api_key_error().message == "Error: AccuWeather API key not configured"

    def test_unknown_tool(self):
        assert create_unknown_tool_error("x").message == "Unknown tool: x"

    def test_unexpected(self):
        assert create_unexpected_error(RuntimeError("boom")).message == "Error: boom"


class TestErrorEnvelope:
    """Tests for the MCP error envelope."""

    def test_single_text_item_with_error_flag(self):
        result = create_error_result(ToolFailure(message="Unknown tool: x", error_code="unknown_tool"))

        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "Unknown tool: x"
