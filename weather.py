"""ABOUTME: Weather MCP Server - AccuWeather hourly and daily forecasts.

Exposes two tools, ``weather-get_hourly`` (next 12 hours) and ``weather-get_daily``
(1, 5, 10 or 15 days). Each call validates its arguments, resolves the location
to an AccuWeather location key, fetches the forecast for that key and returns one
text item per forecast entry. Every failure is answered with a single-item error
envelope; nothing escapes ``call_tool``.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Sequence, Tuple, Type

import httpx
from mcp.types import CallToolResult, Tool
from pydantic import BaseModel, Field, field_validator

from common.config import WeatherSettings
from common.mcp_base import MCPServerBase
from common.validation import (
    validate_arguments,
    validate_min_length_field,
    validate_not_boolean_field,
    validate_uuid_field,
)
from common.error_handling import (
    PROVIDER_NAME,
    ProviderFailure,
    ToolFailure,
    create_error_result,
    create_missing_api_key_error,
    create_missing_arguments_error,
    create_provider_failure_error,
    create_unexpected_error,
    create_unknown_tool_error,
)
from common.forecast import (
    AccuWeatherBackend,
    UnitSystem,
    format_daily_forecast,
    format_hourly_forecast,
)

SERVER_NAME = "mcp-weather"
SERVER_VERSION = "0.4.1"

# Initialize MCP server with base class
server = MCPServerBase(SERVER_NAME, version=SERVER_VERSION)
logger = server.get_logger()

# ============================================================================
# CONSTANTS
# ============================================================================

TOOL_GET_HOURLY = "weather-get_hourly"
TOOL_GET_DAILY = "weather-get_daily"

MIN_LOCATION_LENGTH = 1

LOCATION_DESCRIPTION = "The city or location for which to retrieve the weather forecast."
UNITS_DESCRIPTION = (
    "Temperature unit system (metric for Celsius, imperial for Fahrenheit). Default is metric."
)
DAYS_DESCRIPTION = "Number of days to forecast (1, 5, 10, or 15). Default is 5."
SESSION_ID_DESCRIPTION = "A unique identifier for the user session."

# ============================================================================
# PYDANTIC MODELS
# ============================================================================


class HourlyForecastInput(BaseModel):
    """Input schema for weather-get_hourly tool."""

    location: str = Field(
        ...,
        description=LOCATION_DESCRIPTION,
        json_schema_extra={"minLength": MIN_LOCATION_LENGTH},
    )
    units: Literal["metric", "imperial"] = Field(
        default="metric",
        description=UNITS_DESCRIPTION,
    )

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        return validate_min_length_field(v, MIN_LOCATION_LENGTH, "Location")


class DailyForecastInput(HourlyForecastInput):
    """Input schema for weather-get_daily tool."""

    days: Literal[1, 5, 10, 15] = Field(
        default=5,
        description=DAYS_DESCRIPTION,
    )

    @field_validator("days", mode="before")
    @classmethod
    def validate_days(cls, v: Any) -> Any:
        return validate_not_boolean_field(v)


class SessionInput(BaseModel):
    """Session identifier required by clients that track sessions."""

    sessionId: str = Field(..., description=SESSION_ID_DESCRIPTION)

    @field_validator("sessionId")
    @classmethod
    def validate_session_id(cls, v: str) -> str:
        return validate_uuid_field(v, "sessionId")


class HourlySessionInput(SessionInput, HourlyForecastInput):
    """weather-get_hourly input with a required session identifier."""


class DailySessionInput(SessionInput, DailyForecastInput):
    """weather-get_daily input with a required session identifier."""


# ============================================================================
# PIPELINE RESULT
# ============================================================================


@dataclass(frozen=True)
class ToolOutcome:
    """Result of one tool invocation before it becomes an MCP envelope.

    Exactly one of ``lines`` (success) or ``failure`` is meaningful.
    """
    lines: Tuple[str, ...] = ()
    failure: Optional[ToolFailure] = None

    @classmethod
    def succeeded(cls, lines: Sequence[str]) -> "ToolOutcome":
        return cls(lines=tuple(lines))

    @classmethod
    def failed(cls, failure: ToolFailure) -> "ToolOutcome":
        return cls(failure=failure)

    @property
    def is_error(self) -> bool:
        return self.failure is not None


ToolHandler = Callable[..., Awaitable[ToolOutcome]]


def _create_backend(
    settings: WeatherSettings,
    transport: Optional[httpx.AsyncBaseTransport]
) -> AccuWeatherBackend:
    return AccuWeatherBackend(
        api_key=settings.api_key,
        base_url=settings.accuweather_base_url,
        timeout=settings.accuweather_timeout,
        transport=transport,
    )


# ============================================================================
# TOOL HANDLERS
# ============================================================================


async def get_hourly_forecast(
    arguments: Any,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ToolOutcome:
    """Get the 12-hour forecast for a location.

    Args:
        arguments: Raw tool arguments (location, optional units)
        transport: Optional httpx transport override for the provider calls

    Returns:
        ToolOutcome with one "{timestamp}: {temp}°{unit}, {condition}" line per hour
    """
    settings = WeatherSettings()
    model = HourlySessionInput if settings.weather_require_session_id else HourlyForecastInput
    args, failure = validate_arguments(model, arguments)
    if failure:
        return ToolOutcome.failed(failure)

    if not settings.api_key:
        return ToolOutcome.failed(create_missing_api_key_error(PROVIDER_NAME))

    units = UnitSystem(args.units)
    backend = _create_backend(settings, transport)

    try:
        location_key = await backend.search_location(args.location)
        forecast = await backend.get_hourly_forecast(location_key, units)
    except ProviderFailure as e:
        return ToolOutcome.failed(create_provider_failure_error(e, args.location, "hourly"))

    return ToolOutcome.succeeded(format_hourly_forecast(forecast))


async def get_daily_forecast(
    arguments: Any,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ToolOutcome:
    """Get the daily forecast for a location.

    The day count is one of 1, 5, 10 or 15 (default 5) and selects the
    provider's forecast window. Temperatures are labelled with the requested
    unit system.

    Args:
        arguments: Raw tool arguments (location, optional days and units)
        transport: Optional httpx transport override for the provider calls

    Returns:
        ToolOutcome with one line per forecast day
    """
    settings = WeatherSettings()
    model = DailySessionInput if settings.weather_require_session_id else DailyForecastInput
    args, failure = validate_arguments(model, arguments)
    if failure:
        return ToolOutcome.failed(failure)

    if not settings.api_key:
        return ToolOutcome.failed(create_missing_api_key_error(PROVIDER_NAME))

    units = UnitSystem(args.units)
    backend = _create_backend(settings, transport)

    try:
        location_key = await backend.search_location(args.location)
        forecast = await backend.get_daily_forecast(location_key, args.days, units)
    except ProviderFailure as e:
        return ToolOutcome.failed(create_provider_failure_error(e, args.location, "daily"))

    return ToolOutcome.succeeded(format_daily_forecast(forecast, units))


# ============================================================================
# TOOL CATALOG
# ============================================================================


@dataclass(frozen=True)
class ToolDefinition:
    """Catalog entry: name, description, argument models and handler."""
    name: str
    description: str
    input_model: Type[BaseModel]
    session_input_model: Type[BaseModel]
    handler: ToolHandler

    def to_tool(self, require_session_id: bool = False) -> Tool:
        model = self.session_input_model if require_session_id else self.input_model
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=model.model_json_schema(),
        )


TOOLS: Dict[str, ToolDefinition] = {
    TOOL_GET_HOURLY: ToolDefinition(
        name=TOOL_GET_HOURLY,
        description="Get hourly weather forecast for the next 12 hours",
        input_model=HourlyForecastInput,
        session_input_model=HourlySessionInput,
        handler=get_hourly_forecast,
    ),
    TOOL_GET_DAILY: ToolDefinition(
        name=TOOL_GET_DAILY,
        description="Get daily weather forecast for up to 15 days",
        input_model=DailyForecastInput,
        session_input_model=DailySessionInput,
        handler=get_daily_forecast,
    ),
}


def list_tools() -> List[Tool]:
    """Return the tool catalog, with sessionId when the server requires it."""
    require_session_id = WeatherSettings().weather_require_session_id
    return [definition.to_tool(require_session_id) for definition in TOOLS.values()]


# ============================================================================
# DISPATCHER
# ============================================================================


async def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> CallToolResult:
    """Run one tool invocation and return its MCP envelope.

    Args:
        name: Tool name (e.g. "weather-get_hourly")
        arguments: Raw argument object, or None when the caller sent none
        transport: Optional httpx transport override for the provider calls

    Returns:
        CallToolResult: one text item per forecast entry on success, or a
        single text item with isError=True on any failure
    """
    try:
        if arguments is None:
            outcome = ToolOutcome.failed(create_missing_arguments_error())
        elif name not in TOOLS:
            outcome = ToolOutcome.failed(create_unknown_tool_error(name))
        else:
            server.log_tool_start(name, arguments=arguments)
            outcome = await TOOLS[name].handler(arguments, transport=transport)
    except Exception as e:
        logger.error(f"Unexpected error in {name}: {e}", exc_info=True)
        outcome = ToolOutcome.failed(create_unexpected_error(e))

    if outcome.is_error:
        failure = outcome.failure
        server.log_tool_error(name, failure.error_code, failure.message, **failure.context)
        return create_error_result(failure)

    server.log_tool_complete(name, items=len(outcome.lines))
    return server.create_success_result(outcome.lines)


server.register_tools(list_tools, call_tool)

# ============================================================================
# SERVER ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    server.run(transport="stdio")
