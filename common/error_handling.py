"""ABOUTME: Shared error handling utilities for the weather MCP tools.

Provides standardized error codes, the provider failure classification, the
user-facing message builders, and the conversion of a classified failure into
the MCP error envelope.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List
from mcp.types import TextContent, CallToolResult


PROVIDER_NAME: str = "AccuWeather"


# =============================================================================
# Error Code Constants
# =============================================================================

# Input validation errors
ERROR_VALIDATION_FAILED: str = "validation_failed"
ERROR_INVALID_INPUT: str = "invalid_input"
ERROR_MISSING_ARGUMENTS: str = "missing_arguments"
ERROR_UNKNOWN_TOOL: str = "unknown_tool"

# Configuration errors
ERROR_CONFIGURATION_MISSING: str = "configuration_missing"

# Provider errors
ERROR_LOCATION_NOT_FOUND: str = "location_not_found"
ERROR_NO_FORECAST_DATA: str = "no_forecast_data"
ERROR_UNAUTHORIZED: str = "unauthorized"
ERROR_NOT_FOUND: str = "not_found"
ERROR_PROVIDER_ERROR: str = "provider_error"
ERROR_NETWORK_ERROR: str = "network_error"
ERROR_FETCH_FAILED: str = "fetch_failed"

# General errors
ERROR_UNEXPECTED: str = "unexpected_error"

GENERIC_FETCH_ERROR_MESSAGE = "An error occurred while fetching weather data."


# =============================================================================
# HTTP Status Code Helpers
# =============================================================================

class HTTPStatusCodes:
    """Helper methods for HTTP status code checks.

    Provides semantic methods to check HTTP status codes instead of
    hardcoding numeric values throughout the codebase.
    """

    @staticmethod
    def is_unauthorized(status_code: int) -> bool:
        """Check if status code indicates a rejected credential.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is 401 (Unauthorized)
        """
        return status_code == 401

    @staticmethod
    def is_not_found(status_code: int) -> bool:
        """Check if status code indicates resource not found.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is 404 (Not Found)
        """
        return status_code == 404


# =============================================================================
# Provider Failure Classification
# =============================================================================

class FailureKind(str, Enum):
    """Classified provider failure reasons."""
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"
    NO_LOCATION_MATCH = "no_location_match"
    NO_FORECAST_DATA = "no_forecast_data"


STAGE_LOCATION_SEARCH = "location_search"
STAGE_FORECAST = "forecast"


class ProviderFailure(Exception):
    """A provider call that ended without usable data.

    Raised by the provider client after the fault has been classified, so
    callers only ever inspect ``kind`` instead of raw transport exceptions.
    """

    def __init__(
        self,
        kind: FailureKind,
        stage: str,
        status_code: Optional[int] = None,
        provider_message: Optional[str] = None,
    ):
        self.kind = kind
        self.stage = stage
        self.status_code = status_code
        self.provider_message = provider_message
        detail = f" ({status_code})" if status_code is not None else ""
        super().__init__(f"{kind.value} during {stage}{detail}")


# =============================================================================
# Tool Failures (normalized)
# =============================================================================

@dataclass(frozen=True)
class ToolFailure:
    """A normalized failure: the single text shown to the caller plus log context.

    Attributes:
        message: Exact user-facing error text
        error_code: Machine-readable error code (ERROR_* constants)
        error_type: Error category (e.g. "validation_error", "provider_error")
        context: Extra details for logging only
    """
    message: str
    error_code: str
    error_type: str = "error"
    context: Dict[str, Any] = field(default_factory=dict)


def create_error_result(failure: ToolFailure) -> CallToolResult:
    """Create the MCP error envelope for a normalized failure.

    The envelope always holds exactly one text item and sets ``isError``.

    Args:
        failure: Normalized failure to render

    Returns:
        CallToolResult with a single text item and isError=True
    """
    return CallToolResult(
        content=[TextContent(type="text", text=failure.message)],
        isError=True,
    )


# =============================================================================
# Message Builders
# =============================================================================

def create_validation_error(violations: List[str]) -> ToolFailure:
    """Create a validation failure from collected ``field: message`` violations.

    Example:
        create_validation_error(["location: Location must be at least 1 character"])
    """
    return ToolFailure(
        message=f"Invalid input: {', '.join(violations)}",
        error_code=ERROR_VALIDATION_FAILED,
        error_type="validation_error",
        context={"violations": len(violations)},
    )


def create_input_parse_error() -> ToolFailure:
    """Create the failure for an argument object that cannot be validated at all."""
    return ToolFailure(
        message="An unexpected error occurred during input validation.",
        error_code=ERROR_INVALID_INPUT,
        error_type="validation_error",
    )


def create_missing_arguments_error() -> ToolFailure:
    return ToolFailure(
        message="Error: No arguments provided for the tool.",
        error_code=ERROR_MISSING_ARGUMENTS,
        error_type="validation_error",
    )


def create_unknown_tool_error(tool_name: str) -> ToolFailure:
    return ToolFailure(
        message=f"Unknown tool: {tool_name}",
        error_code=ERROR_UNKNOWN_TOOL,
        error_type="validation_error",
        context={"requested_tool": tool_name},
    )


def create_missing_api_key_error(provider: str = PROVIDER_NAME) -> ToolFailure:
    return ToolFailure(
        message=f"Error: {provider} API key not configured",
        error_code=ERROR_CONFIGURATION_MISSING,
        error_type="configuration_error",
    )


def create_unexpected_error(error: Exception) -> ToolFailure:
    return ToolFailure(
        message=f"Error: {error}",
        error_code=ERROR_UNEXPECTED,
        error_type="unexpected_error",
    )


def create_provider_failure_error(
    failure: ProviderFailure,
    location: str,
    granularity: str,
    provider: str = PROVIDER_NAME,
) -> ToolFailure:
    """Map a classified provider failure to its user-facing message.

    Args:
        failure: Classified failure raised by the provider client
        location: Location text as requested (never the resolved key)
        granularity: Forecast granularity for empty-data messages ("hourly", "daily")
        provider: Provider display name

    Returns:
        ToolFailure carrying the exact message for the failure kind
    """
    context = {"location": location, "stage": failure.stage}
    if failure.status_code is not None:
        context["status_code"] = failure.status_code

    kind = failure.kind
    if kind == FailureKind.NO_LOCATION_MATCH:
        return ToolFailure(
            message=f"No location found for: {location}",
            error_code=ERROR_LOCATION_NOT_FOUND,
            error_type="not_found_error",
            context=context,
        )
    if kind == FailureKind.NO_FORECAST_DATA:
        return ToolFailure(
            message=f"No {granularity} forecast data available for location: {location}",
            error_code=ERROR_NO_FORECAST_DATA,
            error_type="not_found_error",
            context=context,
        )
    if kind == FailureKind.UNAUTHORIZED:
        return ToolFailure(
            message=f"Invalid {provider} API key. Please check your credentials.",
            error_code=ERROR_UNAUTHORIZED,
            error_type="provider_error",
            context=context,
        )
    if kind == FailureKind.NOT_FOUND:
        return ToolFailure(
            message=f"Location not found: {location}",
            error_code=ERROR_NOT_FOUND,
            error_type="not_found_error",
            context=context,
        )
    if kind == FailureKind.HTTP_ERROR:
        detail = failure.provider_message or f"Request failed with status code {failure.status_code}"
        return ToolFailure(
            message=f"{provider} API error ({failure.status_code}): {detail}",
            error_code=ERROR_PROVIDER_ERROR,
            error_type="provider_error",
            context=context,
        )
    if kind == FailureKind.UNREACHABLE:
        return ToolFailure(
            message=f"Network error: Unable to connect to {provider} API.",
            error_code=ERROR_NETWORK_ERROR,
            error_type="network_error",
            context=context,
        )

    # MALFORMED
    return ToolFailure(
        message=GENERIC_FETCH_ERROR_MESSAGE,
        error_code=ERROR_FETCH_FAILED,
        error_type="provider_error",
        context=context,
    )
