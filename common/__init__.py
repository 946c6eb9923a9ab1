"""ABOUTME: Common MCP server utilities and shared infrastructure."""

from .mcp_base import MCPServerBase
from .config import WeatherSettings
from .error_handling import (
    # Error code constants
    ERROR_VALIDATION_FAILED,
    ERROR_INVALID_INPUT,
    ERROR_MISSING_ARGUMENTS,
    ERROR_UNKNOWN_TOOL,
    ERROR_CONFIGURATION_MISSING,
    ERROR_LOCATION_NOT_FOUND,
    ERROR_NO_FORECAST_DATA,
    ERROR_UNAUTHORIZED,
    ERROR_NOT_FOUND,
    ERROR_PROVIDER_ERROR,
    ERROR_NETWORK_ERROR,
    ERROR_FETCH_FAILED,
    ERROR_UNEXPECTED,
    # HTTP status code helpers
    HTTPStatusCodes,
    # Failure classification
    FailureKind,
    ProviderFailure,
    ToolFailure,
    # Error creation functions
    create_error_result,
    create_validation_error,
    create_input_parse_error,
    create_missing_arguments_error,
    create_unknown_tool_error,
    create_missing_api_key_error,
    create_provider_failure_error,
    create_unexpected_error,
)

__all__ = [
    "MCPServerBase",
    "WeatherSettings",
    # Error code constants
    "ERROR_VALIDATION_FAILED",
    "ERROR_INVALID_INPUT",
    "ERROR_MISSING_ARGUMENTS",
    "ERROR_UNKNOWN_TOOL",
    "ERROR_CONFIGURATION_MISSING",
    "ERROR_LOCATION_NOT_FOUND",
    "ERROR_NO_FORECAST_DATA",
    "ERROR_UNAUTHORIZED",
    "ERROR_NOT_FOUND",
    "ERROR_PROVIDER_ERROR",
    "ERROR_NETWORK_ERROR",
    "ERROR_FETCH_FAILED",
    "ERROR_UNEXPECTED",
    # HTTP status code helpers
    "HTTPStatusCodes",
    # Failure classification
    "FailureKind",
    "ProviderFailure",
    "ToolFailure",
    # Error creation functions
    "create_error_result",
    "create_validation_error",
    "create_input_parse_error",
    "create_missing_arguments_error",
    "create_unknown_tool_error",
    "create_missing_api_key_error",
    "create_provider_failure_error",
    "create_unexpected_error",
]
