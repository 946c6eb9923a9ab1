"""ABOUTME: Shared validation utility module for the weather MCP tools.

Provides reusable validation logic for tool arguments. Supports both Pydantic
field validators and standalone validation functions, plus the conversion of
a pydantic ValidationError into the ``field: message`` list reported to callers.

Design:
- Standalone validator functions return tuple[bool, Optional[str]]
- Field validator functions raise PydanticCustomError so the message reaches
  the caller verbatim (no "Value error, " prefix)
- All violations of a request are collected in one pass
"""

import logging
import re
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from .error_handling import ToolFailure, create_input_parse_error, create_validation_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# =============================================================================
# Validation Constants
# =============================================================================

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
UUID_FORMAT_EXAMPLE = "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"


# =============================================================================
# Standalone Validator Functions
# =============================================================================

def validate_min_length(
    value: str,
    min_length: int,
    label: str = "Value"
) -> Tuple[bool, Optional[str]]:
    """Validate that a string has at least ``min_length`` characters.

    Args:
        value: String value to validate
        min_length: Minimum allowed length
        label: Capitalized name used in the message (default: "Value")

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        is_valid, error = validate_min_length("", 1, "Location")
        # (False, "Location must be at least 1 character")
    """
    if len(value) < min_length:
        unit = "character" if min_length == 1 else "characters"
        return False, f"{label} must be at least {min_length} {unit}"
    return True, None


def validate_uuid(value: str, field_name: str = "value") -> Tuple[bool, Optional[str]]:
    """Validate canonical UUID text (8-4-4-4-12 hex digits).

    Args:
        value: String value to validate
        field_name: Name of field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not UUID_PATTERN.match(value):
        return False, f"{field_name} must be a valid UUID ({UUID_FORMAT_EXAMPLE})"
    return True, None


# =============================================================================
# Pydantic Field Validator Functions (for @field_validator decorators)
# =============================================================================

def validate_min_length_field(v: str, min_length: int = 1, label: str = "Value") -> str:
    """Pydantic field validator for minimum string length.

    Usage:
        @field_validator("location")
        @classmethod
        def validate_location(cls, v: str) -> str:
            return validate_min_length_field(v, 1, "Location")
    """
    is_valid, error = validate_min_length(v, min_length, label)
    if not is_valid:
        raise PydanticCustomError("string_too_short", error)
    return v


def validate_uuid_field(v: str, field_name: str = "value") -> str:
    """Pydantic field validator for canonical UUID strings."""
    is_valid, error = validate_uuid(v, field_name)
    if not is_valid:
        raise PydanticCustomError("invalid_uuid", error)
    return v


def validate_not_boolean_field(v: Any) -> Any:
    """Pydantic "before" validator rejecting booleans for numeric fields.

    bool is a subclass of int, so True would otherwise match a literal 1.

    Usage:
        @field_validator("days", mode="before")
        @classmethod
        def validate_days(cls, v: Any) -> Any:
            return validate_not_boolean_field(v)
    """
    if isinstance(v, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return v


# =============================================================================
# Argument Validation
# =============================================================================

def format_validation_errors(error: ValidationError) -> List[str]:
    """Render every pydantic error as ``field.path: message``.

    Example:
        ["location: Location must be at least 1 character",
         "units: Input should be 'metric' or 'imperial'"]
    """
    violations = []
    for item in error.errors():
        path = ".".join(str(part) for part in item.get("loc", ()))
        violations.append(f"{path}: {item['msg']}" if path else item["msg"])
    return violations


def validate_arguments(
    model: Type[ModelT],
    arguments: Any
) -> Tuple[Optional[ModelT], Optional[ToolFailure]]:
    """Validate a raw argument mapping against a tool's input model.

    Args:
        model: Pydantic model describing the tool's arguments
        arguments: Raw arguments as received from the transport

    Returns:
        Tuple of (validated_model, failure); exactly one is None
    """
    if not isinstance(arguments, Mapping):
        logger.warning(f"Unparseable arguments for {model.__name__}: {type(arguments).__name__}")
        return None, create_input_parse_error()

    try:
        return model.model_validate(dict(arguments)), None
    except ValidationError as e:
        violations = format_validation_errors(e)
        logger.warning(f"Input validation failed for {model.__name__}: {violations}")
        return None, create_validation_error(violations)
    except Exception as e:
        logger.error(f"Unexpected error validating {model.__name__}: {e}", exc_info=True)
        return None, create_input_parse_error()
