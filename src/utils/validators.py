"""
Input validation functions for the Bakery Plan Client application.

This module provides validation functions for user inputs including:
- Numeric parsing and validation (numbers typed as free text)
- String validation (length, required fields)
- Unit presence
- Login PIN format
"""

import math
from typing import Any, Optional, Tuple, Union

from .constants import (
    ERROR_INVALID_NUMBER,
    ERROR_INVALID_POSITIVE,
    ERROR_REQUIRED_FIELD,
    PIN_LENGTH,
)


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a user-entered value into a finite number.

    Strings are stripped first; blank strings, booleans, NaN and infinity
    are not numbers.

    Args:
        value: Raw value (str, int, float or None)

    Returns:
        The parsed float, or None if the value is not a number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def whole_to_int(number: float) -> Union[int, float]:
    """Return number as an int when it has no fractional part, e.g. 200.0 -> 200."""
    return int(number) if float(number).is_integer() else number


def is_numeric(value: Any) -> bool:
    """Return True if value parses as a finite number."""
    return parse_number(value) is not None


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    return True, ""


def validate_string_length(
    value: str, max_length: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a string doesn't exceed maximum length.

    Args:
        value: The string value to validate
        max_length: Maximum allowed length
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value and len(value) > max_length:
        return False, f"{field_name}: Must be {max_length} characters or less"
    return True, ""


def validate_positive_number(value: Any, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is a positive number (> 0).

    Args:
        value: The value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    number = parse_number(value)
    if number is None:
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if number <= 0:
        return False, f"{field_name}: {ERROR_INVALID_POSITIVE}"
    return True, ""


def validate_unit(unit: Optional[str], field_name: str = "Unit") -> Tuple[bool, str]:
    """
    Validate that a unit is present.

    The backend owns the unit catalogue, so any non-empty unit is accepted.

    Args:
        unit: The unit string to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    return validate_required_string(unit, field_name)


def validate_pin(pin: str) -> Tuple[bool, str]:
    """
    Validate a login PIN.

    Args:
        pin: Digits entered on the PIN pad

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not pin or len(pin) != PIN_LENGTH or not pin.isdigit():
        return False, f"PIN must be {PIN_LENGTH} digits"
    return True, ""


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Sanitize a string value by stripping whitespace and converting empty strings to None.

    Args:
        value: The string value to sanitize

    Returns:
        Sanitized string or None
    """
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None
