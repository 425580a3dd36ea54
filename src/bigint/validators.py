"""Input validation functions with strict type checking."""

import logging
import re
from typing import Any

from bigint.exceptions import (
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

# Fixed-width integer limits
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def validate_integer(value: Any) -> int:
    """
    Validate that a value is a Python integer.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int
    """
    if not isinstance(value, int):
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")

    return value


def validate_decimal_string(text: Any) -> str:
    """
    Validate that a string matches the grammar ``[+-]?[0-9]+``.

    Only ASCII digits are accepted; surrounding whitespace is rejected.

    Args:
        text: The string to validate

    Returns:
        The validated string

    Raises:
        InvalidInputError: If text is not a str
        InvalidFormatError: If text is empty, a bare sign, or has non-digits
    """
    if not isinstance(text, str):
        raise InvalidInputError(text, f"Expected str, got {type(text).__name__}")

    if DECIMAL_PATTERN.fullmatch(text) is None:
        logger.debug("rejecting malformed decimal string %r", text)
        if text in ("", "+", "-"):
            raise InvalidFormatError(text, "Missing digits")
        raise InvalidFormatError(text)

    return text


def validate_range(
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
) -> int:
    """
    Validate that an integer is within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int
        OutOfRangeError: If value is outside the range
    """
    validate_integer(value)

    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)

    return value


def validate_divisor(numerator: object, divisor: object) -> None:
    """
    Validate that a divisor is non-zero.

    Args:
        numerator: The dividend, reported in the error
        divisor: Any value whose truthiness means "non-zero"

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if not divisor:
        logger.debug("division of %s by zero", numerator)
        raise DivisionByZeroError(numerator)
