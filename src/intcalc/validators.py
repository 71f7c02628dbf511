"""Input validation functions with strict integer-width checking."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum, auto

from intcalc.exceptions import (
    EmptyInputError,
    InvalidArgumentError,
    InvalidInputError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

# Signed integer limits
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class OverflowPolicy(Enum):
    """What to do when a result would not fit in its declared width."""

    RAISE = auto()  # Raise OverflowError
    WRAP = auto()  # Two's-complement wrap-around


def int_bounds(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def validate_int(value: object) -> int:
    """
    Validate that a value is a plain integer.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        InvalidInputError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected non-integer operand %r", value)
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")
    return value


def validate_int32(value: object) -> int:
    """
    Validate that a value is an integer inside the signed 32-bit range.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int
        OutOfRangeError: If value does not fit in 32 bits
    """
    validate_int(value)
    if not INT32_MIN <= value <= INT32_MAX:
        logger.debug("Rejected out-of-range operand %d", value)
        raise OutOfRangeError(value, INT32_MIN, INT32_MAX)
    return value


def validate_non_negative(value: object, reason: str) -> int:
    """
    Validate that a 32-bit integer is zero or greater.

    Args:
        value: The value to validate
        reason: Message carried by the error when the check fails

    Raises:
        InvalidArgumentError: If value is negative
    """
    validate_int32(value)
    if value < 0:
        logger.debug("Rejected negative argument %d", value)
        raise InvalidArgumentError(value, reason)
    return value


def validate_sequence(numbers: Sequence[int] | None) -> Sequence[int]:
    """
    Validate that a sequence is present, non-empty and holds 32-bit integers.

    Raises:
        EmptyInputError: If numbers is None or empty
        InvalidInputError: If an element is not an int
        OutOfRangeError: If an element does not fit in 32 bits
    """
    if not numbers:
        logger.debug("Rejected absent or empty sequence %r", numbers)
        raise EmptyInputError(numbers)
    for number in numbers:
        validate_int32(number)
    return numbers
