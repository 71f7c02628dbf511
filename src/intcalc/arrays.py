"""Stateless reductions over sequences of signed 32-bit integers."""

from __future__ import annotations

from collections.abc import Sequence

from intcalc.operations import narrow
from intcalc.validators import validate_int32, validate_sequence


def array_sum(numbers: Sequence[int] | None) -> int:
    """
    Sum all elements of a sequence.

    The running total is kept on a signed 64-bit accumulator and the
    final value is narrowed to 32 bits.

    Args:
        numbers: The integers to sum, or None

    Returns:
        The sum, or 0 when numbers is None or empty

    Raises:
        InvalidArgumentError: If an element is not a 32-bit integer
        OverflowError: If the sum does not fit in 32 bits
    """
    if not numbers:
        return 0

    total = 0
    for number in numbers:
        total = narrow(total + validate_int32(number), 64, "sum", (total, number))
    return narrow(total, 32, "sum", tuple(numbers))


def array_max(numbers: Sequence[int] | None) -> int:
    """
    Find the largest element of a sequence.

    Raises:
        EmptyInputError: If numbers is None or empty
    """
    return max(validate_sequence(numbers))


def array_min(numbers: Sequence[int] | None) -> int:
    """
    Find the smallest element of a sequence.

    Raises:
        EmptyInputError: If numbers is None or empty
    """
    return min(validate_sequence(numbers))
