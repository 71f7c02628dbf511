"""Core signed 32-bit arithmetic operations with overflow protection."""

import logging

from intcalc.exceptions import DivisionByZeroError, OverflowError
from intcalc.validators import OverflowPolicy, int_bounds, validate_int, validate_int32

logger = logging.getLogger(__name__)


def narrow(
    value: int,
    bits: int = 32,
    operation: str = "narrow",
    operands: tuple[int, ...] = (),
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Narrow an exact integer result to a signed ``bits``-wide integer.

    Under ``OverflowPolicy.WRAP`` the value is reduced modulo ``2**bits``
    into the signed range, matching two's-complement hardware.

    Args:
        value: The exact mathematical result
        bits: Width of the target integer
        operation: Operation name reported on overflow
        operands: Operands reported on overflow
        policy: Overflow handling

    Returns:
        The value, if it fits, or its wrapped form under WRAP

    Raises:
        OverflowError: If value does not fit and policy is RAISE
    """
    validate_int(value)
    lo, hi = int_bounds(bits)
    if lo <= value <= hi:
        return value

    if policy is OverflowPolicy.WRAP:
        return lo + (value - lo) % (1 << bits)

    logger.debug("Overflow in %s%r: %d does not fit int%d", operation, operands, value, bits)
    raise OverflowError(operation, *operands, bits=bits)


def add(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.RAISE) -> int:
    """
    Add two 32-bit integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidArgumentError: If inputs are not 32-bit integers
        OverflowError: If the sum does not fit in 32 bits
    """
    validate_int32(a)
    validate_int32(b)
    return narrow(a + b, 32, "addition", (a, b), policy)


def subtract(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.RAISE) -> int:
    """
    Subtract b from a.

    Properties:
        - Inverse of add: subtract(add(a, b), b) == a
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidArgumentError: If inputs are not 32-bit integers
        OverflowError: If the difference does not fit in 32 bits
    """
    validate_int32(a)
    validate_int32(b)
    return narrow(a - b, 32, "subtraction", (a, b), policy)


def multiply(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.RAISE) -> int:
    """
    Multiply two 32-bit integers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidArgumentError: If inputs are not 32-bit integers
        OverflowError: If the product does not fit in 32 bits
    """
    validate_int32(a)
    validate_int32(b)
    return narrow(a * b, 32, "multiplication", (a, b), policy)


def _truncated_quotient(a: int, b: int) -> int:
    # Python's // floors; flip to truncation when the signs differ
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def divide(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.RAISE) -> int:
    """
    Divide a by b, truncating toward zero.

    Properties:
        - divide(7, 2) == 3 and divide(-7, 2) == -3
        - Identity: divide(a, 1) == a
        - Reconstruction: divide(a, b) * b + remainder(a, b) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b with the fractional part discarded

    Raises:
        InvalidArgumentError: If inputs are not 32-bit integers
        DivisionByZeroError: If b is zero
        OverflowError: For divide(INT32_MIN, -1) under RAISE
    """
    validate_int32(a)
    validate_int32(b)

    if b == 0:
        logger.debug("Division by zero: %d / 0", a)
        raise DivisionByZeroError(a)

    return narrow(_truncated_quotient(a, b), 32, "division", (a, b), policy)


def remainder(a: int, b: int) -> int:
    """
    Remainder of the truncating division of a by b.

    The result takes the sign of the dividend, unlike Python's ``%``.

    Properties:
        - Range: abs(remainder(a, b)) < abs(b)
        - Reconstruction: divide(a, b) * b + remainder(a, b) == a

    Raises:
        InvalidArgumentError: If inputs are not 32-bit integers
        DivisionByZeroError: If b is zero
    """
    validate_int32(a)
    validate_int32(b)

    if b == 0:
        logger.debug("Division by zero: %d %% 0", a)
        raise DivisionByZeroError(a)

    return a - _truncated_quotient(a, b) * b
