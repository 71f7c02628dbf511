"""Scientific calculator built by delegation to BasicCalculator."""

from __future__ import annotations

from collections.abc import Sequence

from intcalc.core import BasicCalculator
from intcalc.operations import narrow
from intcalc.validators import validate_int32, validate_non_negative, validate_sequence


class ScientificCalculator:
    """
    Derived integer operations: power, factorial, average and parity.

    Iterated arithmetic is routed through an owned BasicCalculator, so
    its overflow policy and errors carry over unchanged.

    Example:
        >>> sci = ScientificCalculator()
        >>> sci.power(3, 4)
        81
        >>> sci.factorial(6)
        720
        >>> sci.average([10, 20, 30])
        20.0
    """

    __slots__ = ("_basic",)

    def __init__(self, basic: BasicCalculator | None = None) -> None:
        self._basic = basic if basic is not None else BasicCalculator()

    @property
    def basic(self) -> BasicCalculator:
        """The calculator every iterated operation delegates to."""
        return self._basic

    def power(self, base: int, exponent: int) -> int:
        """
        Raise base to a non-negative integer exponent.

        power(b, 0) is 1 for every base, including 0.

        Args:
            base: The base number
            exponent: The exponent, must be >= 0

        Returns:
            base multiplied by itself exponent times

        Raises:
            InvalidArgumentError: If exponent is negative
            OverflowError: If the result does not fit in 32 bits
        """
        validate_int32(base)
        validate_non_negative(exponent, "Exponent must be non-negative")

        # Square-and-multiply; every partial product divides base**exponent,
        # so it overflows exactly when the iterated product would.
        result = 1
        square = base
        while exponent:
            if exponent & 1:
                result = self._basic.multiply(result, square)
            exponent >>= 1
            if exponent:
                square = self._basic.multiply(square, square)
        return result

    def factorial(self, n: int) -> int:
        """
        Compute n! as a signed 64-bit integer.

        Raises:
            InvalidArgumentError: If n is negative
            OverflowError: If n! does not fit in 64 bits (n >= 21) and the
                basic calculator raises on overflow
        """
        validate_non_negative(n, "Factorial is not defined for negative numbers")

        result = 1
        for i in range(2, n + 1):
            result = narrow(result * i, 64, "factorial", (n,), self._basic.overflow)
            if result == 0:
                # Wrapped past 2**64 dividing n!; it stays zero from here
                break
        return result

    def average(self, numbers: Sequence[int] | None) -> float:
        """
        Arithmetic mean of a non-empty sequence.

        The sum is accumulated with the basic calculator's 32-bit add.

        Raises:
            EmptyInputError: If numbers is None or empty
            OverflowError: If the running sum leaves the 32-bit range
        """
        validate_sequence(numbers)

        total = 0
        for number in numbers:
            total = self._basic.add(total, number)
        return total / len(numbers)

    def is_even(self, number: int) -> bool:
        """Return True if number is divisible by 2."""
        return validate_int32(number) % 2 == 0

    def __repr__(self) -> str:
        return f"ScientificCalculator(basic={self._basic!r})"
