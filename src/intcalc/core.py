"""BasicCalculator class providing stateless signed 32-bit arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from intcalc.operations import add, divide, multiply, remainder, subtract
from intcalc.validators import OverflowPolicy

if TYPE_CHECKING:
    from collections.abc import Callable


class BasicCalculator:
    """
    A basic integer calculator over signed 32-bit operands.

    Instances carry no state beyond their overflow policy, so any two
    calculators with the same policy behave identically.

    Example:
        >>> calc = BasicCalculator()
        >>> calc.divide(-7, 2)
        -3
        >>> BasicCalculator(OverflowPolicy.WRAP).add(2**31 - 1, 1)
        -2147483648
    """

    __slots__ = ("_overflow",)

    def __init__(self, overflow: OverflowPolicy = OverflowPolicy.RAISE) -> None:
        """
        Initialize calculator with an overflow policy.

        Args:
            overflow: RAISE (default) raises OverflowError, WRAP wraps
                around like two's-complement hardware
        """
        self._overflow = OverflowPolicy(overflow)

    @property
    def overflow(self) -> OverflowPolicy:
        """Overflow policy applied to every result."""
        return self._overflow

    def _apply(self, operation: Callable[..., int], a: int, b: int) -> int:
        return operation(a, b, self._overflow)

    def add(self, a: int, b: int) -> int:
        """Return a + b."""
        return self._apply(add, a, b)

    def subtract(self, a: int, b: int) -> int:
        """Return a - b."""
        return self._apply(subtract, a, b)

    def multiply(self, a: int, b: int) -> int:
        """Return a * b."""
        return self._apply(multiply, a, b)

    def divide(self, a: int, b: int) -> int:
        """
        Return a / b truncated toward zero.

        Raises:
            DivisionByZeroError: If b is zero
            OverflowError: For (INT32_MIN, -1) under the RAISE policy
        """
        return self._apply(divide, a, b)

    def remainder(self, a: int, b: int) -> int:
        """Return the truncated remainder of a / b."""
        return remainder(a, b)

    def __repr__(self) -> str:
        return f"BasicCalculator(overflow={self._overflow.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicCalculator):
            return NotImplemented
        return self._overflow is other._overflow

    def __hash__(self) -> int:
        return hash((BasicCalculator, self._overflow))
