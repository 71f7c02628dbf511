"""Custom exceptions for the intcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: int) -> None:
        super().__init__("Division by zero is not allowed", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when the true result does not fit in the declared width."""

    def __init__(self, operation: str, *operands: int, bits: int = 32) -> None:
        super().__init__(f"Overflow in {operation} (int{bits})", operands)
        self.operation = operation
        self.operands = operands
        self.bits = bits


class InvalidArgumentError(CalculatorError):
    """Raised when a precondition on a scalar argument fails."""

    def __init__(self, value: Any, reason: str = "invalid argument") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidInputError(InvalidArgumentError):
    """Raised when an operand is not an integer."""


class OutOfRangeError(InvalidArgumentError):
    """Raised when an operand is outside its declared integer width."""

    def __init__(self, value: int, min_val: int, max_val: int) -> None:
        super().__init__(value, f"Value out of range [{min_val}, {max_val}]")
        self.min_val = min_val
        self.max_val = max_val


class EmptyInputError(CalculatorError):
    """Raised when a required sequence is absent or empty."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Array must not be null or empty", value)
