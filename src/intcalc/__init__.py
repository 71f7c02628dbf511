"""
Checked fixed-width integer arithmetic.

This package provides:
- BasicCalculator: signed 32-bit add, subtract, multiply, divide
- array_sum, array_max, array_min: reductions over integer sequences
- ScientificCalculator: power, factorial, average and parity by
  delegation to a BasicCalculator
"""

import logging

from intcalc.arrays import array_max, array_min, array_sum
from intcalc.core import BasicCalculator
from intcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidInputError,
    OutOfRangeError,
    OverflowError,
)
from intcalc.operations import (
    add,
    divide,
    multiply,
    narrow,
    remainder,
    subtract,
)
from intcalc.scientific import ScientificCalculator
from intcalc.validators import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    OverflowPolicy,
    validate_int,
    validate_int32,
    validate_non_negative,
    validate_sequence,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "BasicCalculator",
    "CalculatorError",
    "DivisionByZeroError",
    "EmptyInputError",
    "InvalidArgumentError",
    "InvalidInputError",
    "OutOfRangeError",
    "OverflowError",
    "OverflowPolicy",
    "ScientificCalculator",
    "add",
    "array_max",
    "array_min",
    "array_sum",
    "divide",
    "multiply",
    "narrow",
    "remainder",
    "subtract",
    "validate_int",
    "validate_int32",
    "validate_non_negative",
    "validate_sequence",
]

__version__ = "0.1.0"
