"""Unit tests for the BasicCalculator class."""

import pytest

from intcalc import (
    INT32_MAX,
    INT32_MIN,
    BasicCalculator,
    DivisionByZeroError,
    OverflowError,
    OverflowPolicy,
)


class TestBasicCalculator:
    """Tests for BasicCalculator delegation and policy."""

    def test_default_policy_raises(self, basic):
        assert basic.overflow is OverflowPolicy.RAISE
        with pytest.raises(OverflowError):
            basic.add(INT32_MAX, 1)

    def test_scenarios(self, basic):
        assert basic.add(2, 3) == 5
        assert basic.subtract(-10, -3) == -7
        assert basic.multiply(-2, 3) == -6
        assert basic.divide(7, 2) == 3
        assert basic.remainder(7, 2) == 1

    def test_divide_by_zero(self, basic):
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            basic.divide(10, 0)

    def test_wrapping_policy(self, wrapping):
        assert wrapping.add(INT32_MAX, 1) == INT32_MIN
        assert wrapping.subtract(INT32_MIN, 1) == INT32_MAX
        assert wrapping.divide(INT32_MIN, -1) == INT32_MIN

    def test_wrapping_matches_checked_in_range(self, basic, wrapping, boundary_ints):
        for a in boundary_ints:
            for b in (1, -2, 3):
                assert wrapping.divide(a, b) == basic.divide(a, b)

    def test_instances_are_interchangeable(self):
        assert BasicCalculator() == BasicCalculator()
        assert hash(BasicCalculator()) == hash(BasicCalculator())
        assert BasicCalculator() != BasicCalculator(OverflowPolicy.WRAP)

    def test_repr(self, wrapping):
        assert repr(wrapping) == "BasicCalculator(overflow=WRAP)"

    def test_no_instance_state(self, basic):
        with pytest.raises(AttributeError):
            basic.total = 1
