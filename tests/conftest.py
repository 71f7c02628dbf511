"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def basic():
    """Provide a BasicCalculator with the default RAISE policy."""
    from intcalc import BasicCalculator

    return BasicCalculator()


@pytest.fixture
def wrapping():
    """Provide a BasicCalculator that wraps on overflow."""
    from intcalc import BasicCalculator, OverflowPolicy

    return BasicCalculator(OverflowPolicy.WRAP)


@pytest.fixture
def sci():
    """Provide a fresh ScientificCalculator."""
    from intcalc import ScientificCalculator

    return ScientificCalculator()


@pytest.fixture
def boundary_ints():
    """Provide a set of interesting 32-bit values."""
    return [
        0,
        1,
        -1,
        2,
        -2,
        65535,
        65536,
        -65536,
        2**31 - 1,
        -(2**31),
        2**31 - 2,
        -(2**31) + 1,
    ]
