"""Pytest configuration and shared fixtures."""

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
import os

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a Calculator with the default limits."""
    from strictcalc import Calculator

    return Calculator()


@pytest.fixture
def narrow_limits():
    """Limits whose decimal headroom ends just above 10**10."""
    from strictcalc import Limits

    return Limits(precision=14, max_exponent=10)


@pytest.fixture
def sample_expressions():
    """Provide expressions with their expected rendered output."""
    return [
        ("12.5 * 3", "37.5"),
        ("1 / 3", "0.3333"),
        ("2 / 3", "0.6667"),
        ("-0.0001 + 0", "-0.0001"),
        ("1.5 + 1.5", "3"),
        ("10 - 6.9", "3.1"),
        ("1000000 * 1000", "1000000000"),
        ("-1000000 * 1000", "-1000000000"),
        ("0.0001 / 2", "0"),
        ("0.0003 / 2", "0.0002"),
    ]
