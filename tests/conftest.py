"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def zero():
    """Provide a fresh zero value."""
    from bigint import BigInt

    return BigInt()


@pytest.fixture
def large_value():
    """Provide a value spanning several limbs."""
    from bigint import BigInt

    return BigInt("123456789012345678901234567890")


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test integers."""
    return [
        0,
        1,
        -1,
        9999,
        10000,
        -10000,
        10001,
        99999999,
        100000000,
        2**31 - 1,
        -(2**31),
        2**63 - 1,
        -(2**63),
        10**40 + 7,
        -(10**40) - 7,
    ]
