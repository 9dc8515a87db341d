"""Pytest configuration and fixtures for all tests.

This module ensures tests run in isolation from production environment variables.
"""

import os

import pytest

# Service configuration variables that should not affect tests
TSMC_ENV_VARS = [
    "TSMC_SIMULATION_SEED",
    "TSMC_MAX_SIMULATION_SIZE",
    "TSMC_MAX_SIMULATION_SAMPLES",
    "TSMC_MVO_REGULARIZATION",
    "TSMC_MVO_SHRINKAGE",
    "TSMC_MVO_RISK_AVERSION",
]


@pytest.fixture(autouse=True)
def isolate_from_env():
    """Clear TSMC_* env vars before each test so defaults apply.

    This fixture runs automatically for every test (autouse=True).
    It saves original values, clears them for the test, then restores after.
    """
    original_values = {}
    for var in TSMC_ENV_VARS:
        if var in os.environ:
            original_values[var] = os.environ.pop(var)

    yield

    for var, value in original_values.items():
        os.environ[var] = value
