"""Random shock generation for GBM simulation.

Shocks are drawn from an explicitly passed ``numpy.random.Generator`` so
callers own seeding and never share a generator between concurrent
simulations.
"""

import numpy as np

from tsmc_api.domain.exceptions import InvalidParameterError


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a private random generator.

    Args:
        seed: Optional seed. None draws fresh entropy from the OS.

    Returns:
        A new numpy Generator (PCG64)
    """
    return np.random.default_rng(seed)


def generate_shocks(n: int, rng: np.random.Generator) -> np.ndarray:
    """Draw n independent standard-normal shocks.

    Args:
        n: Number of shocks (0 yields an empty array)
        rng: Generator to draw from

    Returns:
        Read-only float array of length n
    """
    if n < 0:
        raise InvalidParameterError("Shock count cannot be negative", field="size", value=n)

    shocks = rng.standard_normal(n)
    shocks.flags.writeable = False
    return shocks
