"""Geometric Brownian motion path simulation.

Each step applies the exact GBM solution over one interval:

    log_return_t = (mu - 0.5 * sigma^2) * dt + sigma * z_t * sqrt(dt)
    S_{t+1} = S_t * exp(log_return_t)

A path always starts at S0 and gains one price per shock, so N shocks
produce N + 1 prices.
"""

import logging
import math

import numpy as np

from tsmc_api.domain.entities.simulation import SimulationParameters
from tsmc_api.domain.exceptions import InvalidParameterError
from tsmc_api.domain.services.shocks import generate_shocks

logger = logging.getLogger(__name__)


def _log_returns(params: SimulationParameters, shocks: np.ndarray) -> np.ndarray:
    drift = (params.mu - 0.5 * np.float64(params.sigma) ** 2) * params.dt
    diffusion = params.sigma * math.sqrt(params.dt)
    return drift + diffusion * np.asarray(shocks, dtype=float)


def step_multiplier(mu: float, sigma: float, dt: float, shock: float) -> float:
    """Price multiplier for a single GBM step.

    With sigma == 0 the shock has no effect and the multiplier is
    exp(mu * dt); with mu == sigma == 0 it is exactly 1.0.
    """
    if dt <= 0:
        raise InvalidParameterError("dt must be strictly positive", field="dt", value=dt)
    return math.exp((mu - 0.5 * sigma**2) * dt + sigma * shock * math.sqrt(dt))


def simulate_path(params: SimulationParameters, shocks: np.ndarray) -> np.ndarray:
    """Simulate one price path from a shock sequence.

    Args:
        params: GBM parameters (validated on construction)
        shocks: 1-D sequence of standard-normal draws

    Returns:
        Read-only float array of length len(shocks) + 1 whose first
        element is params.starting_value

    Raises:
        InvalidParameterError: a price overflows to a non-finite value
    """
    shocks = np.asarray(shocks, dtype=float)
    if shocks.ndim != 1:
        raise InvalidParameterError("Shocks must be a 1-D sequence", field="shocks")

    path = np.empty(len(shocks) + 1, dtype=float)
    path[0] = params.starting_value
    with np.errstate(over="ignore", invalid="ignore"):
        log_returns = _log_returns(params, shocks)
        path[1:] = params.starting_value * np.exp(np.cumsum(log_returns))
    if not np.isfinite(path).all():
        raise InvalidParameterError("Simulated prices overflow")
    path.flags.writeable = False
    return path


def simulate_paths(
    params: SimulationParameters,
    size: int,
    samples: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Simulate several independent paths.

    Every path gets its own shock sequence drawn from rng, in order, so a
    seeded generator reproduces the whole batch.

    Args:
        params: GBM parameters
        size: Number of steps per path
        samples: Number of paths (at least 1)
        rng: Generator owned by the caller

    Returns:
        Float array of shape (samples, size + 1)
    """
    if size < 0:
        raise InvalidParameterError("size cannot be negative", field="size", value=size)
    if samples < 1:
        raise InvalidParameterError("samples must be at least 1", field="samples", value=samples)

    paths = np.empty((samples, size + 1), dtype=float)
    for i in range(samples):
        paths[i] = simulate_path(params, generate_shocks(size, rng))

    logger.debug(f"Simulated {samples} GBM paths of {size} steps")
    return paths
