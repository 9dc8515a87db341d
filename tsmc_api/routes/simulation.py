"""Monte Carlo simulation endpoint."""

import logging

import numpy as np
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from tsmc_api.core.config import (
    get_max_simulation_samples,
    get_max_simulation_size,
    get_simulation_seed,
)
from tsmc_api.domain.constants import (
    DEFAULT_DT,
    DEFAULT_MU,
    DEFAULT_SAMPLES,
    DEFAULT_SIGMA,
    DEFAULT_SIMULATION_SIZE,
    DEFAULT_STARTING_VALUE,
)
from tsmc_api.domain.entities.simulation import SimulationParameters
from tsmc_api.domain.exceptions import InvalidParameterError
from tsmc_api.domain.services.gbm import simulate_paths
from tsmc_api.domain.services.shocks import make_rng

logger = logging.getLogger(__name__)

router = APIRouter()


class SimulationResponse(BaseModel):
    """Response model for the simulation endpoint."""

    message: str = Field(..., description="Summary of the simulation run")
    results: list[list[float]] = Field(
        ...,
        description="One simulated price path per sample, each size + 1 long",
    )


# ============================================================================
# Dependency injection for testability
# ============================================================================


def get_rng(
    seed: int | None = Query(None, ge=0, description="Seed for a reproducible run"),
) -> np.random.Generator:
    """Get a random generator private to this request."""
    return make_rng(seed if seed is not None else get_simulation_seed())


# ============================================================================
# Endpoint
# ============================================================================


@router.get("/simulate", response_model=SimulationResponse)
def simulate(
    size: int = Query(DEFAULT_SIMULATION_SIZE, ge=0, description="Steps per path"),
    starting_value: float = Query(DEFAULT_STARTING_VALUE, description="Initial price S0"),
    mu: float = Query(DEFAULT_MU, description="Drift rate"),
    sigma: float = Query(DEFAULT_SIGMA, ge=0, description="Volatility"),
    dt: float = Query(DEFAULT_DT, gt=0, description="Time-step length (1/252 = daily)"),
    samples: int = Query(DEFAULT_SAMPLES, ge=1, description="Number of paths"),
    rng: np.random.Generator = Depends(get_rng),
) -> SimulationResponse:
    """Simulate GBM price paths.

    Each path starts at starting_value and takes size steps of
    exp((mu - sigma^2 / 2) * dt + sigma * z * sqrt(dt)) with z ~ N(0, 1).

    Raises:
        HTTPException 400: size/samples above the configured limits, or
            parameters outside the GBM domain
    """
    max_size = get_max_simulation_size()
    max_samples = get_max_simulation_samples()
    if size > max_size:
        raise HTTPException(status_code=400, detail=f"size must be at most {max_size}")
    if samples > max_samples:
        raise HTTPException(status_code=400, detail=f"samples must be at most {max_samples}")

    try:
        params = SimulationParameters(starting_value=starting_value, mu=mu, sigma=sigma, dt=dt)
        paths = simulate_paths(params, size=size, samples=samples, rng=rng)
    except InvalidParameterError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    logger.info(f"Simulated {samples} paths of {size} steps (mu={mu}, sigma={sigma}, dt={dt})")

    return SimulationResponse(
        message=f"Simulated {samples} GBM paths of {size} steps",
        results=paths.tolist(),
    )
