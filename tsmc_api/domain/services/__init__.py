"""Domain services - pure business logic.

These services contain the core algorithms: shock generation, GBM path
simulation, price matrix validation and the weighting algorithms used
by the default portfolio optimizer.
"""

from tsmc_api.domain.services.gbm import simulate_path, simulate_paths, step_multiplier
from tsmc_api.domain.services.hrp import compute_hrp_weights
from tsmc_api.domain.services.mvo import compute_mvo_weights
from tsmc_api.domain.services.price_matrix import build_price_matrix
from tsmc_api.domain.services.shocks import generate_shocks, make_rng

__all__ = [
    # Simulation
    "make_rng",
    "generate_shocks",
    "step_multiplier",
    "simulate_path",
    "simulate_paths",
    # Price matrix
    "build_price_matrix",
    # Weighting
    "compute_hrp_weights",
    "compute_mvo_weights",
]
