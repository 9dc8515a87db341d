"""Domain entities - dataclasses and enums describing the domain model.

These entities represent the core business objects in the domain model.
"""

from tsmc_api.domain.entities.allocation import (
    AllocationRequest,
    AllocationResult,
    AllocationStrategy,
    MvoConfig,
    PriceMatrix,
)
from tsmc_api.domain.entities.simulation import Frequency, SimulationParameters

__all__ = [
    # Simulation
    "Frequency",
    "SimulationParameters",
    # Allocation
    "AllocationStrategy",
    "PriceMatrix",
    "MvoConfig",
    "AllocationRequest",
    "AllocationResult",
]
