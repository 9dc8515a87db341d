"""Simulation-related domain entities."""

import math
from dataclasses import dataclass
from enum import Enum

from tsmc_api.domain.constants import MONTHS_PER_YEAR, TRADING_DAYS_PER_YEAR, WEEKS_PER_YEAR
from tsmc_api.domain.exceptions import InvalidParameterError


class Frequency(str, Enum):
    """Sampling frequency of a simulated series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def dt(self) -> float:
        """Time-step length in years."""
        periods = {
            Frequency.DAILY: TRADING_DAYS_PER_YEAR,
            Frequency.WEEKLY: WEEKS_PER_YEAR,
            Frequency.MONTHLY: MONTHS_PER_YEAR,
        }
        return 1.0 / periods[self]


@dataclass(frozen=True)
class SimulationParameters:
    """GBM parameters for a single-asset path.

    starting_value is only meaningful when positive but any finite value
    is accepted; the path is then a scaled copy of the unit path.
    """

    starting_value: float
    mu: float  # drift per unit time
    sigma: float  # volatility per sqrt(unit time)
    dt: float  # step length, same time unit as mu/sigma

    def __post_init__(self):
        for name in ("starting_value", "mu", "sigma", "dt"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite", field=name, value=value)
        if self.dt <= 0:
            raise InvalidParameterError("dt must be strictly positive", field="dt", value=self.dt)
        if self.sigma < 0:
            raise InvalidParameterError("sigma cannot be negative", field="sigma", value=self.sigma)
