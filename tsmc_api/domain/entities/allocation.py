"""Allocation-related domain entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from tsmc_api.domain.constants import EQUAL_WEIGHT_ALIASES, HRP_ALIASES


class AllocationStrategy(str, Enum):
    """Weighting scheme requested by the caller."""

    EQUAL_WEIGHT = "ew"
    HRP = "hrp"
    MVO = "mvo"

    @classmethod
    def resolve(cls, name: str) -> "AllocationStrategy":
        """Map a caller-supplied name onto a strategy.

        Comparison is case-insensitive. Names that match neither the
        equal-weight nor the HRP aliases resolve to MVO, so an unknown
        strategy runs mean-variance rather than failing.
        """
        lowered = name.lower()
        if lowered in EQUAL_WEIGHT_ALIASES:
            return cls.EQUAL_WEIGHT
        if lowered in HRP_ALIASES:
            return cls.HRP
        return cls.MVO


@dataclass(frozen=True, eq=False)
class PriceMatrix:
    """Time-major price matrix.

    Note: values is a read-only np.ndarray of shape (rows, cols) where
    rows are observations and cols are assets, i.e. values[t, j] is the
    price of asset j at time t.
    """

    values: Any  # np.ndarray

    @property
    def rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def cols(self) -> int:
        return int(self.values.shape[1])

    def __getitem__(self, key):
        return self.values[key]


@dataclass(frozen=True)
class MvoConfig:
    """Mean-variance overrides. None means "use the optimizer default"."""

    regularization: float | None = None
    shrinkage: float | None = None


@dataclass(frozen=True)
class AllocationRequest:
    """A validated allocation request."""

    matrix: PriceMatrix

    # Caller's strategy string, echoed back verbatim
    strategy: str

    mvo_config: MvoConfig | None = None


@dataclass
class AllocationResult:
    """Dense weights for an allocation request."""

    strategy: str
    weights: list[float]

    @property
    def sum(self) -> float:
        return float(sum(self.weights))
