"""Protocol definitions for dependency injection."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tsmc_api.domain.entities.allocation import MvoConfig, PriceMatrix


class PortfolioOptimizer(Protocol):
    """Weighting algorithms consumed by the allocation dispatcher.

    Each method returns a sparse mapping of asset column index -> weight.
    The mapping need not cover every asset, and indices outside the
    matrix are ignored by the dispatcher.
    """

    def equal_weight(self, matrix: "PriceMatrix") -> "Mapping[int, float]":
        """Equal weight across all assets."""
        ...

    def hierarchical_risk_parity(self, matrix: "PriceMatrix") -> "Mapping[int, float]":
        """Hierarchical risk parity weights."""
        ...

    def mean_variance_optimize(
        self, matrix: "PriceMatrix", config: "MvoConfig | None"
    ) -> "Mapping[int, float]":
        """Mean-variance weights; config None means optimizer defaults."""
        ...
