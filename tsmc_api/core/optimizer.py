"""Default portfolio optimizer backed by numpy/pandas/scipy.

Converts a PriceMatrix into simple returns and hands them to the pure
weighting services. Any other PortfolioOptimizer implementation can be
injected in its place.
"""

import numpy as np
import pandas as pd

from tsmc_api.core.config import (
    get_mvo_regularization,
    get_mvo_risk_aversion,
    get_mvo_shrinkage,
)
from tsmc_api.domain.entities.allocation import MvoConfig, PriceMatrix
from tsmc_api.domain.services.hrp import compute_hrp_weights
from tsmc_api.domain.services.mvo import compute_mvo_weights


def price_matrix_to_returns(matrix: PriceMatrix) -> pd.DataFrame:
    """Simple returns with one integer-labelled column per asset."""
    prices = pd.DataFrame(matrix.values, columns=range(matrix.cols))
    returns = (prices / prices.shift(1) - 1.0).iloc[1:]
    if not np.isfinite(returns.to_numpy()).all():
        raise ValueError("Returns are undefined where a price is zero")
    return returns


class DefaultPortfolioOptimizer:
    """EW, HRP and MVO weighting over a price matrix."""

    def __init__(self, risk_aversion: float | None = None):
        self.risk_aversion = risk_aversion

    def equal_weight(self, matrix: PriceMatrix) -> dict[int, float]:
        weight = 1.0 / matrix.cols
        return {i: weight for i in range(matrix.cols)}

    def hierarchical_risk_parity(self, matrix: PriceMatrix) -> dict[int, float]:
        return compute_hrp_weights(price_matrix_to_returns(matrix))

    def mean_variance_optimize(
        self, matrix: PriceMatrix, config: MvoConfig | None
    ) -> dict[int, float]:
        config = config or MvoConfig()
        regularization = (
            config.regularization
            if config.regularization is not None
            else get_mvo_regularization()
        )
        shrinkage = config.shrinkage if config.shrinkage is not None else get_mvo_shrinkage()
        risk_aversion = (
            self.risk_aversion if self.risk_aversion is not None else get_mvo_risk_aversion()
        )
        return compute_mvo_weights(
            price_matrix_to_returns(matrix),
            regularization=regularization,
            shrinkage=shrinkage,
            risk_aversion=risk_aversion,
        )
