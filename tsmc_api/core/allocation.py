"""Allocation dispatch.

Resolves the requested strategy, calls the portfolio optimizer and
turns its sparse {asset index: weight} mapping into a dense vector with
one entry per matrix column.
"""

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any

from tsmc_api.core.optimizer import DefaultPortfolioOptimizer
from tsmc_api.core.protocols import PortfolioOptimizer
from tsmc_api.domain.constants import DEFAULT_STRATEGY
from tsmc_api.domain.entities.allocation import (
    AllocationRequest,
    AllocationResult,
    AllocationStrategy,
    MvoConfig,
    PriceMatrix,
)
from tsmc_api.domain.exceptions import AllocationError
from tsmc_api.domain.services.price_matrix import build_price_matrix

logger = logging.getLogger(__name__)


# ============================================================================
# Dispatcher
# ============================================================================


def densify_weights(weights_map: Mapping[int, float], n_assets: int) -> list[float]:
    """Materialize a sparse weight mapping as a dense vector.

    Missing assets stay at 0.0. Indices outside [0, n_assets) are dropped
    without raising.
    """
    weights = [0.0] * n_assets
    for idx, weight in weights_map.items():
        if 0 <= idx < n_assets:
            weights[idx] = float(weight)
        else:
            logger.warning(f"Dropping weight for out-of-range asset index {idx} (n_assets={n_assets})")
    return weights


def allocate(
    matrix: PriceMatrix,
    strategy: str,
    mvo_config: MvoConfig | None = None,
    optimizer: PortfolioOptimizer | None = None,
) -> list[float]:
    """Compute a dense weight vector for the given strategy.

    Strategy names are case-insensitive: "ew"/"equal" select equal weight,
    "hrp" selects hierarchical risk parity and every other name,
    recognized or not, selects mean-variance optimization.

    Args:
        matrix: Validated time-major price matrix
        strategy: Caller's strategy name
        mvo_config: Optional MVO overrides, only used by mean-variance
        optimizer: Weighting backend (defaults to DefaultPortfolioOptimizer)

    Returns:
        List of matrix.cols weights

    Raises:
        AllocationError: the optimizer failed; carries its message
    """
    optimizer = optimizer or DefaultPortfolioOptimizer()
    resolved = AllocationStrategy.resolve(strategy)
    if resolved is AllocationStrategy.MVO and strategy.lower() != AllocationStrategy.MVO.value:
        logger.debug(f"Unrecognized strategy '{strategy}', using mean-variance")

    try:
        if resolved is AllocationStrategy.EQUAL_WEIGHT:
            weights_map = optimizer.equal_weight(matrix)
        elif resolved is AllocationStrategy.HRP:
            weights_map = optimizer.hierarchical_risk_parity(matrix)
        else:
            weights_map = optimizer.mean_variance_optimize(matrix, mvo_config)
    except Exception as e:
        logger.error(f"Optimizer failed for strategy '{strategy}': {e}")
        raise AllocationError(str(e), strategy=strategy) from e

    return densify_weights(weights_map, matrix.cols)


# ============================================================================
# High-level API
# ============================================================================


def _optional_real(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


def parse_mvo_config(payload: Mapping[str, Any]) -> MvoConfig | None:
    """Read the optional ``mvo`` object; non-numeric fields count as absent."""
    raw = payload.get("mvo")
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        return MvoConfig()
    return MvoConfig(
        regularization=_optional_real(raw.get("regularization")),
        shrinkage=_optional_real(raw.get("shrinkage")),
    )


def parse_allocation_request(payload: Any) -> AllocationRequest:
    """Validate a decoded JSON body into an AllocationRequest.

    Raises:
        PriceValidationError: the prices field is invalid
    """
    matrix = build_price_matrix(payload)

    strategy = payload.get("strategy")
    if not isinstance(strategy, str):
        strategy = DEFAULT_STRATEGY

    return AllocationRequest(
        matrix=matrix,
        strategy=strategy,
        mvo_config=parse_mvo_config(payload),
    )


def allocate_from_payload(
    payload: Any,
    optimizer: PortfolioOptimizer | None = None,
) -> AllocationResult:
    """Validate a JSON body and allocate.

    This is the main entry point for allocation requests.

    Args:
        payload: Decoded JSON object with prices, strategy and mvo
        optimizer: Weighting backend (defaults to DefaultPortfolioOptimizer)

    Returns:
        AllocationResult with the echoed strategy and dense weights
    """
    request = parse_allocation_request(payload)
    weights = allocate(
        request.matrix,
        request.strategy,
        mvo_config=request.mvo_config,
        optimizer=optimizer,
    )
    logger.info(
        f"Allocated {request.matrix.cols} assets over {request.matrix.rows} observations "
        f"with strategy '{request.strategy}'"
    )
    return AllocationResult(strategy=request.strategy, weights=weights)
