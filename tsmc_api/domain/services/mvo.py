"""Mean-variance optimization (MVO) domain service.

Long-only, fully invested mean-variance utility:

    maximize  w'mu - (risk_aversion / 2) * w' Sigma w
    s.t.      sum(w) = 1, 0 <= w <= 1

Sigma is the sample covariance of simple returns, shrunk toward its own
diagonal and then regularized by adding a constant to the diagonal.
"""

import numpy as np
import pandas as pd
from scipy.optimize import minimize


def shrink_covariance(cov: np.ndarray, shrinkage: float) -> np.ndarray:
    """Blend the covariance with its diagonal.

    shrinkage = 0 keeps the sample covariance, shrinkage = 1 drops all
    off-diagonal terms.
    """
    if not 0.0 <= shrinkage <= 1.0:
        raise ValueError(f"shrinkage must be in [0, 1], got {shrinkage}")
    return (1.0 - shrinkage) * cov + shrinkage * np.diag(np.diag(cov))


def regularize_covariance(cov: np.ndarray, regularization: float) -> np.ndarray:
    """Add a ridge term to the covariance diagonal."""
    if regularization < 0:
        raise ValueError(f"regularization cannot be negative, got {regularization}")
    return cov + regularization * np.eye(cov.shape[0])


def compute_mvo_weights(
    returns: pd.DataFrame,
    regularization: float,
    shrinkage: float,
    risk_aversion: float,
) -> dict[int, float]:
    """Compute long-only mean-variance weights from returns data.

    Args:
        returns: DataFrame with columns = asset indices, rows = observations
        regularization: Ridge term added to the covariance diagonal (>= 0)
        shrinkage: Shrinkage intensity toward the diagonal, in [0, 1]
        risk_aversion: Penalty on portfolio variance (> 0)

    Returns:
        Dict mapping asset index -> weight (weights sum to 1.0)

    Raises:
        ValueError: invalid parameters, too few observations, or the
            solver failed to converge
    """
    if risk_aversion <= 0:
        raise ValueError(f"risk_aversion must be positive, got {risk_aversion}")

    n_assets = len(returns.columns)
    if n_assets == 0:
        return {}
    if n_assets == 1:
        return {int(returns.columns[0]): 1.0}

    if len(returns) < 2:
        raise ValueError(
            f"MVO needs at least 3 price observations, got {len(returns) + 1}"
        )

    mu = returns.mean().to_numpy()
    cov = returns.cov().to_numpy()
    cov = regularize_covariance(shrink_covariance(cov, shrinkage), regularization)
    if not (np.all(np.isfinite(mu)) and np.all(np.isfinite(cov))):
        raise ValueError("Returns produce a non-finite mean or covariance")

    def neg_utility(w: np.ndarray) -> float:
        return -(w @ mu - 0.5 * risk_aversion * w @ cov @ w)

    def neg_utility_grad(w: np.ndarray) -> np.ndarray:
        return -(mu - risk_aversion * cov @ w)

    x0 = np.full(n_assets, 1.0 / n_assets)
    res = minimize(
        neg_utility,
        x0,
        jac=neg_utility_grad,
        method="SLSQP",
        bounds=[(0.0, 1.0)] * n_assets,
        constraints=({"type": "eq", "fun": lambda w: np.sum(w) - 1.0},),
    )
    if not res.success:
        raise ValueError(f"Mean-variance optimization failed: {res.message}")

    # Solver tolerance can leave tiny negatives
    weights = np.clip(res.x, 0.0, None)
    weights = weights / weights.sum()

    return {int(asset): float(w) for asset, w in zip(returns.columns, weights)}
