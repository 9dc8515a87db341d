"""Hierarchical Risk Parity (HRP) domain service.

Implementation of López de Prado's HRP algorithm (2016) for
risk-based portfolio allocation using hierarchical clustering.

Assets are identified by their integer column index in the price
matrix. This module contains pure mathematical functions with no
external dependencies beyond numpy/pandas/scipy.
"""

import numpy as np
import pandas as pd
from scipy.cluster.hierarchy import leaves_list, linkage
from scipy.spatial.distance import squareform


def _compute_correlation_distance(corr: pd.DataFrame) -> pd.DataFrame:
    """Convert correlation matrix to distance matrix.

    Distance formula: d[i,j] = sqrt(0.5 * (1 - corr[i,j]))

    This maps correlation:
    - corr = 1.0 (perfect positive) -> d = 0
    - corr = 0.0 (uncorrelated) -> d = 0.707
    - corr = -1.0 (perfect negative) -> d = 1.0

    Args:
        corr: Correlation matrix (DataFrame)

    Returns:
        Distance matrix (DataFrame)
    """
    # Rounding can push 1 - corr slightly below zero
    return np.sqrt((0.5 * (1 - corr)).clip(lower=0.0))


def _get_cluster_variance(cov: pd.DataFrame, assets: list[int]) -> float:
    """Compute variance of an inverse-variance weighted cluster.

    Args:
        cov: Covariance matrix
        assets: Asset indices in the cluster

    Returns:
        Cluster variance
    """
    if len(assets) == 1:
        return float(cov.loc[assets[0], assets[0]])

    cov_slice = cov.loc[assets, assets]

    # Inverse variance weights within cluster
    ivp = 1.0 / np.diag(cov_slice)
    ivp = ivp / ivp.sum()

    # Cluster variance = w' * Cov * w
    return float(np.dot(ivp, np.dot(cov_slice, ivp)))


def _recursive_bisection(
    cov: pd.DataFrame,
    sorted_assets: list[int],
) -> dict[int, float]:
    """Allocate weights via recursive bisection.

    The algorithm:
    1. Start with all weight (1.0) on the full cluster
    2. Split cluster in half
    3. Allocate weight to each half inversely proportional to variance
    4. Repeat on each half until reaching individual assets

    Args:
        cov: Covariance matrix
        sorted_assets: Asset indices in quasi-diagonal order

    Returns:
        Dict mapping asset index -> weight (sum to 1.0)
    """
    weights = pd.Series(1.0, index=sorted_assets)

    # Clusters to process: list of (start_idx, end_idx)
    clusters = [(0, len(sorted_assets))]

    while clusters:
        start, end = clusters.pop(0)

        if end - start <= 1:
            continue

        mid = (start + end) // 2
        left_assets = sorted_assets[start:mid]
        right_assets = sorted_assets[mid:end]

        left_var = _get_cluster_variance(cov, left_assets)
        right_var = _get_cluster_variance(cov, right_assets)

        total_inv_var = 1.0 / left_var + 1.0 / right_var
        left_weight = (1.0 / left_var) / total_inv_var
        right_weight = (1.0 / right_var) / total_inv_var

        # All members of a cluster share its weight at this point
        current_weight = weights.loc[sorted_assets[start]]
        weights.loc[left_assets] = current_weight * left_weight
        weights.loc[right_assets] = current_weight * right_weight

        if len(left_assets) > 1:
            clusters.append((start, mid))
        if len(right_assets) > 1:
            clusters.append((mid, end))

    return {int(asset): float(weight) for asset, weight in weights.items()}


def compute_hrp_weights(returns: pd.DataFrame) -> dict[int, float]:
    """Compute HRP portfolio weights from returns data.

    Full HRP algorithm:
    1. Compute correlation matrix
    2. Convert to distance matrix
    3. Hierarchical clustering (single linkage)
    4. Quasi-diagonalize covariance matrix
    5. Recursive bisection for weight allocation

    Args:
        returns: DataFrame with columns = asset indices, rows = observations,
                 values = simple returns

    Returns:
        Dict mapping asset index -> weight (weights sum to 1.0)

    Raises:
        ValueError: too few observations, or an asset has zero variance
    """
    if len(returns.columns) == 0:
        return {}

    if len(returns.columns) == 1:
        return {int(returns.columns[0]): 1.0}

    if len(returns) < 2:
        raise ValueError(
            f"HRP needs at least 3 price observations, got {len(returns) + 1}"
        )

    variances = returns.var()
    flat = [int(asset) for asset, var in variances.items() if not var > 0]
    if flat:
        raise ValueError(f"HRP cannot weight zero-variance assets: {flat}")

    # Two assets: HRP degenerates to inverse volatility
    if len(returns.columns) == 2:
        inv_vols = 1.0 / returns.std()
        weights = inv_vols / inv_vols.sum()
        return {int(asset): float(weight) for asset, weight in weights.items()}

    corr = returns.corr()
    cov = returns.cov()

    dist = _compute_correlation_distance(corr)

    # Condensed distance matrix for scipy
    dist_condensed = squareform(dist.values, checks=False)
    link = linkage(dist_condensed, method="single")

    sort_idx = list(leaves_list(link))
    sorted_assets = [int(returns.columns[i]) for i in sort_idx]

    return _recursive_bisection(cov, sorted_assets)
