"""Unit tests for HRP domain service (pure functions)."""

import numpy as np
import pandas as pd
import pytest

from tsmc_api.domain.services.hrp import (
    _compute_correlation_distance,
    _get_cluster_variance,
    _recursive_bisection,
    compute_hrp_weights,
)


class TestComputeCorrelationDistance:
    """Tests for _compute_correlation_distance."""

    def test_perfect_positive_correlation(self):
        """Perfect positive correlation (1.0) should give distance 0."""
        corr = pd.DataFrame([[1.0, 1.0], [1.0, 1.0]], columns=[0, 1], index=[0, 1])
        dist = _compute_correlation_distance(corr)

        assert dist.loc[0, 1] == pytest.approx(0.0, abs=1e-6)
        assert dist.loc[0, 0] == pytest.approx(0.0, abs=1e-6)

    def test_zero_correlation(self):
        """Zero correlation should give distance ~0.707."""
        corr = pd.DataFrame([[1.0, 0.0], [0.0, 1.0]], columns=[0, 1], index=[0, 1])
        dist = _compute_correlation_distance(corr)

        assert dist.loc[0, 1] == pytest.approx(np.sqrt(0.5), rel=1e-6)

    def test_perfect_negative_correlation(self):
        """Perfect negative correlation (-1.0) should give distance 1.0."""
        corr = pd.DataFrame([[1.0, -1.0], [-1.0, 1.0]], columns=[0, 1], index=[0, 1])
        dist = _compute_correlation_distance(corr)

        assert dist.loc[0, 1] == pytest.approx(1.0, rel=1e-6)

    def test_rounding_above_one_is_clipped(self):
        """Correlation a hair above 1.0 should not produce NaN."""
        corr = pd.DataFrame([[1.0, 1.0 + 1e-15], [1.0 + 1e-15, 1.0]], columns=[0, 1], index=[0, 1])
        dist = _compute_correlation_distance(corr)

        assert not dist.isna().any().any()


class TestGetClusterVariance:
    """Tests for _get_cluster_variance."""

    def test_single_asset(self):
        cov = pd.DataFrame([[0.04]], columns=[0], index=[0])
        assert _get_cluster_variance(cov, [0]) == pytest.approx(0.04)

    def test_two_assets_different_variance(self):
        """Two uncorrelated assets with different variances."""
        cov = pd.DataFrame([[0.01, 0.0], [0.0, 0.04]], columns=[0, 1], index=[0, 1])
        var = _get_cluster_variance(cov, [0, 1])

        # w = (0.8, 0.2): 0.8^2 * 0.01 + 0.2^2 * 0.04 = 0.008
        assert var == pytest.approx(0.008, rel=1e-6)


class TestRecursiveBisection:
    """Tests for _recursive_bisection."""

    def test_single_asset(self):
        cov = pd.DataFrame([[0.04]], columns=[0], index=[0])
        assert _recursive_bisection(cov, [0]) == {0: 1.0}

    def test_two_assets_equal_variance(self):
        cov = pd.DataFrame([[0.04, 0.0], [0.0, 0.04]], columns=[0, 1], index=[0, 1])
        weights = _recursive_bisection(cov, [0, 1])

        assert weights[0] == pytest.approx(0.5, rel=1e-6)
        assert weights[1] == pytest.approx(0.5, rel=1e-6)

    def test_weights_sum_to_one_and_positive(self):
        cov = pd.DataFrame(
            [[0.04, 0.01, 0.005], [0.01, 0.09, 0.02], [0.005, 0.02, 0.16]],
            columns=[0, 1, 2],
            index=[0, 1, 2],
        )
        weights = _recursive_bisection(cov, [2, 0, 1])

        assert sum(weights.values()) == pytest.approx(1.0, rel=1e-6)
        assert all(w > 0 for w in weights.values())


class TestComputeHRPWeights:
    """Tests for compute_hrp_weights (full algorithm)."""

    def test_empty_returns(self):
        assert compute_hrp_weights(pd.DataFrame()) == {}

    def test_single_asset(self):
        returns = pd.DataFrame({0: [0.01, -0.02, 0.015]})
        assert compute_hrp_weights(returns) == {0: 1.0}

    def test_two_assets_inverse_volatility(self):
        """Two assets degenerate to inverse volatility."""
        returns = pd.DataFrame({
            0: [0.01, -0.01, 0.01, -0.01],
            1: [0.02, -0.02, 0.02, -0.02],
        })
        weights = compute_hrp_weights(returns)

        assert weights[0] == pytest.approx(2.0 / 3.0)
        assert weights[1] == pytest.approx(1.0 / 3.0)

    def test_lower_volatility_gets_higher_weight(self):
        rng = np.random.default_rng(42)
        returns = pd.DataFrame({
            0: rng.normal(0.01, 0.01, 100),  # Low vol
            1: rng.normal(0.01, 0.05, 100),
            2: rng.normal(0.01, 0.04, 100),
        })
        weights = compute_hrp_weights(returns)

        assert set(weights) == {0, 1, 2}
        assert sum(weights.values()) == pytest.approx(1.0)
        assert weights[0] > weights[1]
        assert weights[0] > weights[2]

    def test_deterministic(self):
        rng = np.random.default_rng(7)
        returns = pd.DataFrame(rng.normal(0.0, 0.02, (50, 4)))

        assert compute_hrp_weights(returns) == compute_hrp_weights(returns)

    def test_single_observation_rejected(self):
        returns = pd.DataFrame({0: [0.01], 1: [0.02]})
        with pytest.raises(ValueError, match="at least 3 price observations"):
            compute_hrp_weights(returns)

    def test_zero_variance_asset_rejected(self):
        returns = pd.DataFrame({0: [0.0, 0.0, 0.0], 1: [0.01, -0.02, 0.03]})
        with pytest.raises(ValueError, match="zero-variance"):
            compute_hrp_weights(returns)
