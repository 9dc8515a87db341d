"""Unit tests for price matrix construction and validation."""

import math

import pytest

from tsmc_api.domain.exceptions import (
    EmptyPricesArrayError,
    InvalidAssetSeriesError,
    LengthMismatchError,
    MissingPricesError,
    NonNumericValueError,
    PriceValidationError,
)
from tsmc_api.domain.services.price_matrix import build_price_matrix


class TestBuildPriceMatrix:
    """Happy-path tests for build_price_matrix."""

    def test_shape_and_first_value(self):
        matrix = build_price_matrix({"prices": [[100, 101, 102], [200, 199, 198]]})

        assert matrix.rows == 3
        assert matrix.cols == 2
        assert matrix[0, 0] == 100.0

    def test_transposes_to_time_major(self):
        prices = [[100, 101, 102], [200, 199, 198]]
        matrix = build_price_matrix({"prices": prices})

        for t in range(3):
            for j in range(2):
                assert matrix[t, j] == float(prices[j][t])

    def test_single_observation_single_asset(self):
        matrix = build_price_matrix({"prices": [[7.5]]})
        assert (matrix.rows, matrix.cols) == (1, 1)

    def test_values_are_read_only(self):
        matrix = build_price_matrix({"prices": [[1.0, 2.0]]})
        with pytest.raises(ValueError):
            matrix.values[0, 0] = 3.0

    def test_ignores_other_fields(self):
        matrix = build_price_matrix({"prices": [[1.0, 2.0]], "strategy": "ew", "extra": 1})
        assert matrix.cols == 1


class TestBuildPriceMatrixValidation:
    """Each validation failure maps to a distinct error."""

    def test_missing_prices(self):
        with pytest.raises(MissingPricesError):
            build_price_matrix({})

    @pytest.mark.parametrize("prices", [None, "1,2,3", 5, {"a": [1, 2]}])
    def test_prices_not_an_array(self, prices):
        with pytest.raises(MissingPricesError):
            build_price_matrix({"prices": prices})

    def test_payload_not_an_object(self):
        with pytest.raises(MissingPricesError):
            build_price_matrix([[1, 2], [3, 4]])

    def test_empty_prices(self):
        with pytest.raises(EmptyPricesArrayError):
            build_price_matrix({"prices": []})

    def test_first_series_not_an_array(self):
        with pytest.raises(InvalidAssetSeriesError) as exc_info:
            build_price_matrix({"prices": [5, [1, 2]]})
        assert exc_info.value.asset_index == 0

    def test_first_series_empty(self):
        with pytest.raises(InvalidAssetSeriesError):
            build_price_matrix({"prices": [[], []]})

    def test_later_series_not_an_array(self):
        with pytest.raises(InvalidAssetSeriesError) as exc_info:
            build_price_matrix({"prices": [[1, 2], "ab"]})
        assert str(exc_info.value) == "Asset 1 must be an array"

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            build_price_matrix({"prices": [[1, 2], [1]]})
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    @pytest.mark.parametrize("bad", ["101", None, True, [1.0], math.nan, math.inf])
    def test_non_numeric_value(self, bad):
        with pytest.raises(NonNumericValueError):
            build_price_matrix({"prices": [[100, bad], [1, 2]]})

    def test_integer_too_large_for_float(self):
        with pytest.raises(NonNumericValueError):
            build_price_matrix({"prices": [[10**400, 2, 3], [1, 2, 3]]})

    def test_length_checked_before_values(self):
        """A ragged matrix with a bad value reports the length mismatch."""
        with pytest.raises(LengthMismatchError):
            build_price_matrix({"prices": [[1, "x"], [1]]})

    def test_all_are_price_validation_errors(self):
        for payload in ({}, {"prices": []}, {"prices": [[]]}, {"prices": [[1], [1, 2]]}):
            with pytest.raises(PriceValidationError):
                build_price_matrix(payload)
