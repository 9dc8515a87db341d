"""Price matrix construction from decoded JSON.

The payload arrives asset-major (``prices[j][t]``, one series per asset)
and is transposed into a time-major matrix (``values[t, j]``).

Validation runs in a fixed order and stops at the first failure:
missing prices, empty prices, bad asset series, length mismatch,
non-numeric value.
"""

import math
from collections.abc import Mapping
from typing import Any

import numpy as np

from tsmc_api.domain.entities.allocation import PriceMatrix
from tsmc_api.domain.exceptions import (
    EmptyPricesArrayError,
    InvalidAssetSeriesError,
    LengthMismatchError,
    MissingPricesError,
    NonNumericValueError,
)

_ARRAY_TYPES = (list, tuple)


def _is_price(value: Any) -> bool:
    # bool is an int subclass but true/false are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def build_price_matrix(payload: Any) -> PriceMatrix:
    """Validate a ``{"prices": [[...], ...]}`` payload and build the matrix.

    Args:
        payload: Decoded JSON object

    Returns:
        PriceMatrix with rows = series length and cols = number of assets

    Raises:
        MissingPricesError: prices absent or not an array
        EmptyPricesArrayError: prices holds no series
        InvalidAssetSeriesError: a series is not an array, or the first is empty
        LengthMismatchError: series lengths differ
        NonNumericValueError: a value is not a finite number
    """
    prices = payload.get("prices") if isinstance(payload, Mapping) else None
    if not isinstance(prices, _ARRAY_TYPES):
        raise MissingPricesError()

    if len(prices) == 0:
        raise EmptyPricesArrayError()

    first = prices[0]
    if not isinstance(first, _ARRAY_TYPES):
        raise InvalidAssetSeriesError("Each asset must be an array of floats", asset_index=0)
    rows = len(first)
    if rows == 0:
        raise InvalidAssetSeriesError("Each asset must contain at least one value", asset_index=0)

    for i, series in enumerate(prices):
        if not isinstance(series, _ARRAY_TYPES):
            raise InvalidAssetSeriesError(f"Asset {i} must be an array", asset_index=i)
        if len(series) != rows:
            raise LengthMismatchError(expected=rows, actual=len(series))

    for series in prices:
        for value in series:
            if not _is_price(value):
                raise NonNumericValueError(value=value)

    # Asset-major input, transposed to time-major
    values = np.array(prices, dtype=float).T.copy()
    values.flags.writeable = False
    return PriceMatrix(values=values)
