"""Custom exceptions for tsmc_api domain.

Domain code raises these; the route layer translates them into the
``{"error": ..., "details": ...}`` wire shape.
"""

from typing import Any


class TsmcAPIError(Exception):
    """Base exception for all tsmc_api errors."""

    pass


# ============================================================================
# Input errors
# ============================================================================


class ParseError(TsmcAPIError):
    """Raised when a request body is not valid structured data."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details


class DataValidationError(TsmcAPIError):
    """Raised when caller input fails validation.

    Examples:
    - Non-positive time step
    - Missing or ragged price series
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidParameterError(DataValidationError):
    """Raised when simulation parameters are out of their domain."""

    pass


# ============================================================================
# Price matrix errors
# ============================================================================


class PriceValidationError(DataValidationError):
    """Base class for price matrix validation failures."""

    pass


class MissingPricesError(PriceValidationError):
    """The ``prices`` field is absent or not an array."""

    def __init__(self, message: str = "Missing 'prices' array"):
        super().__init__(message, field="prices")


class EmptyPricesArrayError(PriceValidationError):
    """The ``prices`` array holds no asset series."""

    def __init__(self, message: str = "Prices array is empty"):
        super().__init__(message, field="prices")


class InvalidAssetSeriesError(PriceValidationError):
    """An asset series is not an array, or the first series is empty."""

    def __init__(self, message: str, asset_index: int | None = None):
        super().__init__(message, field="prices", value=asset_index)
        self.asset_index = asset_index


class LengthMismatchError(PriceValidationError):
    """Asset series differ in length."""

    def __init__(
        self,
        message: str = "All asset series must have equal length",
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message, field="prices")
        self.expected = expected
        self.actual = actual


class NonNumericValueError(PriceValidationError):
    """A price is not a finite real number."""

    def __init__(self, message: str = "Prices must be numeric", value: Any = None):
        super().__init__(message, field="prices", value=value)


# ============================================================================
# Allocation errors
# ============================================================================


class AllocationError(TsmcAPIError):
    """Raised when the portfolio optimizer fails.

    Examples:
    - Singular covariance matrix
    - Zero-variance asset under HRP
    - Solver did not converge
    """

    def __init__(self, message: str, strategy: str | None = None):
        super().__init__(message)
        self.strategy = strategy
