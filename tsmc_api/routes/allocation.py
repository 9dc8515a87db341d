"""Portfolio allocation endpoint."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from tsmc_api.core.allocation import allocate_from_payload
from tsmc_api.core.optimizer import DefaultPortfolioOptimizer
from tsmc_api.core.protocols import PortfolioOptimizer
from tsmc_api.domain.exceptions import AllocationError, DataValidationError, ParseError

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Response models
# ============================================================================


class AllocationResponse(BaseModel):
    """Response model for the allocation endpoint."""

    strategy: str = Field(
        ...,
        description="Strategy name as sent by the caller (default 'mvo')",
    )
    weights: list[float] = Field(
        ...,
        description="One weight per asset, in the order of the input series",
    )
    sum: float = Field(
        ...,
        description="Sum of the weights",
    )


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    error: str
    details: str | None = None


# ============================================================================
# Dependency injection for testability
# ============================================================================


def get_portfolio_optimizer() -> PortfolioOptimizer:
    """Get the portfolio optimizer."""
    return DefaultPortfolioOptimizer()


def _error_response(message: str, status_code: int = 400, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


def _parse_body(raw: bytes) -> object:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError("Invalid JSON", details=str(e)) from e


# ============================================================================
# Endpoint
# ============================================================================


@router.post(
    "/allocate",
    response_model=AllocationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def allocate_portfolio(
    request: Request,
    optimizer: PortfolioOptimizer = Depends(get_portfolio_optimizer),
):
    """Compute portfolio weights from historical prices.

    Body: {"prices": [[...], ...], "strategy": "ew" | "hrp" | "mvo",
    "mvo": {"regularization": float, "shrinkage": float}}

    Each inner array of prices is one asset's series; all series must have
    the same length. Strategy names are case-insensitive and default to
    "mvo"; unrecognized names also run mean-variance.

    Returns:
        AllocationResponse with one weight per asset and their sum

    Raises:
        400 with {"error", "details"?}: invalid JSON, invalid prices, or
        optimizer failure
    """
    try:
        payload = _parse_body(await request.body())
        result = await run_in_threadpool(allocate_from_payload, payload, optimizer=optimizer)
    except ParseError as e:
        logger.warning(f"Rejected allocation request: {e} ({e.details})")
        return _error_response(str(e), details=e.details)
    except (DataValidationError, AllocationError) as e:
        logger.warning(f"Rejected allocation request: {e}")
        return _error_response(str(e))

    return AllocationResponse(
        strategy=result.strategy,
        weights=result.weights,
        sum=result.sum,
    )


@router.api_route(
    "/allocate",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def allocate_wrong_method() -> JSONResponse:
    """Reject anything but POST with the JSON error body."""
    return _error_response("Use POST with JSON body", status_code=405)
