"""Root endpoint (service identity)."""

from fastapi import APIRouter

from tsmc_api import __version__

router = APIRouter(tags=["root"])


@router.get("/")
def read_root() -> dict:
    """Service identity endpoint."""
    return {"message": "Hello from TSMC API", "service": "tsmc-api", "version": __version__}
