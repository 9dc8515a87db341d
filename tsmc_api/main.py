"""FastAPI application entrypoint."""

from fastapi import FastAPI

from tsmc_api import __version__
from tsmc_api.routes import allocation, health, root, simulation

app = FastAPI(
    title="TSMC API",
    description="GBM price simulation and portfolio allocation service",
    version=__version__,
)

app.include_router(root.router)
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(allocation.router, tags=["allocation"])
app.include_router(simulation.router, tags=["simulation"])
