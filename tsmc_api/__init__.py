"""Time-series Monte Carlo and portfolio allocation service.

This package contains:
- domain: entities, exceptions and pure numerical services (GBM, HRP, MVO)
- core: configuration, optimizer wiring and allocation dispatch
- routes: FastAPI endpoints
- scripts: command-line simulation driver
"""

__version__ = "0.1.0"
