"""Domain constants for tsmc_api.

This module centralizes the wire defaults and time-step conventions
shared by the HTTP routes and the CLI.
"""

# ============================================================================
# Time-step conventions
# ============================================================================

# Trading periods per year
TRADING_DAYS_PER_YEAR = 252
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


# ============================================================================
# Simulation defaults (GET /simulate)
# ============================================================================

DEFAULT_SIMULATION_SIZE = 100
DEFAULT_STARTING_VALUE = 50.0
DEFAULT_MU = 0.001
DEFAULT_SIGMA = 0.015
DEFAULT_DT = 1.0 / TRADING_DAYS_PER_YEAR
DEFAULT_SAMPLES = 10


# ============================================================================
# Allocation defaults (POST /allocate)
# ============================================================================

# Strategy used when the request omits one
DEFAULT_STRATEGY = "mvo"

# Accepted spellings per strategy (compared lower-cased)
EQUAL_WEIGHT_ALIASES = ("ew", "equal")
HRP_ALIASES = ("hrp",)

# Tolerance for "weights sum to one"
WEIGHT_SUM_TOLERANCE = 1e-6
