"""Runtime configuration read from environment variables.

Values are read at call time so tests and deployments can change them
without reimporting the module.
"""

import os

# Environment variable names
ENV_SIMULATION_SEED = "TSMC_SIMULATION_SEED"
ENV_MAX_SIMULATION_SIZE = "TSMC_MAX_SIMULATION_SIZE"
ENV_MAX_SIMULATION_SAMPLES = "TSMC_MAX_SIMULATION_SAMPLES"
ENV_MVO_REGULARIZATION = "TSMC_MVO_REGULARIZATION"
ENV_MVO_SHRINKAGE = "TSMC_MVO_SHRINKAGE"
ENV_MVO_RISK_AVERSION = "TSMC_MVO_RISK_AVERSION"

# Defaults
DEFAULT_MAX_SIMULATION_SIZE = 10_000
DEFAULT_MAX_SIMULATION_SAMPLES = 1_000
DEFAULT_MVO_REGULARIZATION = 1e-6
DEFAULT_MVO_SHRINKAGE = 0.0
DEFAULT_MVO_RISK_AVERSION = 1.0


def _read_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _read_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def get_simulation_seed() -> int | None:
    """Default seed for request generators (None = fresh OS entropy)."""
    return _read_int(ENV_SIMULATION_SEED, None)


def get_max_simulation_size() -> int:
    """Upper bound on steps per simulated path."""
    return _read_int(ENV_MAX_SIMULATION_SIZE, DEFAULT_MAX_SIMULATION_SIZE)


def get_max_simulation_samples() -> int:
    """Upper bound on paths per simulation request."""
    return _read_int(ENV_MAX_SIMULATION_SAMPLES, DEFAULT_MAX_SIMULATION_SAMPLES)


def get_mvo_regularization() -> float:
    """Default ridge term for mean-variance covariance."""
    return _read_float(ENV_MVO_REGULARIZATION, DEFAULT_MVO_REGULARIZATION)


def get_mvo_shrinkage() -> float:
    """Default shrinkage intensity for mean-variance covariance."""
    return _read_float(ENV_MVO_SHRINKAGE, DEFAULT_MVO_SHRINKAGE)


def get_mvo_risk_aversion() -> float:
    """Risk aversion used by the mean-variance utility."""
    return _read_float(ENV_MVO_RISK_AVERSION, DEFAULT_MVO_RISK_AVERSION)
