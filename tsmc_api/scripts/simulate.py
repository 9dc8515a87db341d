#!/usr/bin/env python
"""CLI script to generate a single Monte Carlo price path.

Usage:
    # 100 daily steps, sigma 0.015, mu 0.001, starting at 50
    python -m tsmc_api.scripts.simulate 100 0.015 0.001 daily 50

    # Reproducible weekly run
    python -m tsmc_api.scripts.simulate 52 0.2 0.05 weekly 100 --seed 7

The path (size + 1 prices, starting with starting_value) is printed to
stdout as a list of floats.
"""

import argparse
import sys
from collections.abc import Sequence

from tsmc_api.domain.entities.simulation import Frequency, SimulationParameters
from tsmc_api.domain.exceptions import InvalidParameterError
from tsmc_api.domain.services.gbm import simulate_path
from tsmc_api.domain.services.shocks import generate_shocks, make_rng


def get_dt_from_frequency(frequency: Frequency | str) -> float:
    """Time-step length in years for a frequency name."""
    return Frequency(frequency).dt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsmc-simulate",
        description="Given historical statistics, generate a Monte Carlo simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("size", type=int, help="The number of time periods to simulate")
    parser.add_argument("sigma", type=float, help="The historical volatility of returns")
    parser.add_argument("mu", type=float, help="The historical mean return")
    parser.add_argument(
        "dt",
        choices=[f.value for f in Frequency],
        help="The time change length",
    )
    parser.add_argument("starting_value", type=float, help="The starting asset price value")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible path")
    return parser


def run(
    size: int,
    sigma: float,
    mu: float,
    frequency: Frequency | str,
    starting_value: float,
    seed: int | None = None,
) -> list[float]:
    """Simulate one path and return it as plain floats."""
    params = SimulationParameters(
        starting_value=starting_value,
        mu=mu,
        sigma=sigma,
        dt=get_dt_from_frequency(frequency),
    )
    shocks = generate_shocks(size, make_rng(seed))
    return simulate_path(params, shocks).tolist()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        path = run(
            size=args.size,
            sigma=args.sigma,
            mu=args.mu,
            frequency=args.dt,
            starting_value=args.starting_value,
            seed=args.seed,
        )
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
