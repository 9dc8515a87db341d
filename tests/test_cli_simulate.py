"""Tests for the tsmc-simulate command-line driver."""

import ast

import pytest

from tsmc_api.domain.entities.simulation import Frequency
from tsmc_api.scripts.simulate import build_parser, get_dt_from_frequency, main, run


class TestFrequencyConversion:
    def test_daily(self):
        assert 0.003 < get_dt_from_frequency(Frequency.DAILY) < 0.004

    def test_weekly(self):
        assert get_dt_from_frequency("weekly") == 1.0 / 52.0

    def test_monthly(self):
        assert get_dt_from_frequency("monthly") == 1.0 / 12.0


class TestParser:
    def test_positional_arguments(self):
        args = build_parser().parse_args(["100", "0.015", "0.001", "daily", "50"])

        assert args.size == 100
        assert args.sigma == 0.015
        assert args.mu == 0.001
        assert args.dt == "daily"
        assert args.starting_value == 50.0
        assert args.seed is None

    def test_unknown_frequency_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["10", "0.1", "0.0", "hourly", "50"])


class TestRun:
    def test_path_length_and_start(self):
        path = run(size=10, sigma=0.015, mu=-0.002, frequency="daily", starting_value=50.0)

        assert len(path) == 11
        assert path[0] == 50.0

    def test_seed_is_reproducible(self):
        a = run(size=5, sigma=0.2, mu=0.05, frequency="weekly", starting_value=100.0, seed=3)
        b = run(size=5, sigma=0.2, mu=0.05, frequency="weekly", starting_value=100.0, seed=3)
        assert a == b


class TestMain:
    def test_prints_path(self, capsys):
        exit_code = main(["4", "0.0", "0.0", "monthly", "25", "--seed", "1"])

        assert exit_code == 0
        printed = ast.literal_eval(capsys.readouterr().out.strip())
        assert printed == [25.0] * 5

    def test_negative_size_fails(self, capsys):
        exit_code = main(["-3", "0.1", "0.0", "daily", "25"])

        assert exit_code == 1
        assert "Error" in capsys.readouterr().err

    def test_negative_sigma_fails(self, capsys):
        exit_code = main(["3", "-0.1", "0.0", "daily", "25"])

        assert exit_code == 1

    def test_overflowing_prices_fail(self, capsys):
        exit_code = main(["3", "0.0", "1e6", "daily", "50"])

        assert exit_code == 1
        assert "overflow" in capsys.readouterr().err
