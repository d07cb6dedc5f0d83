from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from option_matrix.options import BinomialTreePricer, BlackScholesPricer


def test_load_yaml_config_none_returns_empty() -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    assert mod.load_yaml_config(None) == {}


def test_load_yaml_config_missing_file_raises(tmp_path: Path) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    with pytest.raises(FileNotFoundError):
        mod.load_yaml_config(tmp_path / "missing.yml")


def test_load_yaml_config_non_mapping_raises(write_yaml) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    path = write_yaml("bad.yml", ["a", "b"])
    with pytest.raises(ValueError, match="YAML mapping"):
        mod.load_yaml_config(path)


def test_build_config_precedence_defaults_yaml_overrides(write_yaml) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    defaults = {"a": 1, "b": {"x": 1, "y": 2}, "lst": [1]}
    yaml_path = write_yaml("cfg.yml", {"a": 2, "b": {"y": 3}, "lst": [2]})
    overrides = {"b": {"x": 9}, "lst": [3], "c": 4}
    config = mod.build_config(defaults, yaml_path, overrides)
    assert config == {
        "a": 2,
        "b": {"x": 9, "y": 3},
        "lst": [3],
        "c": 4,
    }


def test_resolve_path_expands_home_and_env(monkeypatch, tmp_path: Path) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("HOLIDAY_ROOT", str(tmp_path / "cal"))

    assert mod.resolve_path("~/holidays.yml") == tmp_path / "holidays.yml"
    assert mod.resolve_path("$HOLIDAY_ROOT/x.yml") == tmp_path / "cal" / "x.yml"
    assert mod.resolve_path(None) is None


def test_build_price_model_selects_engine() -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    assert mod.build_price_model(None) == BinomialTreePricer(steps=100)
    assert mod.build_price_model({"model": "binomial", "steps": 50}) == BinomialTreePricer(
        steps=50
    )
    assert mod.build_price_model({"model": "black-scholes", "exact_cdf": True}) == (
        BlackScholesPricer(exact_cdf=True)
    )
    with pytest.raises(ValueError, match="Unknown pricing model"):
        mod.build_price_model({"model": "monte_carlo"})


def test_build_estimator_uses_configured_rates() -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    estimator = mod.build_estimator({"rates": [0.01, 0.05]})
    assert estimator.rates == (0.01, 0.05)
    assert mod.build_estimator(None).rates == (-0.0062, -0.0030, 0.0, 0.10, 0.30)


def test_build_calendar_merges_holiday_files(write_yaml) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    path = write_yaml("holidays.yml", ["2027-01-01"])

    calendar = mod.build_calendar(
        {"holiday_files": [str(path)], "exact_dst": True, "walk_limit": 50}
    )

    assert calendar.is_trading_day("2027-01-01") is False
    assert calendar.is_trading_day("2024-12-25") is False
    assert calendar.exact_dst is True
    assert calendar.walk_limit == 50


def test_build_calendar_requires_years_for_exchange_calendar() -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    with pytest.raises(ValueError, match="calendar.years"):
        mod.build_calendar({"exchange_calendar": "XNYS"})


def test_build_calendar_from_exchange_calendar(monkeypatch) -> None:
    mod = importlib.import_module("option_matrix.cli.config")
    captured = {}

    def _fake(start_year, end_year, cal_name):
        captured.update(start=start_year, end=end_year, cal=cal_name)
        return frozenset({"2030-01-01"})

    monkeypatch.setattr(mod, "holidays_from_exchange_calendar", _fake)
    calendar = mod.build_calendar({"exchange_calendar": "XNYS", "years": [2029, 2030]})

    assert captured == {"start": 2029, "end": 2030, "cal": "XNYS"}
    assert calendar.holidays == frozenset({"2030-01-01"})
