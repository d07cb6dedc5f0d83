"""YAML config loading and config-to-engine wiring for the CLI."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from option_matrix.config.constants import DEFAULT_TREE_STEPS, TIME_WALK_LIMIT
from option_matrix.market_calendar import (
    US_MARKET_HOLIDAYS,
    TradingCalendar,
    holidays_from_exchange_calendar,
    load_holiday_file,
)
from option_matrix.options import (
    BinomialTreePricer,
    BlackScholesPricer,
    PriceModel,
    PriceRangeEstimator,
    candidate_rates,
)

DEFAULT_PRICING: dict[str, Any] = {
    "model": "binomial",
    "steps": DEFAULT_TREE_STEPS,
    "exact_cdf": False,
    "rates": None,
}

DEFAULT_CALENDAR: dict[str, Any] = {
    "exact_dst": False,
    "walk_limit": TIME_WALK_LIMIT,
    "holiday_files": [],
    "exchange_calendar": None,
    "years": None,
}


def add_config_arg(parser, *, default: str | None = None) -> None:
    parser.add_argument(
        "--config",
        type=str,
        default=default,
        help="Path to a YAML config file.",
    )


def load_yaml_config(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a YAML mapping at the top level.")

    return data


def deep_merge(
    base: Mapping[str, Any],
    updates: Mapping[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = {
        key: deep_merge(value, {}) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def build_config(
    defaults: Mapping[str, Any],
    yaml_path: str | Path | None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Defaults, then YAML, then CLI overrides."""
    config = deep_merge(defaults, load_yaml_config(yaml_path))
    if overrides:
        config = deep_merge(config, overrides)
    return config


def resolve_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    if isinstance(value, Path):
        return value
    return Path(os.path.expandvars(os.path.expanduser(str(value))))


def build_price_model(pricing: Mapping[str, Any] | None) -> PriceModel:
    """`pricing.model` is ``binomial`` (default) or ``black_scholes``."""
    cfg = deep_merge(DEFAULT_PRICING, pricing or {})
    name = str(cfg["model"]).strip().lower().replace("-", "_")
    if name in ("binomial", "crr", "binomial_tree"):
        return BinomialTreePricer(steps=int(cfg["steps"]))
    if name in ("black_scholes", "bs", "analytic"):
        return BlackScholesPricer(exact_cdf=bool(cfg["exact_cdf"]))
    raise ValueError(
        f"Unknown pricing model {cfg['model']!r}; use 'binomial' or 'black_scholes'"
    )


def build_estimator(pricing: Mapping[str, Any] | None) -> PriceRangeEstimator:
    cfg = deep_merge(DEFAULT_PRICING, pricing or {})
    return PriceRangeEstimator(
        model=build_price_model(cfg),
        rates=candidate_rates(cfg["rates"]),
    )


def build_calendar(calendar: Mapping[str, Any] | None) -> TradingCalendar:
    """Trading calendar from the `calendar` config section.

    Holidays start from the built-in table, or from an `exchange_calendars`
    calendar when `exchange_calendar` and `years: [first, last]` are set, and
    are extended by every file in `holiday_files`.
    """
    cfg = deep_merge(DEFAULT_CALENDAR, calendar or {})

    holidays = set(US_MARKET_HOLIDAYS)
    if cfg["exchange_calendar"]:
        years = cfg["years"]
        if not years or len(years) != 2:
            raise ValueError("calendar.years must be [first_year, last_year]")
        holidays = set(
            holidays_from_exchange_calendar(
                int(years[0]), int(years[1]), cal_name=str(cfg["exchange_calendar"])
            )
        )

    for path in cfg["holiday_files"] or []:
        holidays |= load_holiday_file(resolve_path(path))

    return TradingCalendar(
        holidays=frozenset(holidays),
        exact_dst=bool(cfg["exact_dst"]),
        walk_limit=int(cfg["walk_limit"]),
    )
