#!/usr/bin/env python
"""Print an option or strategy pricing matrix."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Any

from option_matrix.apps._cli import (
    add_print_config_arg,
    collect_logging_overrides,
    ensure_list,
    print_json,
)
from option_matrix.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_calendar,
    build_config,
    build_estimator,
    setup_logging_from_config,
)
from option_matrix.cli.config import DEFAULT_CALENDAR, DEFAULT_PRICING
from option_matrix.market_calendar import TradingCalendar
from option_matrix.matrix import (
    CalculationResult,
    GridError,
    calculate,
    calculate_strategy,
)
from option_matrix.options import Strategy

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "pricing": DEFAULT_PRICING,
    "calendar": DEFAULT_CALENDAR,
    "inputs": {
        "spot": None,
        "strike": None,
        "volatility": None,
        "expiration": None,
        "option_type": "call",
        "legs": [],
        "price_increment": 1.0,
        "now": None,
    },
    "output": {
        "format": "table",
    },
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Price an option or multi-leg strategy over a price x time grid."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)

    parser.add_argument("--spot", type=float, default=None)
    parser.add_argument("--strike", type=float, default=None)
    parser.add_argument(
        "--volatility",
        type=float,
        default=None,
        help="Implied volatility in percent (e.g. 25.5).",
    )
    parser.add_argument(
        "--expiration",
        type=str,
        default=None,
        help="Expiration date (YYYY-MM-DD, priced at the 16:00 ET close) or ISO instant.",
    )
    parser.add_argument("--option-type", choices=["call", "put"], default=None)
    parser.add_argument(
        "--leg",
        dest="legs",
        action="append",
        default=None,
        help="Strategy leg as action:type:strike (repeatable), e.g. buy:call:150.",
    )
    parser.add_argument("--increment", dest="price_increment", type=float, default=None)
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Evaluate as of this ISO instant instead of the system clock.",
    )
    parser.add_argument(
        "--model",
        choices=["binomial", "black_scholes"],
        default=None,
        help="Valuation model used for every cell.",
    )
    parser.add_argument("--steps", type=int, default=None, help="Binomial tree steps.")
    parser.add_argument(
        "--exact-dst",
        dest="exact_dst",
        action="store_true",
        default=None,
        help="Use IANA America/New_York offsets instead of the month rule.",
    )
    parser.add_argument("--format", choices=["table", "json"], default=None)
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    inputs = {
        key: getattr(args, key)
        for key in (
            "spot",
            "strike",
            "volatility",
            "expiration",
            "option_type",
            "legs",
            "price_increment",
            "now",
        )
        if getattr(args, key) is not None
    }
    if inputs:
        overrides["inputs"] = inputs

    pricing: dict[str, Any] = {}
    if args.model is not None:
        pricing["model"] = args.model
    if args.steps is not None:
        pricing["steps"] = args.steps
    if pricing:
        overrides["pricing"] = pricing

    if args.exact_dst is not None:
        overrides["calendar"] = {"exact_dst": args.exact_dst}
    if args.format is not None:
        overrides["output"] = {"format": args.format}

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def _require(inputs: dict[str, Any], *keys: str) -> None:
    missing = [key for key in keys if inputs.get(key) is None]
    if missing:
        raise ValueError(f"Missing required inputs: {', '.join(missing)}")


def _print_table(result: CalculationResult, calendar: TradingCalendar) -> None:
    frame = result.table.to_frame()
    frame.columns = [
        calendar.to_eastern(t).strftime("%a %m-%d %H:%M") for t in result.table.time_axis
    ]
    status = "open" if result.market_instant.is_open else "closed"
    print(f"Calculation time: {result.market_instant.time.isoformat()} (market {status})")
    if result.call_price_range is not None:
        print(f"Call: {result.call_price_range}  Put: {result.put_price_range}")
    initial_cost = getattr(result.table, "initial_cost", None)
    if initial_cost is not None:
        print(f"Initial cost: {initial_cost.value:.2f} {initial_cost.sign}")
    print(frame.to_string())


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_json(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    inputs = config["inputs"]
    legs = ensure_list(inputs.get("legs"))
    _require(inputs, "spot", "volatility", "expiration")
    if not legs:
        _require(inputs, "strike")

    estimator = build_estimator(config.get("pricing"))
    calendar = build_calendar(config.get("calendar"))
    now = datetime.fromisoformat(str(inputs["now"])) if inputs.get("now") else None

    logger.info("Model:      %s", type(estimator.model).__name__)
    logger.info("Rates:      %s", list(estimator.rates))
    logger.info("Holidays:   %d dates", len(calendar.holidays))

    if legs:
        result = calculate_strategy(
            spot=float(inputs["spot"]),
            volatility_pct=float(inputs["volatility"]),
            expiration=str(inputs["expiration"]),
            legs=Strategy.from_legs(str(leg) for leg in legs),
            price_increment=float(inputs["price_increment"]),
            now=now,
            estimator=estimator,
            calendar=calendar,
        )
    else:
        result = calculate(
            spot=float(inputs["spot"]),
            strike=float(inputs["strike"]),
            volatility_pct=float(inputs["volatility"]),
            expiration=str(inputs["expiration"]),
            option_type=inputs["option_type"],
            price_increment=float(inputs["price_increment"]),
            now=now,
            estimator=estimator,
            calendar=calendar,
        )

    if isinstance(result, GridError):
        logger.error("%s", result.message)
        print(result.message, file=sys.stderr)
        raise SystemExit(1)

    if config["output"]["format"] == "json":
        print_json(result.to_dict())
    else:
        _print_table(result, calendar)


if __name__ == "__main__":
    main()
