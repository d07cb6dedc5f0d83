"""Compare the analytic and lattice models on one call-spread matrix.

This script demonstrates a minimal pipeline:
1) resolve the valuation instant for a fixed clock,
2) build a two-leg call spread,
3) generate its P&L matrix under both valuation models,
4) print the initial cost and the largest cell difference.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime

from option_matrix.market_calendar import TradingCalendar
from option_matrix.matrix import GridError, generate_strategy_table, resolve_expiration
from option_matrix.options import (
    BinomialTreePricer,
    BlackScholesPricer,
    PriceRangeEstimator,
    Strategy,
)


@dataclass(frozen=True)
class ExampleConfig:
    """Runtime configuration for the model comparison example."""

    spot: float
    volatility: float
    expiration: str
    now: str
    legs: tuple[str, ...]
    price_increment: float


def _parse_args() -> ExampleConfig:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--spot", type=float, default=150.0)
    parser.add_argument("--volatility", type=float, default=0.25)
    parser.add_argument("--expiration", default="2025-01-17")
    parser.add_argument("--now", default="2025-01-10T15:00:00+00:00")
    parser.add_argument(
        "--leg", dest="legs", action="append", default=None, help="action:type:strike"
    )
    parser.add_argument("--increment", type=float, default=2.5)
    args = parser.parse_args()
    return ExampleConfig(
        spot=args.spot,
        volatility=args.volatility,
        expiration=args.expiration,
        now=args.now,
        legs=tuple(args.legs or ("buy:call:150", "sell:call:160")),
        price_increment=args.increment,
    )


def main() -> None:
    cfg = _parse_args()
    calendar = TradingCalendar()
    instant = calendar.market_instant(datetime.fromisoformat(cfg.now))
    strategy = Strategy.from_legs(cfg.legs)

    tables = {}
    for name, model in (
        ("binomial", BinomialTreePricer()),
        ("black_scholes", BlackScholesPricer()),
    ):
        table = generate_strategy_table(
            spot=cfg.spot,
            volatility=cfg.volatility,
            start=instant.time,
            expiration=resolve_expiration(cfg.expiration, calendar),
            strategy=strategy,
            price_increment=cfg.price_increment,
            estimator=PriceRangeEstimator(model=model),
            calendar=calendar,
        )
        if isinstance(table, GridError):
            raise SystemExit(table.message)
        tables[name] = table
        print(f"{name:>14}: {table.initial_cost.value:.2f} {table.initial_cost.sign}")

    diff = (tables["binomial"].to_frame() - tables["black_scholes"].to_frame()).abs()
    print(f"Max cell difference: {diff.to_numpy().max():.2f}")


if __name__ == "__main__":
    main()
