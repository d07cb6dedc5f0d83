"""Request-level entry points for the CLI and embedding applications.

These resolve the valuation instant from the clock, turn an expiration date
into that day's closing instant and take volatility in percent, then hand
plain values to the generators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from option_matrix.market_calendar import (
    MarketInstant,
    TradingCalendar,
    as_utc,
    year_fraction,
)
from option_matrix.matrix.generator import (
    generate_single_option_table,
    generate_strategy_table,
)
from option_matrix.matrix.types import CalculationResult, GridError
from option_matrix.options import (
    OptionLeg,
    OptionSpec,
    OptionType,
    OptionTypeInput,
    PriceRangeEstimator,
    Strategy,
)

logger = logging.getLogger(__name__)


def get_market_instant(
    now: datetime | None = None, calendar: TradingCalendar | None = None
) -> MarketInstant:
    """Valuation instant for `now` (defaults to the system clock)."""
    return (calendar or TradingCalendar()).market_instant(now)


def resolve_expiration(
    expiration: date | datetime | str, calendar: TradingCalendar | None = None
) -> datetime:
    """Map a bare date to its 16:00 Eastern close; pass instants through."""
    calendar = calendar or TradingCalendar()
    if isinstance(expiration, str):
        text = expiration.strip()
        expiration = (
            datetime.fromisoformat(text) if "T" in text else date.fromisoformat(text)
        )
    if isinstance(expiration, datetime):
        return as_utc(expiration)
    _, close = calendar.session_bounds(expiration)
    return close


def calculate(
    *,
    spot: float,
    strike: float,
    volatility_pct: float,
    expiration: date | datetime | str,
    option_type: OptionTypeInput = "call",
    price_increment: float = 1.0,
    now: datetime | None = None,
    estimator: PriceRangeEstimator | None = None,
    calendar: TradingCalendar | None = None,
) -> CalculationResult | GridError:
    """Headline call/put bands plus the single-option table."""
    estimator = estimator or PriceRangeEstimator()
    calendar = calendar or TradingCalendar()
    instant = calendar.market_instant(now)
    expiration_at = resolve_expiration(expiration, calendar)
    sigma = volatility_pct / 100

    logger.info(
        "Calculating %s S=%s K=%s vol=%.2f%% at %s (market %s)",
        option_type,
        spot,
        strike,
        volatility_pct,
        instant.time.isoformat(),
        "open" if instant.is_open else "closed",
    )

    table = generate_single_option_table(
        spot=spot,
        strike=strike,
        volatility=sigma,
        start=instant.time,
        expiration=expiration_at,
        price_increment=price_increment,
        option_type=option_type,
        estimator=estimator,
        calendar=calendar,
    )
    if isinstance(table, GridError):
        logger.warning("Calculation rejected: %s", table.message)
        return table

    T = year_fraction(expiration_at, instant.time)
    return CalculationResult(
        table=table,
        market_instant=instant,
        call_price_range=estimator.estimate(
            OptionSpec(strike=strike, time_to_expiry=T, option_type=OptionType.CALL),
            spot,
            sigma,
        ),
        put_price_range=estimator.estimate(
            OptionSpec(strike=strike, time_to_expiry=T, option_type=OptionType.PUT),
            spot,
            sigma,
        ),
    )


def calculate_strategy(
    *,
    spot: float,
    volatility_pct: float,
    expiration: date | datetime | str,
    legs: Strategy | Iterable[OptionLeg | str],
    price_increment: float = 1.0,
    now: datetime | None = None,
    estimator: PriceRangeEstimator | None = None,
    calendar: TradingCalendar | None = None,
) -> CalculationResult | GridError:
    """Strategy P&L table stamped with the valuation instant."""
    calendar = calendar or TradingCalendar()
    instant = calendar.market_instant(now)
    expiration_at = resolve_expiration(expiration, calendar)

    table = generate_strategy_table(
        spot=spot,
        volatility=volatility_pct / 100,
        start=instant.time,
        expiration=expiration_at,
        strategy=legs,
        price_increment=price_increment,
        estimator=estimator,
        calendar=calendar,
    )
    if isinstance(table, GridError):
        logger.warning("Strategy calculation rejected: %s", table.message)
        return table
    return CalculationResult(table=table, market_instant=instant)
