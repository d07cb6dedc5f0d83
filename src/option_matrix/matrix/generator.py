"""Pricing-matrix generation for single options and multi-leg strategies.

Both generators share the same flow: validate the expiration, build the
price and time axes, then value every (price, time) cell with a time to
expiry measured in 365.25-day years from that column to expiration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from option_matrix.market_calendar import TradingCalendar, as_utc, year_fraction
from option_matrix.matrix.price_axis import build_price_axis
from option_matrix.matrix.time_axis import build_time_axis
from option_matrix.matrix.types import (
    INVALID_EXPIRATION,
    GridError,
    SingleOptionTable,
    StrategyTable,
    TableRow,
)
from option_matrix.options import (
    InitialCost,
    OptionLeg,
    OptionSpec,
    OptionTypeInput,
    PriceRangeEstimator,
    Strategy,
    normalize_option_type,
    strategy_value,
)

logger = logging.getLogger(__name__)


def _axes(
    spot: float,
    strikes: Sequence[float],
    start: datetime,
    expiration: datetime,
    price_increment: float,
    calendar: TradingCalendar,
) -> tuple[list[float], list[datetime]]:
    price_axis = build_price_axis(spot, strikes, price_increment)
    time_axis = build_time_axis(start, expiration, calendar)
    logger.debug(
        "Axes built: %d prices x %d times (%s -> %s)",
        len(price_axis),
        len(time_axis),
        time_axis[0],
        time_axis[-1],
    )
    return price_axis, time_axis


def generate_single_option_table(
    *,
    spot: float,
    strike: float,
    volatility: float,
    start: datetime,
    expiration: datetime,
    price_increment: float = 1.0,
    option_type: OptionTypeInput = "call",
    estimator: PriceRangeEstimator | None = None,
    calendar: TradingCalendar | None = None,
) -> SingleOptionTable | GridError:
    """Premium band for one option at every (stock price, time) cell.

    Returns `GridError` when `expiration` is not after `start`.
    """
    start, expiration = as_utc(start), as_utc(expiration)
    if expiration <= start:
        return GridError(INVALID_EXPIRATION)

    estimator = estimator or PriceRangeEstimator()
    calendar = calendar or TradingCalendar()
    price_axis, time_axis = _axes(
        spot, [strike], start, expiration, price_increment, calendar
    )
    years = [year_fraction(expiration, t) for t in time_axis]

    rows = []
    for stock_price in price_axis:
        cells = tuple(
            str(
                estimator.estimate(
                    OptionSpec(strike=strike, time_to_expiry=T, option_type=option_type),
                    stock_price,
                    volatility,
                )
            )
            for T in years
        )
        rows.append(TableRow(stock_price=stock_price, cells=cells))

    table = SingleOptionTable(
        price_axis=tuple(price_axis),
        time_axis=tuple(time_axis),
        rows=tuple(rows),
        option_type=normalize_option_type(option_type),
    )
    logger.info(
        "Generated %s table: %d rows x %d columns",
        table.option_type,
        len(rows),
        len(time_axis),
    )
    return table


def generate_strategy_table(
    *,
    spot: float,
    volatility: float,
    start: datetime,
    expiration: datetime,
    strategy: Strategy | Iterable[OptionLeg | str],
    price_increment: float = 1.0,
    estimator: PriceRangeEstimator | None = None,
    calendar: TradingCalendar | None = None,
) -> StrategyTable | GridError:
    """Projected P&L of a multi-leg strategy at every (stock price, time) cell.

    Each cell is the strategy value at that point minus the initial cost,
    where initial cost is the strategy value at `spot` and `start`. Cells
    are rounded to two decimals.
    """
    if not isinstance(strategy, Strategy):
        strategy = Strategy.from_legs(strategy)

    start, expiration = as_utc(start), as_utc(expiration)
    if expiration <= start:
        return GridError(INVALID_EXPIRATION)

    estimator = estimator or PriceRangeEstimator()
    calendar = calendar or TradingCalendar()
    price_axis, time_axis = _axes(
        spot, strategy.strikes, start, expiration, price_increment, calendar
    )
    years = [year_fraction(expiration, t) for t in time_axis]

    net_cost = strategy_value(strategy, spot, years[0], volatility, estimator)
    initial_cost = InitialCost.from_net(net_cost)
    logger.debug("Initial cost: %.4f (%s)", initial_cost.value, initial_cost.sign)

    rows = []
    for stock_price in price_axis:
        cells = tuple(
            round(
                strategy_value(strategy, stock_price, T, volatility, estimator)
                - net_cost,
                2,
            )
            + 0.0
            for T in years
        )
        rows.append(TableRow(stock_price=stock_price, cells=cells))

    logger.info(
        "Generated %d-leg strategy table: %d rows x %d columns",
        len(strategy.legs),
        len(rows),
        len(time_axis),
    )
    return StrategyTable(
        price_axis=tuple(price_axis),
        time_axis=tuple(time_axis),
        rows=tuple(rows),
        initial_cost=initial_cost,
        strategy=strategy,
    )
