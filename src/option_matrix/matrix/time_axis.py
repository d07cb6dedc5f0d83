"""Time columns of the pricing matrix, spaced in trading minutes."""

from __future__ import annotations

import logging
from datetime import datetime

from option_matrix.config.constants import TIME_AXIS_POINTS
from option_matrix.market_calendar import TradingCalendar, as_utc

logger = logging.getLogger(__name__)


def build_time_axis(
    start: datetime,
    expiration: datetime,
    calendar: TradingCalendar | None = None,
    points: int = TIME_AXIS_POINTS,
) -> list[datetime]:
    """Return `points` instants from `start` to `expiration`.

    Intermediate points are evenly spaced by regular-session minutes, so
    nights, weekends and holidays take up no width. The first point is
    `start` and the last is exactly `expiration`.

    Raises:
        ValueError: If `expiration` is not after `start` or `points < 2`.
        ComputationBoundExceeded: If walking the calendar runs past its bound.
    """
    if points < 2:
        raise ValueError("points must be >= 2")
    start, expiration = as_utc(start), as_utc(expiration)
    if expiration <= start:
        raise ValueError("expiration must be after start")

    calendar = calendar or TradingCalendar()
    total_minutes = calendar.trading_minutes_between(start, expiration)
    step = total_minutes / (points - 1) if total_minutes > 0 else 0.0
    logger.debug(
        "Time axis: %.1f trading minutes, %.2f per step", total_minutes, step
    )

    axis = [
        calendar.advance_trading_minutes(start, step * i) for i in range(points - 1)
    ]
    axis.append(expiration)
    return axis
