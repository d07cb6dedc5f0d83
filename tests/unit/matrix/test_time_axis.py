from datetime import datetime, timezone

import pytest

from option_matrix.market_calendar import ComputationBoundExceeded, TradingCalendar
from option_matrix.matrix import build_time_axis

UTC = timezone.utc
FRIDAY_10_ET = datetime(2025, 1, 10, 15, 0, tzinfo=UTC)
NEXT_FRIDAY_CLOSE = datetime(2025, 1, 17, 21, 0, tzinfo=UTC)


def test_time_axis_has_thirteen_points_from_start_to_expiration():
    axis = build_time_axis(FRIDAY_10_ET, NEXT_FRIDAY_CLOSE)

    assert len(axis) == 13
    assert axis[0] == FRIDAY_10_ET
    assert axis[-1] == NEXT_FRIDAY_CLOSE
    assert all(a <= b for a, b in zip(axis, axis[1:]))


def test_time_axis_is_spaced_in_trading_minutes():
    # 2310 trading minutes / 12 = 192.5 per column
    axis = build_time_axis(FRIDAY_10_ET, NEXT_FRIDAY_CLOSE)

    assert axis[1] == datetime(2025, 1, 10, 18, 12, 30, tzinfo=UTC)
    # 385 minutes: 360 left on Friday, 25 into Monday's session
    assert axis[2] == datetime(2025, 1, 13, 14, 55, tzinfo=UTC)
    calendar = TradingCalendar()
    assert all(calendar.is_trading_day(t) for t in axis)


def test_time_axis_accepts_naive_utc():
    axis = build_time_axis(datetime(2025, 1, 10, 15, 0), datetime(2025, 1, 17, 21, 0))
    assert axis[0] == FRIDAY_10_ET
    assert axis[-1] == NEXT_FRIDAY_CLOSE


def test_time_axis_with_no_trading_minutes_repeats_start():
    saturday = datetime(2025, 1, 11, 12, 0, tzinfo=UTC)
    sunday = datetime(2025, 1, 12, 12, 0, tzinfo=UTC)

    axis = build_time_axis(saturday, sunday)

    assert axis[:12] == [saturday] * 12
    assert axis[12] == sunday


def test_time_axis_rejects_bad_window():
    with pytest.raises(ValueError, match="after start"):
        build_time_axis(NEXT_FRIDAY_CLOSE, FRIDAY_10_ET)


def test_time_axis_surfaces_walk_limit():
    with pytest.raises(ComputationBoundExceeded):
        build_time_axis(
            FRIDAY_10_ET, NEXT_FRIDAY_CLOSE, calendar=TradingCalendar(walk_limit=2)
        )


def test_time_axis_spans_multi_year_expiration():
    expiration = datetime(2027, 12, 17, 21, 0, tzinfo=UTC)

    axis = build_time_axis(FRIDAY_10_ET, expiration)

    assert len(axis) == 13
    assert axis[-1] == expiration
    assert all(a <= b for a, b in zip(axis, axis[1:]))
    assert axis[11] < expiration
