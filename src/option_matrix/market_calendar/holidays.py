"""US equity market holiday tables.

The static table covers 2024-2026. Dates outside it are not holidays, so
weekdays in later years count as trading days unless an alternate table is
injected (see `holidays_from_exchange_calendar` and `load_holiday_file`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from pathlib import Path

from option_matrix.config.constants import DEFAULT_EXCHANGE_CALENDAR

logger = logging.getLogger(__name__)

US_MARKET_HOLIDAYS: frozenset[str] = frozenset(
    {
        # 2024
        "2024-01-01", "2024-01-15", "2024-02-19", "2024-03-29", "2024-05-27",
        "2024-06-19", "2024-07-04", "2024-09-02", "2024-11-28", "2024-12-25",
        # 2025
        "2025-01-01", "2025-01-20", "2025-02-17", "2025-04-18", "2025-05-26",
        "2025-06-19", "2025-07-04", "2025-09-01", "2025-11-27", "2025-12-25",
        # 2026
        "2026-01-01", "2026-01-19", "2026-02-16", "2026-04-03", "2026-05-25",
        "2026-06-19", "2026-07-03", "2026-09-07", "2026-11-26", "2026-12-25",
    }
)


def normalize_holidays(values: Iterable[str | date]) -> frozenset[str]:
    """Coerce dates / ISO strings into a frozen set of ISO date strings."""
    out: set[str] = set()
    for value in values:
        if isinstance(value, date):
            out.add(value.isoformat())
        else:
            out.add(date.fromisoformat(str(value).strip()).isoformat())
    return frozenset(out)


def load_holiday_file(path: str | Path) -> frozenset[str]:
    """Read a YAML list of ISO dates (or a mapping with a `holidays` key)."""
    import yaml

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Holiday file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get("holidays", [])
    if not isinstance(data, list):
        raise ValueError("Holiday file must contain a YAML list of ISO dates.")

    holidays = normalize_holidays(data)
    logger.debug("Loaded %d holidays from %s", len(holidays), p)
    return holidays


def holidays_from_exchange_calendar(
    start_year: int,
    end_year: int,
    cal_name: str = DEFAULT_EXCHANGE_CALENDAR,
) -> frozenset[str]:
    """Weekday closures of an `exchange_calendars` calendar.

    A weekday inside ``[start_year, end_year]`` that is not a session of the
    calendar is reported as a holiday.
    """
    if end_year < start_year:
        raise ValueError("end_year must be >= start_year")

    import exchange_calendars as xcals

    start = date(start_year, 1, 1)
    end = date(end_year, 12, 31)

    cal = xcals.get_calendar(cal_name)
    first = max(start, cal.first_session.date())
    last = min(end, cal.last_session.date())
    if first > last:
        raise ValueError(
            f"{cal_name} has no sessions between {start_year} and {end_year}"
        )

    sessions = cal.sessions_in_range(first, last)
    expected = {d.date() for d in sessions.to_pydatetime()}

    closures: set[date] = set()
    day = first
    while day <= last:
        if day.weekday() < 5 and day not in expected:
            closures.add(day)
        day += timedelta(days=1)

    logger.debug(
        "Derived %d %s holidays for %d-%d",
        len(closures),
        cal_name,
        start_year,
        end_year,
    )
    return normalize_holidays(closures)
