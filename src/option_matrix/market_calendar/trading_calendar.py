"""US equity trading calendar: sessions, market instant and trading minutes.

All instants accepted here may be timezone-aware or naive; naive values are
treated as UTC. Every instant returned is timezone-aware UTC.

Eastern time is derived with a month-based offset by default (March through
October are treated as UTC-4, every other month as UTC-5). This is wrong for
a few days around each DST cutover; pass ``exact_dst=True`` to use the IANA
``America/New_York`` rules instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from option_matrix.config.constants import (
    DAYS_PER_YEAR,
    EASTERN_TZ,
    MARKET_CLOSE,
    MARKET_OPEN,
    TIME_WALK_LIMIT,
)
from option_matrix.market_calendar.holidays import (
    US_MARKET_HOLIDAYS,
    normalize_holidays,
)

logger = logging.getLogger(__name__)

_EDT = timedelta(hours=-4)
_EST = timedelta(hours=-5)
_SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60


class ComputationBoundExceeded(RuntimeError):
    """Raised when a trading-minute walk does not finish within its bound."""


def as_utc(instant: datetime) -> datetime:
    """Return `instant` as an aware UTC datetime (naive means UTC)."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def year_fraction(later: datetime, earlier: datetime) -> float:
    """Signed elapsed time in years of 365.25 days."""
    return (as_utc(later) - as_utc(earlier)).total_seconds() / _SECONDS_PER_YEAR


@dataclass(frozen=True)
class MarketInstant:
    """Valuation timestamp and whether the market was open at that time."""

    time: datetime
    is_open: bool

    def to_dict(self) -> dict[str, object]:
        return {"time": self.time.isoformat(), "is_open": self.is_open}


@dataclass(frozen=True)
class TradingCalendar:
    """Trading days and regular-session hours for the US equity market.

    `holidays` is an immutable set of ISO dates; swap it to run against an
    alternate calendar.
    """

    holidays: frozenset[str] = US_MARKET_HOLIDAYS
    exact_dst: bool = False
    market_open: time = MARKET_OPEN
    market_close: time = MARKET_CLOSE
    walk_limit: int = TIME_WALK_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "holidays", normalize_holidays(self.holidays))
        if self.market_open >= self.market_close:
            raise ValueError("market_open must be earlier than market_close")
        if self.walk_limit < 1:
            raise ValueError("walk_limit must be >= 1")

    # --- Eastern time ---

    def utc_offset(self, day: date) -> timedelta:
        """UTC offset of US Eastern time on `day`."""
        if self.exact_dst:
            return ZoneInfo(EASTERN_TZ).utcoffset(datetime.combine(day, self.market_open))
        return _EDT if 3 <= day.month < 11 else _EST

    def _eastern_tz(self, day: date) -> tzinfo:
        if self.exact_dst:
            return ZoneInfo(EASTERN_TZ)
        return timezone(self.utc_offset(day))

    def to_eastern(self, instant: datetime) -> datetime:
        utc = as_utc(instant)
        if self.exact_dst:
            return utc.astimezone(ZoneInfo(EASTERN_TZ))
        # Month lookup uses the standard-time date; only matters at midnight
        # on the first of a month.
        standard_day = (utc + _EST).date()
        return utc.astimezone(timezone(self.utc_offset(standard_day)))

    def eastern_date(self, value: date | datetime | str) -> date:
        """Calendar date in US Eastern time for a date, instant or ISO string."""
        if isinstance(value, str):
            text = value.strip()
            value = datetime.fromisoformat(text) if "T" in text else date.fromisoformat(text)
        if isinstance(value, datetime):
            return self.to_eastern(value).date()
        return value

    def session_bounds(self, day: date) -> tuple[datetime, datetime]:
        """Open and close of the regular session on `day`, as UTC instants."""
        tz = self._eastern_tz(day)
        open_ = datetime.combine(day, self.market_open, tzinfo=tz)
        close = datetime.combine(day, self.market_close, tzinfo=tz)
        return open_.astimezone(timezone.utc), close.astimezone(timezone.utc)

    # --- Trading days ---

    def is_trading_day(self, value: date | datetime | str) -> bool:
        """False on Eastern weekends and listed holidays, True otherwise."""
        day = self.eastern_date(value)
        if day.weekday() >= 5:
            return False
        return day.isoformat() not in self.holidays

    def previous_trading_day(self, day: date) -> date:
        """Latest trading day on or before `day`."""
        while not self.is_trading_day(day):
            day -= timedelta(days=1)
        return day

    def next_trading_day(self, day: date) -> date:
        """Earliest trading day strictly after `day`."""
        day += timedelta(days=1)
        while not self.is_trading_day(day):
            day += timedelta(days=1)
        return day

    def is_market_open(self, instant: datetime) -> bool:
        day = self.eastern_date(instant)
        if not self.is_trading_day(day):
            return False
        open_, close = self.session_bounds(day)
        return open_ <= as_utc(instant) < close

    def market_instant(self, now: datetime | None = None) -> MarketInstant:
        """Resolve the valuation timestamp for `now`.

        During regular hours this is `now` itself. Otherwise it is the close
        of the most recent trading session.
        """
        now = as_utc(now if now is not None else datetime.now(timezone.utc))
        if self.is_market_open(now):
            return MarketInstant(time=now, is_open=True)

        day = self.eastern_date(now)
        open_, _ = self.session_bounds(day)
        if self.is_trading_day(day) and now < open_:
            day -= timedelta(days=1)
        day = self.previous_trading_day(day)

        _, close = self.session_bounds(day)
        logger.debug("Market closed at %s; using last close %s", now, close)
        return MarketInstant(time=close, is_open=False)

    # --- Trading minutes ---

    def trading_minutes_between(self, start: datetime, end: datetime) -> float:
        """Minutes of regular-session time inside ``[start, end]``."""
        start, end = as_utc(start), as_utc(end)
        if end <= start:
            return 0.0

        total = 0.0
        day = self.eastern_date(start)
        last_day = self.eastern_date(end)
        while day <= last_day:
            if self.is_trading_day(day):
                open_, close = self.session_bounds(day)
                lo = max(open_, start)
                hi = min(close, end)
                if lo < hi:
                    total += (hi - lo).total_seconds() / 60
            day += timedelta(days=1)
        return total

    def advance_trading_minutes(self, start: datetime, minutes: float) -> datetime:
        """Walk forward from `start` by `minutes` of regular-session time.

        Time outside the session (nights, weekends, holidays) is skipped by
        jumping to the next session open.

        Raises:
            ComputationBoundExceeded: If the walk spans more than
                `walk_limit` sessions.
        """
        current = as_utc(start)
        remaining = float(minutes)
        steps = 0

        while remaining > 0:
            if steps >= self.walk_limit:
                raise ComputationBoundExceeded(
                    f"Trading-minute walk from {start} exceeded {self.walk_limit} "
                    f"steps with {remaining:.2f} minutes left"
                )
            steps += 1

            day = self.eastern_date(current)
            open_, close = self.session_bounds(day)
            if not self.is_trading_day(day) or current >= close:
                # Roll to the next session and consume it in this same step.
                day = self.next_trading_day(day)
                open_, close = self.session_bounds(day)
                current = open_

            current = max(current, open_)
            left = (close - current).total_seconds() / 60
            if remaining <= left:
                current += timedelta(minutes=remaining)
                remaining = 0.0
            else:
                current = close
                remaining -= left

        return current
