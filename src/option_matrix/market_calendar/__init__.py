"""Trading calendar, market instant and trading-minute arithmetic."""

from .holidays import (
    US_MARKET_HOLIDAYS,
    holidays_from_exchange_calendar,
    load_holiday_file,
    normalize_holidays,
)
from .trading_calendar import (
    ComputationBoundExceeded,
    MarketInstant,
    TradingCalendar,
    as_utc,
    year_fraction,
)

__all__ = [
    "US_MARKET_HOLIDAYS",
    "holidays_from_exchange_calendar",
    "load_holiday_file",
    "normalize_holidays",
    "ComputationBoundExceeded",
    "MarketInstant",
    "TradingCalendar",
    "as_utc",
    "year_fraction",
]
