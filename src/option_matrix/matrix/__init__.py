"""Pricing-matrix axes, generators and request-level entry points."""

from .generator import generate_single_option_table, generate_strategy_table
from .price_axis import ROUNDING_PREFERENCES, build_price_axis, round_stock_price
from .service import calculate, calculate_strategy, get_market_instant, resolve_expiration
from .time_axis import build_time_axis
from .types import (
    INVALID_EXPIRATION,
    CalculationResult,
    GridError,
    SingleOptionTable,
    StrategyTable,
    TableRow,
)

__all__ = [
    "ROUNDING_PREFERENCES",
    "build_price_axis",
    "round_stock_price",
    "build_time_axis",
    "generate_single_option_table",
    "generate_strategy_table",
    "calculate",
    "calculate_strategy",
    "get_market_instant",
    "resolve_expiration",
    "INVALID_EXPIRATION",
    "CalculationResult",
    "GridError",
    "SingleOptionTable",
    "StrategyTable",
    "TableRow",
]
