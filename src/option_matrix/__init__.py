"""Option and strategy pricing matrices over stock price and trading time."""

from option_matrix.market_calendar import (
    ComputationBoundExceeded,
    MarketInstant,
    TradingCalendar,
)
from option_matrix.matrix import (
    GridError,
    SingleOptionTable,
    StrategyTable,
    calculate,
    calculate_strategy,
    generate_single_option_table,
    generate_strategy_table,
    get_market_instant,
)
from option_matrix.options import (
    BinomialTreePricer,
    BlackScholesPricer,
    OptionLeg,
    PriceRangeEstimator,
    Strategy,
    price_range,
)

__all__ = [
    "ComputationBoundExceeded",
    "MarketInstant",
    "TradingCalendar",
    "GridError",
    "SingleOptionTable",
    "StrategyTable",
    "calculate",
    "calculate_strategy",
    "generate_single_option_table",
    "generate_strategy_table",
    "get_market_instant",
    "BinomialTreePricer",
    "BlackScholesPricer",
    "OptionLeg",
    "PriceRangeEstimator",
    "Strategy",
    "price_range",
]
