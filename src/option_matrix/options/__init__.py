"""Option pricing models, engines, price bands and strategy valuation."""

from .engines import BinomialTreePricer, BlackScholesPricer, PriceModel
from .models import binomial_tree_price, bs_d1_d2, bs_price, intrinsic_value, norm_cdf
from .price_range import PriceRange, PriceRangeEstimator, candidate_rates, price_range
from .strategy import InitialCost, leg_value, strategy_value
from .types import (
    MarketState,
    OptionLeg,
    OptionSpec,
    OptionType,
    OptionTypeInput,
    PositionSide,
    Strategy,
    normalize_option_type,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "OptionSpec",
    "MarketState",
    "PositionSide",
    "OptionLeg",
    "Strategy",
    "normalize_option_type",
    "PriceModel",
    "BinomialTreePricer",
    "BlackScholesPricer",
    "binomial_tree_price",
    "bs_d1_d2",
    "bs_price",
    "intrinsic_value",
    "norm_cdf",
    "PriceRange",
    "PriceRangeEstimator",
    "candidate_rates",
    "price_range",
    "InitialCost",
    "leg_value",
    "strategy_value",
]
