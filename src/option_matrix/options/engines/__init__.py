"""Pricing engines used by the range estimator and grid generator."""

from .base import PriceModel
from .binomial_tree_pricer import BinomialTreePricer
from .bs_pricer import BlackScholesPricer

__all__ = [
    "PriceModel",
    "BinomialTreePricer",
    "BlackScholesPricer",
]
