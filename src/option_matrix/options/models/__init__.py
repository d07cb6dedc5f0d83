"""Analytical and lattice option-pricing models."""

from .binomial_tree import binomial_tree_price
from .black_scholes import bs_d1_d2, bs_price, intrinsic_value, norm_cdf

__all__ = [
    "binomial_tree_price",
    "bs_d1_d2",
    "bs_price",
    "intrinsic_value",
    "norm_cdf",
]
