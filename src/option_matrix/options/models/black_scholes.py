"""Closed-form Black-Scholes pricing for European options."""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

from option_matrix.options.types import (
    OptionType,
    OptionTypeInput,
    normalize_option_type,
)

# Abramowitz & Stegun 26.2.17 rational approximation of the normal CDF.
_AS_P = 0.2316419
_AS_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)


def norm_cdf(x: float) -> float:
    """Standard normal CDF via the five-term polynomial approximation.

    Absolute error is below 7.5e-8, which is plenty for display prices and
    keeps output identical across platforms.
    """
    t = 1.0 / (1.0 + _AS_P * abs(x))
    b1, b2, b3, b4, b5 = _AS_B
    poly = t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    tail = float(norm.pdf(x)) * poly
    return 1.0 - tail if x >= 0 else tail


def intrinsic_value(S: float, K: float, option_type: OptionTypeInput) -> float:
    """Payoff if exercised immediately."""
    if normalize_option_type(option_type) == OptionType.CALL:
        return max(0.0, S - K)
    return max(0.0, K - S)


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2 for Black-Scholes."""
    if T <= 0 or sigma <= 0:
        raise ValueError("T and sigma must be positive")
    d1 = (np.log(S / K) + (r + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))
    d2 = d1 - sigma * np.sqrt(T)
    return float(d1), float(d2)


def bs_price(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = OptionType.CALL,
    exact_cdf: bool = False,
) -> float:
    """Black-Scholes price.

    Returns intrinsic value when ``T <= 0`` or ``sigma <= 0``. ``exact_cdf``
    switches from the polynomial approximation to scipy's normal CDF.
    """
    opt_type = normalize_option_type(option_type)
    if T <= 0 or sigma <= 0:
        return intrinsic_value(S, K, opt_type)

    cdf = (lambda x: float(norm.cdf(x))) if exact_cdf else norm_cdf
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    discounted_strike = K * np.exp(-r * T)

    if opt_type == OptionType.CALL:
        return float(S * cdf(d1) - discounted_strike * cdf(d2))
    return float(discounted_strike * cdf(-d2) - S * cdf(-d1))
