"""CRR binomial-tree pricing for vanilla options."""

from __future__ import annotations

import numpy as np

from option_matrix.options.types import (
    OptionType,
    OptionTypeInput,
    normalize_option_type,
)


def _intrinsic_value(
    spot: np.ndarray | float, strike: float, option_type: OptionType
) -> np.ndarray:
    if option_type == OptionType.CALL:
        return np.maximum(np.asarray(spot, dtype=float) - strike, 0.0)
    return np.maximum(strike - np.asarray(spot, dtype=float), 0.0)


def binomial_tree_price(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = OptionType.CALL,
    steps: int = 100,
    american: bool = True,
) -> float:
    """Price a vanilla option with a Cox-Ross-Rubinstein tree.

    Args:
        S: Spot price.
        K: Strike price.
        T: Time to expiry in years. Values <= 0 return intrinsic value.
        sigma: Annualized volatility in decimals. Values <= 0 return
            intrinsic value.
        r: Continuously-compounded risk-free rate (may be negative).
        option_type: One of `{'call', 'put', 'C', 'P'}`.
        steps: Number of binomial time steps.
        american: If True, allow early exercise at each node.

    Returns:
        Present value for one option.

    Raises:
        ValueError: If `steps < 1`.
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")

    opt_type = normalize_option_type(option_type)
    if T <= 0 or sigma <= 0:
        return float(_intrinsic_value(S, K, opt_type))

    dt = T / steps
    u = np.exp(sigma * np.sqrt(dt))
    d = 1.0 / u
    p = (np.exp(r * dt) - d) / (u - d)
    disc = np.exp(-r * dt)

    j = np.arange(steps + 1)
    spots_T = S * (u**j) * (d ** (steps - j))
    option_vals = _intrinsic_value(spots_T, K, opt_type)

    for step in range(steps - 1, -1, -1):
        option_vals = disc * (p * option_vals[1:] + (1.0 - p) * option_vals[:-1])
        if not american:
            continue

        j = np.arange(step + 1)
        spots = S * (u**j) * (d ** (step - j))
        option_vals = np.maximum(option_vals, _intrinsic_value(spots, K, opt_type))

    return float(option_vals[0])
