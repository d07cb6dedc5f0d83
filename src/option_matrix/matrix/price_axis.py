"""Stock-price rows of the pricing matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable

from option_matrix.config.constants import PRICE_AXIS_PADDING_STEPS

# Increments that snap grid prices to a "nice" denomination.
ROUNDING_PREFERENCES: frozenset[float] = frozenset({0.5, 1.0, 2.5, 5.0, 10.0})

_GRID_DECIMALS = 10
_ANCHOR_TOLERANCE = 1e-9


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


def round_stock_price(stock_price: float, rounding_preference: float) -> float:
    """Round to the nearest multiple of a supported preference.

    Unsupported preferences leave the price unchanged.
    """
    if rounding_preference not in ROUNDING_PREFERENCES:
        return stock_price
    return _round_half_up(stock_price / rounding_preference) * rounding_preference


def build_price_axis(
    S: float,
    strikes: Iterable[float],
    increment: float,
    padding_steps: int = PRICE_AXIS_PADDING_STEPS,
) -> list[float]:
    """Sorted distinct positive prices around spot and every strike.

    The grid runs `padding_steps` increments beyond the lowest and highest of
    spot and strikes. Spot and each strike are always present exactly, even
    when they fall between grid points.
    """
    if increment <= 0:
        raise ValueError("increment must be > 0")

    anchors = [float(S), *(float(k) for k in strikes)]
    low = math.floor((min(anchors) - padding_steps * increment) / increment) * increment
    high = math.ceil((max(anchors) + padding_steps * increment) / increment) * increment

    # Grid values carry float noise for fractional increments; snap them and
    # let an exact anchor replace any grid value it coincides with.
    tolerance = _ANCHOR_TOLERANCE * increment
    count = int(round((high - low) / increment))
    grid = (
        round(round_stock_price(low + i * increment, increment), _GRID_DECIMALS)
        for i in range(count + 1)
    )
    prices = {
        p for p in grid if all(abs(p - anchor) > tolerance for anchor in anchors)
    }
    prices.update(anchors)
    return sorted(p for p in prices if p > 0)
