"""Price bands across a fixed set of candidate risk-free rates.

Rate uncertainty is modelled as a band: the selected pricing engine runs once
per candidate rate and the band spans the smallest and largest result.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from option_matrix.config.constants import DEFAULT_RISK_FREE_RATES
from option_matrix.options.engines import BinomialTreePricer, PriceModel
from option_matrix.options.types import MarketState, OptionSpec, OptionType


@dataclass(frozen=True, slots=True)
class PriceRange:
    """Non-negative ``[low, high]`` premium band."""

    low: float
    high: float

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    def __str__(self) -> str:
        return f"{self.low:.2f}-{self.high:.2f}"


@dataclass(frozen=True)
class PriceRangeEstimator:
    """Evaluate one pricing engine at every candidate rate.

    `rates` is fixed per estimator instance; pass a different tuple at
    construction to run with an alternate rate set.
    """

    model: PriceModel = field(default_factory=BinomialTreePricer)
    rates: tuple[float, ...] = DEFAULT_RISK_FREE_RATES

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", tuple(float(r) for r in self.rates))
        if not self.rates:
            raise ValueError("rates must not be empty")

    def prices(self, spec: OptionSpec, spot: float, volatility: float) -> list[float]:
        """Return one model price per candidate rate, in rate order."""
        return [
            self.model.price(
                spec, MarketState(spot=spot, volatility=volatility, rate=rate)
            )
            for rate in self.rates
        ]

    def estimate(self, spec: OptionSpec, spot: float, volatility: float) -> PriceRange:
        prices = self.prices(spec, spot, volatility)
        return PriceRange(low=max(0.0, min(prices)), high=max(0.0, max(prices)))


def price_range(
    is_call: bool,
    S: float,
    K: float,
    T: float,
    sigma: float,
    estimator: PriceRangeEstimator | None = None,
) -> str:
    """Return the ``"low-high"`` premium band for one option."""
    estimator = estimator or PriceRangeEstimator()
    spec = OptionSpec(
        strike=K,
        time_to_expiry=T,
        option_type=OptionType.CALL if is_call else OptionType.PUT,
    )
    return str(estimator.estimate(spec, S, sigma))


def candidate_rates(rates: Sequence[float] | None) -> tuple[float, ...]:
    """Normalize an optional config value into a rate tuple."""
    if rates is None:
        return DEFAULT_RISK_FREE_RATES
    return tuple(float(r) for r in rates)
