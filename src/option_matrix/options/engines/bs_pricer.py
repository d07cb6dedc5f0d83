"""Black-Scholes pricing engine."""

from __future__ import annotations

from dataclasses import dataclass

from option_matrix.options.models.black_scholes import bs_price
from option_matrix.options.types import MarketState, OptionSpec


@dataclass(frozen=True)
class BlackScholesPricer:
    """Closed-form European pricer.

    By default the normal CDF is the fixed-coefficient polynomial
    approximation; set ``exact_cdf=True`` to use scipy's CDF.
    """

    exact_cdf: bool = False

    def price(self, spec: OptionSpec, state: MarketState) -> float:
        return bs_price(
            S=state.spot,
            K=spec.strike,
            T=spec.time_to_expiry,
            sigma=state.volatility,
            r=state.rate,
            option_type=spec.option_type,
            exact_cdf=self.exact_cdf,
        )
