"""Binomial-tree pricing engine for vanilla options."""

from __future__ import annotations

from dataclasses import dataclass

from option_matrix.options.models.binomial_tree import binomial_tree_price
from option_matrix.options.types import MarketState, OptionSpec


@dataclass(frozen=True)
class BinomialTreePricer:
    """CRR tree pricer supporting American and European exercise."""

    steps: int = 100
    american: bool = True

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")

    def price(self, spec: OptionSpec, state: MarketState) -> float:
        return binomial_tree_price(
            S=state.spot,
            K=spec.strike,
            T=spec.time_to_expiry,
            sigma=state.volatility,
            r=state.rate,
            option_type=spec.option_type,
            steps=self.steps,
            american=self.american,
        )
