"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from option_matrix.options.types import MarketState, OptionSpec


@runtime_checkable
class PriceModel(Protocol):
    """Pricing capability required by the range estimator and grid builder."""

    def price(self, spec: OptionSpec, state: MarketState) -> float:
        """Return option value for one contract."""
