"""Multi-leg strategy valuation and initial cost."""

from __future__ import annotations

from dataclasses import dataclass

from option_matrix.config.constants import CREDIT, DEBIT
from option_matrix.options.price_range import PriceRangeEstimator
from option_matrix.options.types import OptionLeg, OptionSpec, Strategy


@dataclass(frozen=True, slots=True)
class InitialCost:
    """Absolute cost to open a strategy and whether it is paid or received."""

    value: float
    sign: str

    @classmethod
    def from_net(cls, net: float) -> InitialCost:
        return cls(value=abs(net), sign=DEBIT if net > 0 else CREDIT)

    def to_dict(self) -> dict[str, object]:
        return {"value": round(self.value, 2), "sign": self.sign}


def leg_value(
    leg: OptionLeg,
    S: float,
    T: float,
    sigma: float,
    estimator: PriceRangeEstimator,
) -> float:
    """Unsigned value of one leg: the midpoint of its price band."""
    spec = OptionSpec(strike=leg.strike, time_to_expiry=T, option_type=leg.option_type)
    return estimator.estimate(spec, S, sigma).midpoint


def strategy_value(
    strategy: Strategy,
    S: float,
    T: float,
    sigma: float,
    estimator: PriceRangeEstimator,
) -> float:
    """Net value of all legs; bought legs add, sold legs subtract."""
    return sum(
        int(leg.side) * leg_value(leg, S, T, sigma, estimator)
        for leg in strategy.legs
    )
