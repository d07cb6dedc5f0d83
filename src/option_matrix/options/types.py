"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Literal, TypeAlias


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


# Tolerant input type accepted at system boundaries (CLI/config/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to ``OptionType``."""
    if option_type in ("call", "C"):
        return OptionType.CALL
    if option_type in ("put", "P"):
        return OptionType.PUT
    raise ValueError("option_type must be one of {'call', 'put', 'C', 'P'}")


@dataclass(frozen=True)
class OptionSpec:
    """Contract terms required for pricing one vanilla option.

    ``time_to_expiry`` is in years and may be <= 0 (at or past expiry).
    """

    strike: float
    time_to_expiry: float
    option_type: OptionTypeInput

    def __post_init__(self) -> None:
        if self.strike <= 0:
            raise ValueError("strike must be > 0")
        object.__setattr__(
            self, "option_type", normalize_option_type(self.option_type)
        )

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL


@dataclass(frozen=True)
class MarketState:
    """Market inputs used by pricing engines."""

    spot: float
    volatility: float
    rate: float = 0.0

    def __post_init__(self) -> None:
        if self.spot <= 0:
            raise ValueError("spot must be > 0")


class PositionSide(IntEnum):
    """Signed position direction used for PnL aggregation."""

    SHORT = -1
    LONG = 1

    @classmethod
    def from_action(cls, action: str | PositionSide) -> PositionSide:
        """Map ``buy``/``sell`` labels to a side."""
        if isinstance(action, PositionSide):
            return action
        label = str(action).strip().lower()
        if label == "buy":
            return cls.LONG
        if label == "sell":
            return cls.SHORT
        raise ValueError("action must be 'buy' or 'sell'")

    @property
    def action(self) -> str:
        return "buy" if self is PositionSide.LONG else "sell"


@dataclass(frozen=True)
class OptionLeg:
    """One directional position (buy/sell call/put at a strike)."""

    side: PositionSide
    option_type: OptionTypeInput
    strike: float

    def __post_init__(self) -> None:
        if not isinstance(self.side, PositionSide):
            raise ValueError("side must be PositionSide.SHORT or PositionSide.LONG")
        if self.strike <= 0:
            raise ValueError("strike must be > 0")
        object.__setattr__(
            self, "option_type", normalize_option_type(self.option_type)
        )

    @classmethod
    def parse(cls, text: str) -> OptionLeg:
        """Build a leg from ``"buy:call:150"``-style text."""
        parts = [p.strip() for p in text.split(":")]
        if len(parts) != 3:
            raise ValueError(
                f"Invalid leg {text!r}; expected 'action:type:strike'"
            )
        action, option_type, strike = parts
        return cls(
            side=PositionSide.from_action(action),
            option_type=option_type,
            strike=float(strike),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "action": self.side.action,
            "type": str(self.option_type),
            "strike": self.strike,
        }


@dataclass(frozen=True)
class Strategy:
    """Ordered collection of legs; order only matters for display."""

    legs: tuple[OptionLeg, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "legs", tuple(self.legs))
        if not self.legs:
            raise ValueError("strategy must contain at least one leg")

    @classmethod
    def from_legs(cls, legs: Iterable[OptionLeg | str]) -> Strategy:
        return cls(
            legs=tuple(
                leg if isinstance(leg, OptionLeg) else OptionLeg.parse(leg)
                for leg in legs
            )
        )

    @property
    def strikes(self) -> tuple[float, ...]:
        return tuple(leg.strike for leg in self.legs)
