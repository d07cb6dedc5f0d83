"""Result containers returned by the matrix generators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from option_matrix.market_calendar import MarketInstant
from option_matrix.options import InitialCost, OptionType, PriceRange, Strategy

INVALID_EXPIRATION = "Expiration must be in the future."


@dataclass(frozen=True)
class GridError:
    """Structured failure; no table data accompanies it."""

    message: str
    kind: str = "invalid_expiration"

    def to_dict(self) -> dict[str, object]:
        return {"error": self.message, "kind": self.kind}


@dataclass(frozen=True)
class TableRow:
    """One stock-price row: a cell per time column."""

    stock_price: float
    cells: tuple[str | float, ...]

    def to_dict(self) -> dict[str, object]:
        return {"stock_price": self.stock_price, "cells": list(self.cells)}


@dataclass(frozen=True)
class _PricingTable:
    price_axis: tuple[float, ...]
    time_axis: tuple[datetime, ...]
    rows: tuple[TableRow, ...]

    def to_frame(self) -> pd.DataFrame:
        """Stock prices as index, time points as columns."""
        return pd.DataFrame(
            [list(row.cells) for row in self.rows],
            index=pd.Index(self.price_axis, name="stock_price"),
            columns=pd.DatetimeIndex(self.time_axis, name="time"),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "price_axis": list(self.price_axis),
            "time_axis": [t.isoformat() for t in self.time_axis],
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass(frozen=True)
class SingleOptionTable(_PricingTable):
    """Premium bands (``"low-high"``) for one option."""

    option_type: OptionType = OptionType.CALL

    def to_dict(self) -> dict[str, object]:
        out = super().to_dict()
        out["option_type"] = str(self.option_type)
        return out


@dataclass(frozen=True)
class StrategyTable(_PricingTable):
    """Projected P&L per cell, net of the strategy's initial cost."""

    initial_cost: InitialCost | None = None
    strategy: Strategy | None = None

    def to_dict(self) -> dict[str, object]:
        out = super().to_dict()
        out["initial_cost"] = self.initial_cost.to_dict() if self.initial_cost else None
        out["legs"] = [leg.to_dict() for leg in self.strategy.legs] if self.strategy else []
        return out


@dataclass(frozen=True)
class CalculationResult:
    """Headline bands plus the table, stamped with the valuation instant."""

    table: SingleOptionTable | StrategyTable
    market_instant: MarketInstant
    call_price_range: PriceRange | None = None
    put_price_range: PriceRange | None = None

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "table": self.table.to_dict(),
            "calculation_time": self.market_instant.time.isoformat(),
            "is_market_open": self.market_instant.is_open,
        }
        if self.call_price_range is not None:
            out["call_price_range"] = str(self.call_price_range)
        if self.put_price_range is not None:
            out["put_price_range"] = str(self.put_price_range)
        return out
