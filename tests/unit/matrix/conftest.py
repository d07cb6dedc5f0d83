from datetime import datetime, timezone

import pytest

from option_matrix.options import (
    BlackScholesPricer,
    MarketState,
    OptionSpec,
    OptionType,
    PriceRangeEstimator,
)


class IntrinsicPricer:
    def price(self, spec: OptionSpec, state: MarketState) -> float:
        if spec.option_type == OptionType.CALL:
            return max(state.spot - spec.strike, 0.0)
        return max(spec.strike - state.spot, 0.0)


@pytest.fixture
def friday_open() -> datetime:
    """Friday 2025-01-10 10:00 ET."""
    return datetime(2025, 1, 10, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def next_friday_close() -> datetime:
    """Friday 2025-01-17 16:00 ET."""
    return datetime(2025, 1, 17, 21, 0, tzinfo=timezone.utc)


@pytest.fixture
def fast_estimator() -> PriceRangeEstimator:
    return PriceRangeEstimator(model=BlackScholesPricer())


@pytest.fixture
def intrinsic_estimator() -> PriceRangeEstimator:
    return PriceRangeEstimator(model=IntrinsicPricer(), rates=(0.0,))
