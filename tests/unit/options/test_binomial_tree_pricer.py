import pytest

from option_matrix.options import (
    BinomialTreePricer,
    MarketState,
    OptionSpec,
    OptionType,
    binomial_tree_price,
    bs_price,
)


@pytest.mark.parametrize(
    "option_type",
    [OptionType.CALL, OptionType.PUT],
)
def test_binomial_european_converges_to_black_scholes(option_type: OptionType):
    spec = OptionSpec(strike=100.0, time_to_expiry=45 / 365.0, option_type=option_type)
    state = MarketState(spot=102.0, volatility=0.25, rate=0.03)

    tree = BinomialTreePricer(steps=800, american=False).price(spec, state)
    bs = bs_price(
        S=state.spot,
        K=spec.strike,
        T=spec.time_to_expiry,
        sigma=state.volatility,
        r=state.rate,
        option_type=spec.option_type,
        exact_cdf=True,
    )
    assert tree == pytest.approx(bs, abs=1e-2)


def test_american_put_is_not_below_european_put():
    spec = OptionSpec(
        strike=100.0,
        time_to_expiry=90 / 365.0,
        option_type=OptionType.PUT,
    )
    state = MarketState(spot=98.0, volatility=0.22, rate=0.10)

    european = BinomialTreePricer(steps=600, american=False).price(spec, state)
    american = BinomialTreePricer(steps=600, american=True).price(spec, state)

    assert american >= european


def test_deep_itm_american_put_is_worth_at_least_intrinsic():
    price = binomial_tree_price(
        S=60.0, K=100.0, T=0.5, sigma=0.2, r=0.30, option_type="put"
    )
    assert price >= 40.0


def test_default_pricer_uses_one_hundred_american_steps():
    pricer = BinomialTreePricer()
    assert pricer.steps == 100
    assert pricer.american is True

    spec = OptionSpec(strike=150.0, time_to_expiry=0.1, option_type="call")
    state = MarketState(spot=150.0, volatility=0.25, rate=0.0)
    assert pricer.price(spec, state) == binomial_tree_price(
        S=150.0, K=150.0, T=0.1, sigma=0.25, r=0.0, option_type="call", steps=100
    )


def test_degenerate_inputs_return_intrinsic():
    assert binomial_tree_price(S=110.0, K=100.0, T=0.0, sigma=0.3) == 10.0
    assert binomial_tree_price(S=90.0, K=100.0, T=0.5, sigma=0.0, option_type="P") == 10.0


def test_invalid_steps_raise():
    with pytest.raises(ValueError, match="steps must be >= 1"):
        BinomialTreePricer(steps=0)
    with pytest.raises(ValueError, match="steps must be >= 1"):
        binomial_tree_price(S=100.0, K=100.0, T=0.1, sigma=0.2, steps=0)
