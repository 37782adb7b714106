import math

import pytest

from libob.maths import (
    NAN,
    NEG_INF,
    POS_INF,
    double_price_to_int,
    int_price_to_double,
    is_nan,
    round_price_to_tick,
)


@pytest.mark.parametrize("price", [10.004, 10.006, 99.999, 0.013, 123.4567])
def test_round_price_to_tick_stays_within_half_tick(price):
    rounded = round_price_to_tick(price)
    assert abs(rounded - price) <= 0.005 + 1e-12
    assert round_price_to_tick(rounded) == pytest.approx(rounded)


@pytest.mark.parametrize("tick", [0.01, 0.05, 0.25, 1.0])
def test_round_price_to_tick_gives_tick_multiples(tick):
    rounded = round_price_to_tick(12.3456, tick)
    ratio = rounded / tick
    assert ratio == pytest.approx(round(ratio))


def test_round_price_halves_go_away_from_zero():
    assert round_price_to_tick(2.5, 1.0) == 3.0
    assert round_price_to_tick(-2.5, 1.0) == -round_price_to_tick(2.5, 1.0)


def test_double_price_to_int_default_multiplier():
    assert double_price_to_int(1.2345) == 12345


@pytest.mark.parametrize("price", [0.0, 1.0, 99.99, 150.1234, 0.0001])
def test_price_int_round_trip(price):
    assert int_price_to_double(double_price_to_int(price)) == pytest.approx(price)


def test_custom_multiplier_round_trip():
    value = double_price_to_int(3.14, 100.0)
    assert value == 314
    assert int_price_to_double(value, 100.0) == pytest.approx(3.14)


def test_double_price_to_int_rejects_nan():
    with pytest.raises(ValueError):
        double_price_to_int(NAN)


def test_is_nan_and_constants():
    assert is_nan(NAN)
    assert not is_nan(0.0)
    assert not is_nan(POS_INF)
    assert math.isinf(POS_INF) and POS_INF > 0
    assert NEG_INF == -POS_INF