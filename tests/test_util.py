import math

import pytest

from glmath import util
from glmath.util import (
    INF_NEG,
    INF_POS,
    MAX_VALUE,
    MIN_VALUE,
    NAN,
    absolute,
    clamp,
    clamp_func,
    float_equal,
    float_equal_func,
    float_equal_threshold,
    is_clamped,
    round_half_up,
)


def test_equal():
    a = 1.5
    b = 1.0 + 0.5
    assert float_equal(a, a)
    assert float_equal(a, b)
    assert float_equal(b, a)
    assert float_equal(0.0, 0.0)
    assert not float_equal(1.5, 1.51)
    assert not float_equal(1.5, 1.5000001)
    assert not float_equal(1.5, 0.0)


def test_equal_threshold():
    assert float_equal_threshold(1.0, 1.01, 1e-1)
    assert not float_equal_threshold(1.0, 1.01, 1e-3)


@pytest.mark.parametrize(
    "a, b, ep, expected",
    [
        (1.0, 1.01, 1e-1, True),
        (1.0, 1.01, 1e-3, False),
        # Regular large numbers
        (1000000.0, 1000001.0, 0.00001, True),
        (1000001.0, 1000000.0, 0.00001, True),
        (10000.0, 10001.0, 0.00001, False),
        (10001.0, 10000.0, 0.00001, False),
        # Negative large numbers
        (-1000000.0, -1000001.0, 0.00001, True),
        (-1000001.0, -1000000.0, 0.00001, True),
        (-10000.0, -10001.0, 0.00001, False),
        (-10001.0, -10000.0, 0.00001, False),
        # Numbers around 1
        (1.0000001, 1.0000002, 0.00001, True),
        (1.0000002, 1.0000001, 0.00001, True),
        (1.0002, 1.0001, 0.00001, False),
        (1.0001, 1.0002, 0.00001, False),
        # Numbers around -1
        (-1.000001, -1.000002, 0.00001, True),
        (-1.000002, -1.000001, 0.00001, True),
        (-1.0001, -1.0002, 0.00001, False),
        (-1.0002, -1.0001, 0.00001, False),
        # Numbers between 1 and 0
        (0.000000001000001, 0.000000001000002, 0.00001, True),
        (0.000000001000002, 0.000000001000001, 0.00001, True),
        (0.000000000001002, 0.000000000001001, 0.00001, False),
        (0.000000000001001, 0.000000000001002, 0.00001, False),
        # Numbers between -1 and 0
        (-0.000000001000001, -0.000000001000002, 0.00001, True),
        (-0.000000001000002, -0.000000001000001, 0.00001, True),
        (-0.000000000001002, -0.000000000001001, 0.00001, False),
        (-0.000000000001001, -0.000000000001002, 0.00001, False),
        # Comparisons involving zero
        (0.0, 0.0, 0.00001, True),
        (0.0, -0.0, 0.00001, True),
        (-0.0, -0.0, 0.00001, True),
        (0.00000001, 0.0, 0.00001, False),
        (0.0, 0.00000001, 0.00001, False),
        (-0.00000001, 0.0, 0.00001, False),
        (0.0, -0.00000001, 0.00001, False),
        # Comparisons involving infinities
        (INF_POS, INF_POS, 0.00001, True),
        (INF_NEG, INF_NEG, 0.00001, True),
        (INF_NEG, INF_POS, 0.00001, False),
        (INF_POS, MAX_VALUE, 0.00001, False),
        (INF_NEG, -MAX_VALUE, 0.00001, False),
        # Comparisons involving NaN values
        (NAN, NAN, 0.00001, False),
        (0.0, NAN, 0.00001, False),
        (NAN, 0.0, 0.00001, False),
        (-0.0, NAN, 0.00001, False),
        (NAN, -0.0, 0.00001, False),
        (NAN, INF_POS, 0.00001, False),
        (INF_POS, NAN, 0.00001, False),
        (NAN, INF_NEG, 0.00001, False),
        (INF_NEG, NAN, 0.00001, False),
        (NAN, MAX_VALUE, 0.00001, False),
        (MAX_VALUE, NAN, 0.00001, False),
        (NAN, -MAX_VALUE, 0.00001, False),
        (-MAX_VALUE, NAN, 0.00001, False),
        (NAN, MIN_VALUE, 0.00001, False),
        (MIN_VALUE, NAN, 0.00001, False),
        (NAN, -MIN_VALUE, 0.00001, False),
        (-MIN_VALUE, NAN, 0.00001, False),
        # Comparisons of numbers on opposite sides of 0
        (1.000000001, -1.0, 0.00001, False),
        (-1.0, 1.000000001, 0.00001, False),
        (-1.000000001, 1.0, 0.00001, False),
        (1.0, -1.000000001, 0.00001, False),
        (10 * MIN_VALUE, 10 * -MIN_VALUE, 0.00001, True),
        (10000 * MIN_VALUE, 10000 * -MIN_VALUE, 0.00001, True),
        # Comparisons of numbers very close to zero
        (MIN_VALUE, -MIN_VALUE, 0.00001, True),
        (-MIN_VALUE, MIN_VALUE, 0.00001, True),
        (MIN_VALUE, 0, 0.00001, True),
        (0, MIN_VALUE, 0.00001, True),
        (-MIN_VALUE, 0, 0.00001, True),
        (0, -MIN_VALUE, 0.00001, True),
        (0.000000001, -MIN_VALUE, 0.00001, False),
        (0.000000001, MIN_VALUE, 0.00001, False),
        (MIN_VALUE, 0.000000001, 0.00001, False),
        (-MIN_VALUE, 0.000000001, 0.00001, False),
    ],
)
def test_equal_threshold_table(a, b, ep, expected):
    assert float_equal_threshold(a, b, ep) is expected


def test_float_equal_uses_module_epsilon(monkeypatch):
    assert not float_equal(1.0, 1.01)
    monkeypatch.setattr(util, "EPSILON", 1e-1)
    assert float_equal(1.0, 1.01)


def test_float_equal_func():
    loose = float_equal_func(1e-1)
    tight = float_equal_func(1e-3)
    assert loose(1.0, 1.01)
    assert not tight(1.0, 1.01)


def test_absolute():
    assert absolute(-2.5) == 2.5
    assert absolute(3.0) == 3.0
    zero = absolute(-0.0)
    assert zero == 0.0
    assert math.copysign(1.0, zero) == 1.0
    assert math.isnan(absolute(NAN))


def test_clamp():
    assert float_equal(clamp(-1.0, 0.0, 1.0), 0.0)
    assert float_equal(clamp(0.0, 0.0, 1.0), 0.0)
    assert float_equal(clamp(0.14, 0.0, 1.0), 0.14)
    assert float_equal(clamp(1.1, 0.0, 1.0), 1.0)


def test_clamp_func():
    unit = clamp_func(0.0, 1.0)
    assert unit(-3.0) == 0.0
    assert unit(0.25) == 0.25
    assert unit(7.0) == 1.0


def test_is_clamped():
    assert not is_clamped(-1.0, 0.0, 1.0)
    assert is_clamped(0.15, 0.0, 1.0)
    assert not is_clamped(1.5, 0.0, 1.0)
    assert is_clamped(0.0, 0.0, 1.0)
    assert is_clamped(1.0, 0.0, 1.0)


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (0.5, 0, 1),
        (0.123, 2, 0.12),
        (9.99999999, 6, 10),
        (-9.99999999, 6, -10),
        (-0.000099, 4, -0.0001),
    ],
)
def test_round(value, precision, expected):
    assert round_half_up(value, precision) == expected