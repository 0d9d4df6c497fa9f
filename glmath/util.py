"""Scalar helpers: tolerant float comparison, clamping and rounding."""

from __future__ import annotations

import math
from collections.abc import Callable

# Default tolerance used by float_equal and friends. It is read at call time,
# so reassigning it changes the behaviour of every default comparison.
EPSILON: float = 1e-10

MIN_NORMAL: float = 1.1754943508222875e-38  # smallest normal single-precision value
MIN_VALUE: float = 1.401298464324817e-45  # smallest non-zero single-precision value
MAX_VALUE: float = 3.4028234663852886e38  # largest finite single-precision value

INF_POS: float = math.inf
INF_NEG: float = -math.inf
NAN: float = math.nan


def absolute(a: float) -> float:
    """Return the absolute value of ``a``, mapping negative zero to zero."""
    if a < 0:
        return -a
    if a == 0:
        return 0.0
    return a


def float_equal_threshold(a: float, b: float, epsilon: float) -> bool:
    """Compare two floats with a relative tolerance of ``epsilon``.

    Values that are zero or extremely close to it are compared with an
    absolute tolerance of ``epsilon ** 2`` instead.
    """
    if a == b:
        return True

    diff = absolute(a - b)
    if a * b == 0 or diff < MIN_NORMAL:
        return diff < epsilon * epsilon

    return diff / (absolute(a) + absolute(b)) < epsilon


def float_equal(a: float, b: float) -> bool:
    """Compare two floats using the module-wide ``EPSILON``."""
    return float_equal_threshold(a, b, EPSILON)


def float_equal_func(epsilon: float) -> Callable[[float, float], bool]:
    """Return a comparison function bound to the given tolerance."""

    def compare(a: float, b: float) -> bool:
        return float_equal_threshold(a, b, epsilon)

    return compare


def clamp(a: float, low: float, high: float) -> float:
    """Limit ``a`` to the closed range ``[low, high]``."""
    if a < low:
        return low
    if a > high:
        return high
    return a


def clamp_func(low: float, high: float) -> Callable[[float], float]:
    """Return a function that clamps its argument to ``[low, high]``."""

    def clamped(a: float) -> float:
        return clamp(a, low, high)

    return clamped


def is_clamped(a: float, low: float, high: float) -> bool:
    """Tell whether ``a`` already lies within ``[low, high]`` (strict comparison)."""
    return low <= a <= high


def round_half_up(v: float, precision: int) -> float:
    """Round ``v`` to ``precision`` decimal places, halves away from zero."""
    scale = math.pow(10, precision)
    t = v * scale
    if t > 0:
        return math.floor(t + 0.5) / scale
    return math.ceil(t - 0.5) / scale