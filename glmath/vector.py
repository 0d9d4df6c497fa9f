"""Fixed-size float vectors in two, three and four dimensions.

Vectors are immutable tuples, so they index, unpack and compare like
tuples. Arithmetic is element-wise: ``+`` and ``-`` combine two vectors of
the same size, and ``*`` scales by a number.

Outer products return a flat tuple of the matrix elements in column-major
order. The left vector gives the rows and the right vector gives the
columns.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Sequence
from typing import NamedTuple

from glmath.util import float_equal, float_equal_threshold


def _check_size(vector: Sequence[float], other: Sequence[float]) -> None:
    if len(other) != len(vector):
        raise ValueError(f"vector sizes differ: {len(vector)} and {len(other)}")


def _pairwise(
    vector: Sequence[float], other: Sequence[float], op: Callable[[float, float], float]
) -> list[float]:
    _check_size(vector, other)
    return [op(a, b) for a, b in zip(vector, other)]


def _scaled(vector: Sequence[float], c: float) -> list[float]:
    return [a * c for a in vector]


def _dot(vector: Sequence[float], other: Sequence[float]) -> float:
    _check_size(vector, other)
    return sum(a * b for a, b in zip(vector, other))


def _len_sqr(vector: Sequence[float]) -> float:
    return sum(a * a for a in vector)


def _inverse(magnitude: float) -> float:
    # A zero length gives an infinite factor, so the components become NaN.
    return 1.0 / magnitude if magnitude != 0 else math.inf


def _all_match(
    vector: Sequence[float], other: Sequence[float], eq: Callable[[float, float], bool]
) -> bool:
    _check_size(vector, other)
    return all(eq(a, b) for a, b in zip(vector, other))


def _outer(vector: Sequence[float], other: Sequence[float], size: int) -> tuple[float, ...]:
    if len(other) != size:
        raise ValueError(f"expected a vector of size {size}, got {len(other)}")
    return tuple(a * b for b in other for a in vector)


class _VectorOperators:
    """Python operators that forward to the named vector methods."""

    __slots__ = ()

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, c):
        return self.mul(c)

    def __rmul__(self, c):
        return self.mul(c)

    def __neg__(self):
        return self.mul(-1.0)


class _Vec2Fields(NamedTuple):
    x: float
    y: float


class _Vec3Fields(NamedTuple):
    x: float
    y: float
    z: float


class _Vec4Fields(NamedTuple):
    x: float
    y: float
    z: float
    w: float


class Vec2(_VectorOperators, _Vec2Fields):
    """A two-component vector."""

    __slots__ = ()

    def vec3(self, z: float) -> Vec3:
        """Extend to a 3-vector with the given ``z``."""
        return Vec3(self[0], self[1], z)

    def vec4(self, z: float, w: float) -> Vec4:
        """Extend to a 4-vector with the given ``z`` and ``w``."""
        return Vec4(self[0], self[1], z, w)

    def elem(self) -> tuple[float, float]:
        """Return the components as a plain tuple."""
        return (self[0], self[1])

    def add(self, other: Sequence[float]) -> Vec2:
        """Return the element-wise sum with ``other``."""
        return Vec2(*_pairwise(self, other, operator.add))

    def sub(self, other: Sequence[float]) -> Vec2:
        """Return the element-wise difference ``self - other``."""
        return Vec2(*_pairwise(self, other, operator.sub))

    def mul(self, c: float) -> Vec2:
        """Return the vector scaled by ``c``."""
        return Vec2(*_scaled(self, c))

    def dot(self, other: Sequence[float]) -> float:
        """Return the dot product with ``other``."""
        return _dot(self, other)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self[0], self[1])

    def len_sqr(self) -> float:
        """Return the squared length."""
        return _len_sqr(self)

    def normalize(self) -> Vec2:
        """Return the vector scaled to unit length; a zero vector gives NaN."""
        return Vec2(*_scaled(self, _inverse(self.length())))

    def approx_equal(self, other: Sequence[float]) -> bool:
        """Compare element-wise with ``float_equal``."""
        return _all_match(self, other, float_equal)

    def approx_equal_threshold(self, other: Sequence[float], threshold: float) -> bool:
        """Compare element-wise with ``float_equal_threshold`` at ``threshold``."""
        return _all_match(self, other, lambda a, b: float_equal_threshold(a, b, threshold))

    def approx_func_equal(
        self, other: Sequence[float], eq: Callable[[float, float], bool]
    ) -> bool:
        """Compare element-wise with the comparison function ``eq``."""
        return _all_match(self, other, eq)

    def outer_prod2(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 2x2 outer product, column-major."""
        return _outer(self, other, 2)

    def outer_prod3(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 2x3 outer product, column-major."""
        return _outer(self, other, 3)

    def outer_prod4(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 2x4 outer product, column-major."""
        return _outer(self, other, 4)


class Vec3(_VectorOperators, _Vec3Fields):
    """A three-component vector."""

    __slots__ = ()

    def vec2(self) -> Vec2:
        """Drop the ``z`` component."""
        return Vec2(self[0], self[1])

    def vec4(self, w: float) -> Vec4:
        """Extend to a 4-vector with the given ``w``."""
        return Vec4(self[0], self[1], self[2], w)

    def elem(self) -> tuple[float, float, float]:
        """Return the components as a plain tuple."""
        return (self[0], self[1], self[2])

    def cross(self, other: Sequence[float]) -> Vec3:
        """Return the cross product ``self x other``."""
        _check_size(self, other)
        a0, a1, a2 = self
        b0, b1, b2 = other
        return Vec3(a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0)

    def add(self, other: Sequence[float]) -> Vec3:
        """Return the element-wise sum with ``other``."""
        return Vec3(*_pairwise(self, other, operator.add))

    def sub(self, other: Sequence[float]) -> Vec3:
        """Return the element-wise difference ``self - other``."""
        return Vec3(*_pairwise(self, other, operator.sub))

    def mul(self, c: float) -> Vec3:
        """Return the vector scaled by ``c``."""
        return Vec3(*_scaled(self, c))

    def dot(self, other: Sequence[float]) -> float:
        """Return the dot product with ``other``."""
        return _dot(self, other)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(_len_sqr(self))

    def len_sqr(self) -> float:
        """Return the squared length."""
        return _len_sqr(self)

    def normalize(self) -> Vec3:
        """Return the vector scaled to unit length; a zero vector gives NaN."""
        return Vec3(*_scaled(self, _inverse(self.length())))

    def approx_equal(self, other: Sequence[float]) -> bool:
        """Compare element-wise with ``float_equal``."""
        return _all_match(self, other, float_equal)

    def approx_equal_threshold(self, other: Sequence[float], threshold: float) -> bool:
        """Compare element-wise with ``float_equal_threshold`` at ``threshold``."""
        return _all_match(self, other, lambda a, b: float_equal_threshold(a, b, threshold))

    def approx_func_equal(
        self, other: Sequence[float], eq: Callable[[float, float], bool]
    ) -> bool:
        """Compare element-wise with the comparison function ``eq``."""
        return _all_match(self, other, eq)

    def outer_prod2(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 3x2 outer product, column-major."""
        return _outer(self, other, 2)

    def outer_prod3(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 3x3 outer product, column-major."""
        return _outer(self, other, 3)

    def outer_prod4(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 3x4 outer product, column-major."""
        return _outer(self, other, 4)


class Vec4(_VectorOperators, _Vec4Fields):
    """A four-component vector."""

    __slots__ = ()

    def vec2(self) -> Vec2:
        """Drop the ``z`` and ``w`` components."""
        return Vec2(self[0], self[1])

    def vec3(self) -> Vec3:
        """Drop the ``w`` component."""
        return Vec3(self[0], self[1], self[2])

    def elem(self) -> tuple[float, float, float, float]:
        """Return the components as a plain tuple."""
        return (self[0], self[1], self[2], self[3])

    def add(self, other: Sequence[float]) -> Vec4:
        """Return the element-wise sum with ``other``."""
        return Vec4(*_pairwise(self, other, operator.add))

    def sub(self, other: Sequence[float]) -> Vec4:
        """Return the element-wise difference ``self - other``."""
        return Vec4(*_pairwise(self, other, operator.sub))

    def mul(self, c: float) -> Vec4:
        """Return the vector scaled by ``c``."""
        return Vec4(*_scaled(self, c))

    def dot(self, other: Sequence[float]) -> float:
        """Return the dot product with ``other``."""
        return _dot(self, other)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(_len_sqr(self))

    def len_sqr(self) -> float:
        """Return the squared length."""
        return _len_sqr(self)

    def normalize(self) -> Vec4:
        """Return the vector scaled to unit length; a zero vector gives NaN."""
        return Vec4(*_scaled(self, _inverse(self.length())))

    def approx_equal(self, other: Sequence[float]) -> bool:
        """Compare element-wise with ``float_equal``."""
        return _all_match(self, other, float_equal)

    def approx_equal_threshold(self, other: Sequence[float], threshold: float) -> bool:
        """Compare element-wise with ``float_equal_threshold`` at ``threshold``."""
        return _all_match(self, other, lambda a, b: float_equal_threshold(a, b, threshold))

    def approx_func_equal(
        self, other: Sequence[float], eq: Callable[[float, float], bool]
    ) -> bool:
        """Compare element-wise with the comparison function ``eq``."""
        return _all_match(self, other, eq)

    def outer_prod2(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 4x2 outer product, column-major."""
        return _outer(self, other, 2)

    def outer_prod3(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 4x3 outer product, column-major."""
        return _outer(self, other, 3)

    def outer_prod4(self, other: Sequence[float]) -> tuple[float, ...]:
        """Return the 4x4 outer product, column-major."""
        return _outer(self, other, 4)