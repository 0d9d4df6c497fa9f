"""Vectors of arbitrary length backed by pooled float buffers.

Each vector keeps its elements in a buffer taken from the pools in
:mod:`glmath.mempool`, whose capacity is the next power of two at or above
the vector's size. When pooling is disabled the buffer is sized exactly.
Operations that produce a vector return a new one and leave the operands
untouched.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator

from glmath.mempool import (
    FloatBuffer,
    _fill,
    grab_from_pool,
    pooling_enabled,
    return_to_pool,
)
from glmath.util import float_equal, float_equal_threshold
from glmath.vector import Vec2, Vec3, Vec4


def _allocate(n: int) -> tuple[FloatBuffer, bool]:
    """Return a zeroed buffer of size ``n`` and whether it belongs to a pool."""
    if n < 0:
        raise ValueError(f"vector size must not be negative, got {n}")
    if pooling_enabled():
        buffer = grab_from_pool(n)
        if buffer is None:
            return FloatBuffer(0, 0), False
        _fill(buffer, [0.0] * n)
        return buffer, True
    return FloatBuffer(n, n), False


class VecN:
    """A vector with any number of float elements."""

    __slots__ = ("_buffer", "_pooled")

    def __init__(self, n: int = 0) -> None:
        self._buffer, self._pooled = _allocate(n)

    @classmethod
    def from_data(cls, initial: Iterable[float] | None) -> VecN:
        """Create a vector holding a copy of ``initial``."""
        values = [] if initial is None else [float(v) for v in initial]
        vector = cls(len(values))
        _fill(vector._buffer, values)
        return vector

    def raw(self) -> list[float]:
        """Return a copy of the elements as a list."""
        return list(self._buffer)

    def __getitem__(self, i):
        return self._buffer[i]

    def __setitem__(self, i, value) -> None:
        self._buffer[i] = value

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[float]:
        return iter(self._buffer)

    def __repr__(self) -> str:
        return f"VecN({self.raw()!r})"

    def _release(self) -> None:
        if self._pooled and pooling_enabled():
            return_to_pool(self._buffer)
        self._pooled = False

    def resize(self, n: int) -> VecN:
        """Set the size to ``n``, reallocating when the capacity is too small.

        Element values after a reallocation are not related to the old ones.
        Returns the vector itself.
        """
        if n < 0:
            raise ValueError(f"vector size must not be negative, got {n}")
        if n <= self._buffer.capacity():
            self._buffer.resize(n)
            return self
        self._release()
        self._buffer, self._pooled = _allocate(n)
        return self

    def set_backing_slice(self, data: Iterable[float]) -> None:
        """Replace the contents with a copy of ``data``, sized exactly."""
        values = [float(v) for v in data]
        buffer = FloatBuffer(len(values), len(values))
        _fill(buffer, values)
        self._buffer = buffer
        self._pooled = False

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._buffer)

    def cap(self) -> int:
        """Return the capacity of the backing buffer."""
        return self._buffer.capacity()

    def zero(self, n: int) -> None:
        """Resize to ``n`` elements and set them all to zero."""
        self.resize(n)
        _fill(self._buffer, [0.0] * n)

    def _combine(self, values: Iterable[float], size: int) -> VecN:
        result = VecN(size)
        _fill(result._buffer, values)
        return result

    def add(self, other: VecN) -> VecN:
        """Return the element-wise sum over the shorter of the two lengths."""
        size = min(len(self), len(other))
        return self._combine((a + b for a, b in zip(self, other)), size)

    def sub(self, other: VecN) -> VecN:
        """Return the element-wise difference over the shorter of the two lengths."""
        size = min(len(self), len(other))
        return self._combine((a - b for a, b in zip(self, other)), size)

    def cross(self, other: VecN) -> VecN:
        """Return the cross product; both vectors must have three elements."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("cross product is only defined for 3-element vectors")
        a0, a1, a2 = self
        b0, b1, b2 = other
        return self._combine(
            (a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0), 3
        )

    def dot(self, other: VecN) -> float:
        """Return the dot product, or NaN when the lengths differ."""
        if len(self) != len(other):
            return math.nan
        return sum(a * b for a, b in zip(self, other))

    def len_sqr(self) -> float:
        """Return the sum of the squares of the elements."""
        if len(self) == 0:
            return 0.0
        return self.dot(self)

    def length(self) -> float:
        """Return the Euclidean length."""
        if len(self) == 0:
            return 0.0
        return math.sqrt(self.len_sqr())

    def mul(self, c: float) -> VecN:
        """Return the vector scaled by ``c``."""
        return self._combine((a * c for a in self), len(self))

    def normalize(self) -> VecN:
        """Return the vector scaled to unit length.

        A zero vector gives non-finite elements instead of an error.
        """
        magnitude = self.length()
        return self.mul(1.0 / magnitude if magnitude != 0 else math.inf)

    def approx_equal_func(
        self, other: VecN, comp: Callable[[float, float], bool]
    ) -> bool:
        """Compare element-wise with ``comp``; differing lengths are unequal."""
        if len(self) != len(other):
            return False
        return all(comp(a, b) for a, b in zip(self, other))

    def approx_equal(self, other: VecN) -> bool:
        """Compare element-wise with ``float_equal``."""
        return self.approx_equal_func(other, float_equal)

    def approx_equal_threshold(self, other: VecN, epsilon: float) -> bool:
        """Compare element-wise with ``float_equal_threshold`` at ``epsilon``."""
        return self.approx_equal_func(
            other, lambda a, b: float_equal_threshold(a, b, epsilon)
        )

    def vec2(self) -> Vec2:
        """Return the first two elements as a Vec2."""
        return Vec2(self[0], self[1])

    def vec3(self) -> Vec3:
        """Return the first three elements as a Vec3."""
        return Vec3(self[0], self[1], self[2])

    def vec4(self) -> Vec4:
        """Return the first four elements as a Vec4."""
        return Vec4(self[0], self[1], self[2], self[3])