"""Size-classed pools of reusable float buffers.

Pool ``i`` hands out buffers whose capacity is ``2 ** i``. A request for a
buffer of some size is served from the smallest pool whose capacity fits it.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator

_pools: list[FloatPool] = []
_pools_lock = threading.Lock()
_pooling = threading.Event()
_pooling.set()


class FloatBuffer:
    """A fixed-capacity float store with an adjustable visible size."""

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int, size: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        if not 0 <= size <= capacity:
            raise ValueError(f"size {size} does not fit capacity {capacity}")
        self._data = [0.0] * capacity
        self._size = size

    def __len__(self) -> int:
        return self._size

    def _check_index(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("buffer index out of range")
        return index

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._data[: self._size][index]
        return self._data[self._check_index(index)]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            view = self._data[: self._size]
            view[index] = [float(v) for v in value]
            if len(view) != self._size:
                raise ValueError("slice assignment may not change the buffer size")
            self._data[: self._size] = view
            return
        self._data[self._check_index(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[: self._size])

    def __repr__(self) -> str:
        return f"FloatBuffer({list(self)!r}, capacity={len(self._data)})"

    def capacity(self) -> int:
        """Return the number of elements the buffer can hold."""
        return len(self._data)

    def resize(self, size: int) -> None:
        """Change the visible size; previous contents beyond it stay in place."""
        if not 0 <= size <= len(self._data):
            raise ValueError(f"size {size} does not fit capacity {len(self._data)}")
        self._size = size


class FloatPool:
    """A thread-safe free list of buffers that all share one capacity."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._free: list[FloatBuffer] = []
        self._lock = threading.Lock()

    @property
    def buffer_capacity(self) -> int:
        return self._capacity

    def get(self) -> FloatBuffer:
        """Take a buffer from the pool, creating an empty one if none is free."""
        with self._lock:
            if self._free:
                buffer = self._free.pop()
                buffer.resize(0)
                return buffer
        return FloatBuffer(self._capacity, 0)

    def put(self, buffer: FloatBuffer) -> None:
        """Hand a buffer back for reuse."""
        if buffer.capacity() != self._capacity:
            raise ValueError(
                f"buffer of capacity {buffer.capacity()} does not belong "
                f"to a pool of capacity {self._capacity}"
            )
        with self._lock:
            self._free.append(buffer)


def disable_memory_pooling() -> None:
    """Turn pooling off for every consumer that consults pooling_enabled()."""
    _pooling.clear()


def pooling_enabled() -> bool:
    """Tell whether buffers should be drawn from and returned to the pools."""
    return _pooling.is_set()


def reset_pools() -> None:
    """Drop every pool and the buffers they hold."""
    with _pools_lock:
        _pools.clear()


def pool_count() -> int:
    """Return how many size-class pools exist."""
    with _pools_lock:
        return len(_pools)


def bin_log(val: int) -> tuple[int, bool]:
    """Return the integer base-2 log of ``val`` and whether it is exact.

    Non-positive input yields ``(-1, False)``.
    """
    if val <= 0:
        return -1, False
    log = val.bit_length() - 1
    return log, val == 1 << log


def get_pool(i: int) -> FloatPool:
    """Return pool ``i``, creating all pools up to it when missing."""
    with _pools_lock:
        while len(_pools) <= i:
            _pools.append(FloatPool(1 << len(_pools)))
        return _pools[i]


def grab_from_pool(size: int) -> FloatBuffer | None:
    """Take a buffer of ``size`` elements whose capacity is the next power of two.

    Returns None when ``size`` is zero or negative.
    """
    index, exact = bin_log(size)
    if index == -1:
        return None
    if not exact:
        index += 1
    buffer = get_pool(index).get()
    buffer.resize(size)
    return buffer


def return_to_pool(buffer: FloatBuffer) -> None:
    """Give a buffer back to the pool matching its capacity.

    Raises ValueError if the capacity is not a power of two.
    """
    capacity = buffer.capacity()
    if capacity == 0:
        return
    index, exact = bin_log(capacity)
    if not exact:
        raise ValueError(f"cannot pool a buffer of non power-of-two capacity {capacity}")
    get_pool(index).put(buffer)


def _fill(buffer: FloatBuffer, values: Iterable[float]) -> None:
    for position, value in enumerate(values):
        buffer[position] = value