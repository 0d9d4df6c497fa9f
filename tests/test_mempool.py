import pytest

from glmath import mempool
from glmath.mempool import (
    FloatBuffer,
    FloatPool,
    bin_log,
    disable_memory_pooling,
    get_pool,
    grab_from_pool,
    pool_count,
    pooling_enabled,
    reset_pools,
    return_to_pool,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (-256, (-1, False)),
        (0, (-1, False)),
        (1, (0, True)),
        (2, (1, True)),
        (3, (1, False)),
        (32, (5, True)),
        (37, (5, False)),
    ],
)
def test_bin_log(value, expected):
    assert bin_log(value) == expected


def test_get_pool():
    reset_pools()
    pool = get_pool(3)
    assert pool_count() == 4
    buffer = pool.get()
    assert buffer.capacity() == 1 << 3
    assert len(buffer) == 0


def test_get_pool_returns_same_pool():
    reset_pools()
    assert get_pool(2) is get_pool(2)
    assert pool_count() == 3


def test_grab_from_pool():
    reset_pools()
    buffer = grab_from_pool(17)
    assert len(buffer) == 17
    assert buffer.capacity() == 32


def test_grab_exact_power():
    reset_pools()
    buffer = grab_from_pool(16)
    assert len(buffer) == 16
    assert buffer.capacity() == 16


@pytest.mark.parametrize("size", [0, -4])
def test_grab_non_positive_gives_none(size):
    assert grab_from_pool(size) is None


def test_return_and_reuse():
    reset_pools()
    buffer = grab_from_pool(5)
    return_to_pool(buffer)
    again = grab_from_pool(7)
    assert again is buffer
    assert len(again) == 7


def test_return_non_power_capacity_raises():
    with pytest.raises(ValueError):
        return_to_pool(FloatBuffer(6, 3))


def test_return_zero_capacity_is_ignored():
    reset_pools()
    return_to_pool(FloatBuffer(0, 0))
    assert pool_count() == 0


def test_pool_rejects_foreign_buffer():
    pool = FloatPool(4)
    with pytest.raises(ValueError):
        pool.put(FloatBuffer(8))


def test_buffer_indexing_and_iteration():
    buffer = FloatBuffer(4, 3)
    buffer[0] = 1
    buffer[2] = 3.5
    assert list(buffer) == [1.0, 0.0, 3.5]
    assert buffer[-1] == 3.5
    assert buffer[0:2] == [1.0, 0.0]
    with pytest.raises(IndexError):
        buffer[3]


def test_buffer_slice_assignment():
    buffer = FloatBuffer(4, 3)
    buffer[:] = [1, 2, 3]
    assert list(buffer) == [1.0, 2.0, 3.0]
    with pytest.raises(ValueError):
        buffer[:] = [1, 2]


def test_buffer_resize_keeps_contents():
    buffer = FloatBuffer(4, 4)
    buffer[3] = 9.0
    buffer.resize(2)
    assert len(buffer) == 2
    buffer.resize(4)
    assert buffer[3] == 9.0
    with pytest.raises(ValueError):
        buffer.resize(5)


def test_buffer_bad_construction():
    with pytest.raises(ValueError):
        FloatBuffer(2, 3)
    with pytest.raises(ValueError):
        FloatBuffer(-1, 0)