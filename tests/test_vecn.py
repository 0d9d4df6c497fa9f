import math

import pytest

from glmath.mempool import pooling_enabled
from glmath.vecn import VecN
from glmath.vector import Vec2, Vec3, Vec4


V1 = Vec3(1, 3, 5)
V2 = Vec3(2, 4, 6)


def test_cross():
    correct = VecN.from_data(V1.cross(V2))
    result = VecN.from_data(V1).cross(VecN.from_data(V2))
    assert correct.approx_equal_threshold(result, 1e-4)
    assert result.raw() == [-2.0, 4.0, -2.0]


def test_cross_requires_three_elements():
    with pytest.raises(ValueError):
        VecN.from_data([1, 2]).cross(VecN.from_data([1, 2, 3]))


def test_dot():
    result = VecN.from_data(V1).dot(VecN.from_data(V2))
    assert result == pytest.approx(V1.dot(V2))
    assert result == pytest.approx(44.0)


def test_dot_of_different_sizes_is_nan():
    result = VecN.from_data([1, 2]).dot(VecN.from_data([1, 2, 3]))
    assert str(result) == "nan"


def test_mul():
    correct = VecN.from_data(V1.mul(3))
    result = VecN.from_data(V1).mul(3)
    assert correct.approx_equal_threshold(result, 1e-4)


def test_normalize():
    correct = VecN.from_data(V1.normalize())
    result = VecN.from_data(V1).normalize()
    assert correct.approx_equal_threshold(result, 1e-4)
    assert result.length() == pytest.approx(1.0)


def test_add():
    correct = VecN.from_data(V1.add(V2))
    result = VecN.from_data(V1).add(VecN.from_data(V2))
    assert correct.approx_equal_threshold(result, 1e-4)


def test_sub():
    correct = VecN.from_data(V1.sub(V2))
    result = VecN.from_data(V1).sub(VecN.from_data(V2))
    assert correct.approx_equal_threshold(result, 1e-4)


def test_add_uses_shorter_length():
    result = VecN.from_data([1, 2, 3, 4]).add(VecN.from_data([10, 20]))
    assert result.raw() == [11.0, 22.0]


@pytest.mark.parametrize(
    "data, expected",
    [
        ([], 0.0),
        ([3, -5, 9], 115.0),
        ([10, 11, 3, -7], 279.0),
    ],
)
def test_len_sqr(data, expected):
    assert VecN.from_data(data).len_sqr() == expected


def test_len_sqr_of_new_empty_vector():
    assert VecN(0).len_sqr() == 0.0
    assert VecN(0).length() == 0.0


def test_operands_are_unchanged():
    a = VecN.from_data([1, 2, 3])
    b = VecN.from_data([4, 5, 6])
    a.add(b)
    a.mul(2)
    assert a.raw() == [1.0, 2.0, 3.0]
    assert b.raw() == [4.0, 5.0, 6.0]


def test_new_vector_is_zeroed_and_sized():
    v = VecN(17)
    assert len(v) == 17
    assert v.size() == 17
    assert v.raw() == [0.0] * 17
    expected_cap = 32 if pooling_enabled() else 17
    assert v.cap() == expected_cap


def test_item_access():
    v = VecN(3)
    v[1] = 2.5
    assert v[1] == 2.5
    assert list(v) == [0.0, 2.5, 0.0]
    with pytest.raises(IndexError):
        v[3]


def test_resize_within_capacity_keeps_capacity():
    v = VecN.from_data([1, 2, 3, 4])
    cap = v.cap()
    assert v.resize(2) is v
    assert v.size() == 2
    assert v.cap() == cap
    assert v.raw() == [1.0, 2.0]


def test_resize_growing_reallocates():
    v = VecN.from_data([1, 2])
    v.resize(10)
    assert v.size() == 10
    assert v.cap() >= 10


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        VecN(2).resize(-1)


def test_zero():
    v = VecN.from_data([1, 2, 3])
    v.zero(5)
    assert v.raw() == [0.0] * 5


def test_set_backing_slice():
    v = VecN(2)
    v.set_backing_slice([7, 8, 9])
    assert v.raw() == [7.0, 8.0, 9.0]
    assert v.cap() == 3
    v.resize(6)
    assert v.size() == 6


def test_approx_equal_different_sizes():
    assert not VecN.from_data([1, 2]).approx_equal(VecN.from_data([1, 2, 3]))
    assert VecN.from_data([1, 2]).approx_equal(VecN.from_data([1.0, 2.0]))


def test_approx_equal_func():
    a = VecN.from_data([1.0, 2.0])
    b = VecN.from_data([1.05, 2.05])
    assert a.approx_equal_func(b, lambda x, y: abs(x - y) < 0.1)
    assert not a.approx_equal_func(b, lambda x, y: abs(x - y) < 0.01)


def test_conversions_to_fixed_vectors():
    v = VecN.from_data([1, 2, 3, 4, 5])
    assert v.vec2() == Vec2(1, 2)
    assert v.vec3() == Vec3(1, 2, 3)
    assert v.vec4() == Vec4(1, 2, 3, 4)


def test_conversion_too_short_raises():
    with pytest.raises(IndexError):
        VecN.from_data([1, 2]).vec3()


def test_from_data_none_is_empty():
    assert VecN.from_data(None).size() == 0


def test_negative_size_raises():
    with pytest.raises(ValueError):
        VecN(-1)