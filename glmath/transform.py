"""Construction of rotation, translation, scale and shear matrices.

Matrices are flat tuples of floats in column-major order: a 4x4 matrix has
the element at row ``r`` and column ``c`` at index ``c * 4 + r``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from glmath.util import float_equal
from glmath.vector import Vec3, Vec4

Matrix = tuple[float, ...]


def _mat_mul(a: Sequence[float], b: Sequence[float], n: int) -> Matrix:
    """Multiply two square column-major matrices of order ``n``."""
    return tuple(
        sum(a[k * n + r] * b[c * n + k] for k in range(n))
        for c in range(n)
        for r in range(n)
    )


def _mat4_mul(a: Sequence[float], b: Sequence[float]) -> Matrix:
    return _mat_mul(a, b, 4)


def _mat_mul_vec(m: Sequence[float], v: Sequence[float]) -> tuple[float, ...]:
    n = len(v)
    return tuple(sum(m[c * n + r] * v[c] for c in range(n)) for r in range(n))


def _mat4_mul4x1(m: Sequence[float], v: Sequence[float]) -> Vec4:
    return Vec4(*_mat_mul_vec(m, v))


def _transpose(m: Sequence[float], n: int) -> Matrix:
    return tuple(m[r * n + c] for c in range(n) for r in range(n))


def _det3(rows: list[list[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor4(m: Sequence[float], row: int, col: int) -> float:
    rows = [r for r in range(4) if r != row]
    cols = [c for c in range(4) if c != col]
    return _det3([[m[c * 4 + r] for c in cols] for r in rows])


def _mat4_inverse(m: Sequence[float]) -> Matrix | None:
    """Return the inverse of a 4x4 matrix, or None when it is singular."""
    det = sum((-1) ** c * m[c * 4] * _minor4(m, 0, c) for c in range(4))
    if float_equal(det, 0.0):
        return None
    return tuple(
        (-1) ** (r + c) * _minor4(m, c, r) / det
        for c in range(4)
        for r in range(4)
    )


def ident4() -> Matrix:
    """Return the 4x4 identity matrix."""
    return (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def rotate_2d(angle: float) -> Matrix:
    """Return a 2x2 rotation about the origin by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, s, -s, c)


def rotate_3d_x(angle: float) -> Matrix:
    """Return a 3x3 rotation about the X axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (1.0, 0.0, 0.0, 0.0, c, s, 0.0, -s, c)


def rotate_3d_y(angle: float) -> Matrix:
    """Return a 3x3 rotation about the Y axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, 0.0, -s, 0.0, 1.0, 0.0, s, 0.0, c)


def rotate_3d_z(angle: float) -> Matrix:
    """Return a 3x3 rotation about the Z axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)


def translate_2d(tx: float, ty: float) -> Matrix:
    """Return a homogeneous 3x3 translation."""
    return (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, tx, ty, 1.0)


def translate_3d(tx: float, ty: float, tz: float) -> Matrix:
    """Return a homogeneous 4x4 translation."""
    return (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, tx, ty, tz, 1.0)


def homog_rotate_2d(angle: float) -> Matrix:
    """Return a homogeneous 3x3 rotation about the origin."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)


def homog_rotate_3d_x(angle: float) -> Matrix:
    """Return a homogeneous 4x4 rotation about the X axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (1.0, 0.0, 0.0, 0.0, 0.0, c, s, 0.0, 0.0, -s, c, 0.0, 0.0, 0.0, 0.0, 1.0)


def homog_rotate_3d_y(angle: float) -> Matrix:
    """Return a homogeneous 4x4 rotation about the Y axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, 0.0, -s, 0.0, 0.0, 1.0, 0.0, 0.0, s, 0.0, c, 0.0, 0.0, 0.0, 0.0, 1.0)


def homog_rotate_3d_z(angle: float) -> Matrix:
    """Return a homogeneous 4x4 rotation about the Z axis."""
    s, c = math.sin(angle), math.cos(angle)
    return (c, s, 0.0, 0.0, -s, c, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def scale_3d(scale_x: float, scale_y: float, scale_z: float) -> Matrix:
    """Return a homogeneous 4x4 scaling matrix."""
    return (
        scale_x, 0.0, 0.0, 0.0,
        0.0, scale_y, 0.0, 0.0,
        0.0, 0.0, scale_z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def scale_2d(scale_x: float, scale_y: float) -> Matrix:
    """Return a homogeneous 3x3 scaling matrix."""
    return (scale_x, 0.0, 0.0, 0.0, scale_y, 0.0, 0.0, 0.0, 1.0)


def shear_x_2d(shear: float) -> Matrix:
    """Return a homogeneous 3x3 shear along the X axis."""
    return (1.0, 0.0, 0.0, shear, 1.0, 0.0, 0.0, 0.0, 1.0)


def shear_y_2d(shear: float) -> Matrix:
    """Return a homogeneous 3x3 shear along the Y axis."""
    return (1.0, shear, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def shear_x_3d(shear_y: float, shear_z: float) -> Matrix:
    """Return a homogeneous 4x4 shear along the X axis."""
    return (1.0, shear_y, shear_z, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def shear_y_3d(shear_x: float, shear_z: float) -> Matrix:
    """Return a homogeneous 4x4 shear along the Y axis."""
    return (1.0, 0.0, 0.0, 0.0, shear_x, 1.0, shear_z, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def shear_z_3d(shear_x: float, shear_y: float) -> Matrix:
    """Return a homogeneous 4x4 shear along the Z axis."""
    return (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, shear_x, shear_y, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


def homog_rotate_3d(angle: float, axis: Sequence[float]) -> Matrix:
    """Return a homogeneous 4x4 rotation by ``angle`` about a normalized ``axis``."""
    x, y, z = axis
    s, c = math.sin(angle), math.cos(angle)
    k = 1 - c
    return (
        x * x * k + c, x * y * k + z * s, x * z * k - y * s, 0.0,
        x * y * k - z * s, y * y * k + c, y * z * k + x * s, 0.0,
        x * z * k + y * s, y * z * k - x * s, z * z * k + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def _column_sqr_lengths(m: Sequence[float]) -> tuple[float, float, float]:
    return (
        m[0] * m[0] + m[1] * m[1] + m[2] * m[2],
        m[4] * m[4] + m[5] * m[5] + m[6] * m[6],
        m[8] * m[8] + m[9] * m[9] + m[10] * m[10],
    )


def extract_3d_scale(m: Sequence[float]) -> tuple[float, float, float]:
    """Return the X, Y and Z scaling of a homogeneous 4x4 matrix."""
    sx, sy, sz = _column_sqr_lengths(m)
    return math.sqrt(sx), math.sqrt(sy), math.sqrt(sz)


def extract_max_scale(m: Sequence[float]) -> float:
    """Return the largest axis scaling of a homogeneous 4x4 matrix."""
    return math.sqrt(max(_column_sqr_lengths(m)))


def mat4_normal(m: Sequence[float]) -> Matrix:
    """Return the 3x3 normal matrix (upper-left of the inverse transpose).

    A singular matrix yields the zero matrix.
    """
    inverse = _mat4_inverse(m)
    n = _transpose(inverse, 4) if inverse is not None else (0.0,) * 16
    return (n[0], n[1], n[2], n[4], n[5], n[6], n[8], n[9], n[10])


def transform_coordinate(v: Sequence[float], m: Sequence[float]) -> Vec3:
    """Transform a point by ``m``, including translation, and divide by ``w``."""
    t = _mat4_mul4x1(m, Vec3(*v).vec4(1.0))
    t = t.mul(1 / t[3])
    return t.vec3()


def transform_normal(v: Sequence[float], m: Sequence[float]) -> Vec3:
    """Transform a direction by ``m``, ignoring translation."""
    return _mat4_mul4x1(m, Vec3(*v).vec4(0.0)).vec3()