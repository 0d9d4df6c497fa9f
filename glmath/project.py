"""Projection and view matrices, and mapping between object and window space.

Matrices are flat column-major tuples, as in :mod:`glmath.transform`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from glmath.transform import Matrix, _mat4_inverse, _mat4_mul, _mat4_mul4x1, translate_3d
from glmath.vector import Vec3, Vec4


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix:
    """Return an orthographic projection matrix."""
    rml, tmb, fmn = right - left, top - bottom, far - near
    return (
        2.0 / rml, 0.0, 0.0, 0.0,
        0.0, 2.0 / tmb, 0.0, 0.0,
        0.0, 0.0, -2.0 / fmn, 0.0,
        -(right + left) / rml, -(top + bottom) / tmb, -(far + near) / fmn, 1.0,
    )


def ortho_2d(left: float, right: float, bottom: float, top: float) -> Matrix:
    """Return an orthographic projection with near and far planes at -1 and 1."""
    return ortho(left, right, bottom, top, -1.0, 1.0)


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Return a perspective projection; ``fovy`` is in radians."""
    nmf = near - far
    f = 1.0 / math.tan(fovy / 2.0)
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (near + far) / nmf, -1.0,
        0.0, 0.0, (2.0 * far * near) / nmf, 0.0,
    )


def frustum(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix:
    """Return a perspective projection given by the six clipping planes."""
    rml, tmb, fmn = right - left, top - bottom, far - near
    a = (right + left) / rml
    b = (top + bottom) / tmb
    c = -(far + near) / fmn
    d = -(2 * far * near) / fmn
    return (
        (2.0 * near) / rml, 0.0, 0.0, 0.0,
        0.0, (2.0 * near) / tmb, 0.0, 0.0,
        a, b, c, -1.0,
        0.0, 0.0, d, 0.0,
    )


def look_at(
    eye_x: float, eye_y: float, eye_z: float,
    center_x: float, center_y: float, center_z: float,
    up_x: float, up_y: float, up_z: float,
) -> Matrix:
    """Return the world-to-eye transform given scalar coordinates."""
    return look_at_v(
        Vec3(eye_x, eye_y, eye_z),
        Vec3(center_x, center_y, center_z),
        Vec3(up_x, up_y, up_z),
    )


def look_at_v(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> Matrix:
    """Return the world-to-eye transform for a camera at ``eye`` facing ``center``."""
    eye = Vec3(*eye)
    f = Vec3(*center).sub(eye).normalize()
    s = f.cross(Vec3(*up).normalize()).normalize()
    u = s.cross(f)
    rotation = (
        s[0], u[0], -f[0], 0.0,
        s[1], u[1], -f[1], 0.0,
        s[2], u[2], -f[2], 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    return _mat4_mul(rotation, translate_3d(-eye[0], -eye[1], -eye[2]))


def project(
    obj: Sequence[float],
    modelview: Sequence[float],
    projection: Sequence[float],
    initial_x: int,
    initial_y: int,
    width: int,
    height: int,
) -> Vec3:
    """Map object coordinates to continuous window coordinates with depth."""
    vpp = _mat4_mul4x1(_mat4_mul(projection, modelview), Vec3(*obj).vec4(1.0))
    vpp = vpp.mul(1 / vpp.w)
    return Vec3(
        initial_x + (width * (vpp[0] + 1)) / 2,
        initial_y + (height * (vpp[1] + 1)) / 2,
        (vpp[2] + 1) / 2,
    )


def un_project(
    win: Sequence[float],
    modelview: Sequence[float],
    projection: Sequence[float],
    initial_x: int,
    initial_y: int,
    width: int,
    height: int,
) -> Vec3:
    """Map window coordinates back to object space.

    Raises ValueError when ``projection * modelview`` has no inverse.
    """
    inverse = _mat4_inverse(_mat4_mul(projection, modelview))
    if inverse is None:
        raise ValueError("projection times modelview is singular and cannot be inverted")

    obj4 = _mat4_mul4x1(
        inverse,
        Vec4(
            (2 * (win[0] - initial_x) / width) - 1,
            (2 * (win[1] - initial_y) / height) - 1,
            2 * win[2] - 1,
            1.0,
        ),
    )
    return obj4.vec3().mul(1 / obj4[3])