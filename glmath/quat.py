"""Quaternions for representing and interpolating 3D rotations.

A quaternion has a scalar part ``w`` and a vector part ``v``. Matrices
produced or consumed here are flat column-major 4x4 tuples, as in
:mod:`glmath.transform`.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from glmath import util
from glmath.transform import Matrix
from glmath.util import clamp, float_equal, float_equal_threshold
from glmath.vector import Vec3


class RotationOrder(IntEnum):
    """Axis sequence used by :func:`angles_to_quat`."""

    XYX = 0
    XYZ = 1
    XZX = 2
    XZY = 3
    YXY = 4
    YXZ = 5
    YZY = 6
    YZX = 7
    ZYZ = 8
    ZYX = 9
    ZXZ = 10
    ZXY = 11


@dataclass(frozen=True)
class Quat:
    """A quaternion with scalar part ``w`` and vector part ``v``."""

    w: float
    v: Vec3

    def __post_init__(self) -> None:
        if not isinstance(self.v, Vec3):
            object.__setattr__(self, "v", Vec3(*self.v))

    @property
    def x(self) -> float:
        """The first component of the vector part."""
        return self.v[0]

    @property
    def y(self) -> float:
        """The second component of the vector part."""
        return self.v[1]

    @property
    def z(self) -> float:
        """The third component of the vector part."""
        return self.v[2]

    def add(self, other: Quat) -> Quat:
        """Return the component-wise sum."""
        return Quat(self.w + other.w, self.v.add(other.v))

    def sub(self, other: Quat) -> Quat:
        """Return the component-wise difference."""
        return Quat(self.w - other.w, self.v.sub(other.v))

    def mul(self, other: Quat) -> Quat:
        """Return the Hamilton product ``self * other`` (not commutative)."""
        return Quat(
            self.w * other.w - self.v.dot(other.v),
            self.v.cross(other.v).add(other.v.mul(self.w)).add(self.v.mul(other.w)),
        )

    def scale(self, c: float) -> Quat:
        """Return every component multiplied by ``c``."""
        return Quat(self.w * c, self.v.mul(c))

    def conjugate(self) -> Quat:
        """Return the quaternion with its vector part negated."""
        return Quat(self.w, self.v.mul(-1.0))

    def length(self) -> float:
        """Return the norm, as if the quaternion were a 4-vector."""
        return math.sqrt(self.dot(self))

    def norm(self) -> float:
        """Alias of :meth:`length`."""
        return self.length()

    def normalize(self) -> Quat:
        """Return the unit quaternion in the same direction.

        A zero quaternion normalizes to the identity.
        """
        magnitude = self.length()
        if float_equal(1.0, magnitude):
            return self
        if magnitude == 0:
            return quat_ident()
        if magnitude == math.inf:
            magnitude = util.MAX_VALUE
        return Quat(self.w / magnitude, self.v.mul(1.0 / magnitude))

    def inverse(self) -> Quat:
        """Return the conjugate divided by the squared norm."""
        return self.conjugate().scale(1.0 / self.dot(self))

    def rotate(self, v: Sequence[float]) -> Vec3:
        """Rotate the vector ``v`` by the rotation this quaternion represents."""
        v = Vec3(*v)
        cross = self.v.cross(v)
        return v.add(cross.mul(2 * self.w)).add(self.v.mul(2.0).cross(cross))

    def mat4(self) -> Matrix:
        """Return the equivalent homogeneous 4x4 rotation matrix."""
        w, x, y, z = self.w, self.v[0], self.v[1], self.v[2]
        return (
            1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * w * z, 2 * x * z - 2 * w * y, 0.0,
            2 * x * y - 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * w * x, 0.0,
            2 * x * z + 2 * w * y, 2 * y * z - 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def dot(self, other: Quat) -> float:
        """Return the 4-vector dot product."""
        return self.w * other.w + self.v.dot(other.v)

    def approx_equal(self, other: Quat) -> bool:
        """Compare each component with ``float_equal``."""
        return float_equal(self.w, other.w) and self.v.approx_equal(other.v)

    def approx_equal_threshold(self, other: Quat, epsilon: float) -> bool:
        """Compare each component with ``float_equal_threshold`` at ``epsilon``."""
        return float_equal_threshold(self.w, other.w, epsilon) and self.v.approx_equal_threshold(
            other.v, epsilon
        )

    def approx_equal_func(self, other: Quat, f: Callable[[float, float], bool]) -> bool:
        """Compare each component with the function ``f``."""
        return f(self.w, other.w) and self.v.approx_func_equal(other.v, f)

    def orientation_equal(self, other: Quat) -> bool:
        """Tell whether both quaternions describe the same orientation."""
        return self.orientation_equal_threshold(other, util.EPSILON)

    def orientation_equal_threshold(self, other: Quat, epsilon: float) -> bool:
        """Like :meth:`orientation_equal` with an explicit tolerance; ``q`` and ``-q`` match."""
        return abs(self.normalize().dot(other.normalize())) > 1 - epsilon

    def __add__(self, other: Quat) -> Quat:
        return self.add(other)

    def __sub__(self, other: Quat) -> Quat:
        return self.sub(other)

    def __mul__(self, other: Quat) -> Quat:
        return self.mul(other)


def quat_ident() -> Quat:
    """Return the identity quaternion (w=1, v=0)."""
    return Quat(1.0, Vec3(0.0, 0.0, 0.0))


def quat_rotate(angle: float, axis: Sequence[float]) -> Quat:
    """Return the rotation by ``angle`` radians about ``axis``."""
    half = angle / 2
    return Quat(math.cos(half), Vec3(*axis).mul(math.sin(half)))


def quat_lerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Linearly interpolate between two quaternions."""
    return q1.add(q2.sub(q1).scale(amount))


def quat_nlerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Linearly interpolate and normalize the result."""
    return quat_lerp(q1, q2, amount).normalize()


def quat_slerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Spherically interpolate from ``q1`` to ``q2`` at constant angular speed."""
    q1, q2 = q1.normalize(), q2.normalize()
    dot = q1.dot(q2)

    if dot > 0.9995:
        return quat_nlerp(q1, q2, amount)

    dot = clamp(dot, -1.0, 1.0)
    theta = math.acos(dot) * amount
    rel = q2.sub(q1.scale(dot)).normalize()
    return q1.scale(math.cos(theta)).add(rel.scale(math.sin(theta)))


def angles_to_quat(angle1: float, angle2: float, angle3: float, order: RotationOrder) -> Quat:
    """Compose three rotations about the axes named by ``order``.

    Raises ValueError for an unknown order.
    """
    try:
        order = RotationOrder(order)
    except ValueError:
        raise ValueError(f"unsupported rotation order: {order!r}") from None

    s0, c0 = math.sin(angle1 / 2), math.cos(angle1 / 2)
    s1, c1 = math.sin(angle2 / 2), math.cos(angle2 / 2)
    s2, c2 = math.sin(angle3 / 2), math.cos(angle3 / 2)

    match order:
        case RotationOrder.ZYX:
            w = c0 * c1 * c2 + s0 * s1 * s2
            v = (c0 * c1 * s2 - s0 * s1 * c2, c0 * s1 * c2 + s0 * c1 * s2, s0 * c1 * c2 - c0 * s1 * s2)
        case RotationOrder.ZYZ:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (c0 * s1 * s2 - s0 * s1 * c2, c0 * s1 * c2 + s0 * s1 * s2, s0 * c1 * c2 + c0 * c1 * s2)
        case RotationOrder.ZXY:
            w = c0 * c1 * c2 - s0 * s1 * s2
            v = (c0 * s1 * c2 - s0 * c1 * s2, c0 * c1 * s2 + s0 * s1 * c2, c0 * s1 * s2 + s0 * c1 * c2)
        case RotationOrder.ZXZ:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (c0 * s1 * c2 + s0 * s1 * s2, s0 * s1 * c2 - c0 * s1 * s2, c0 * c1 * s2 + s0 * c1 * c2)
        case RotationOrder.YXZ:
            w = c0 * c1 * c2 + s0 * s1 * s2
            v = (c0 * s1 * c2 + s0 * c1 * s2, s0 * c1 * c2 - c0 * s1 * s2, c0 * c1 * s2 - s0 * s1 * c2)
        case RotationOrder.YXY:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (c0 * s1 * c2 + s0 * s1 * s2, s0 * c1 * c2 + c0 * c1 * s2, c0 * s1 * s2 - s0 * s1 * c2)
        case RotationOrder.YZX:
            w = c0 * c1 * c2 - s0 * s1 * s2
            v = (c0 * c1 * s2 + s0 * s1 * c2, c0 * s1 * s2 + s0 * c1 * c2, c0 * s1 * c2 - s0 * c1 * s2)
        case RotationOrder.YZY:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (s0 * s1 * c2 - c0 * s1 * s2, c0 * c1 * s2 + s0 * c1 * c2, c0 * s1 * c2 + s0 * s1 * s2)
        case RotationOrder.XYZ:
            w = c0 * c1 * c2 - s0 * s1 * s2
            v = (c0 * s1 * s2 + s0 * c1 * c2, c0 * s1 * c2 - s0 * c1 * s2, c0 * c1 * s2 + s0 * s1 * c2)
        case RotationOrder.XYX:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (c0 * c1 * s2 + s0 * c1 * c2, c0 * s1 * c2 + s0 * s1 * s2, s0 * s1 * c2 - c0 * s1 * s2)
        case RotationOrder.XZY:
            w = c0 * c1 * c2 + s0 * s1 * s2
            v = (s0 * c1 * c2 - c0 * s1 * s2, c0 * c1 * s2 - s0 * s1 * c2, c0 * s1 * c2 + s0 * c1 * s2)
        case RotationOrder.XZX:
            w = c0 * c1 * c2 - s0 * c1 * s2
            v = (c0 * c1 * s2 + s0 * c1 * c2, c0 * s1 * s2 - s0 * s1 * c2, c0 * s1 * c2 + s0 * s1 * s2)
    return Quat(w, Vec3(*v))


def mat4_to_quat(m: Sequence[float]) -> Quat:
    """Convert a pure rotation matrix into a quaternion."""
    trace = m[0] + m[5] + m[10]
    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        return Quat(0.25 / s, Vec3((m[6] - m[9]) * s, (m[8] - m[2]) * s, (m[1] - m[4]) * s))

    if m[0] > m[5] and m[0] > m[10]:
        s = 2.0 * math.sqrt(1.0 + m[0] - m[5] - m[10])
        return Quat((m[6] - m[9]) / s, Vec3(0.25 * s, (m[4] + m[1]) / s, (m[8] + m[2]) / s))

    if m[5] > m[10]:
        s = 2.0 * math.sqrt(1.0 + m[5] - m[0] - m[10])
        return Quat((m[8] - m[2]) / s, Vec3((m[4] + m[1]) / s, 0.25 * s, (m[9] + m[6]) / s))

    s = 2.0 * math.sqrt(1.0 + m[10] - m[0] - m[5])
    return Quat((m[1] - m[4]) / s, Vec3((m[8] + m[2]) / s, (m[9] + m[6]) / s, 0.25 * s))


def quat_look_at_v(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> Quat:
    """Return the camera rotation looking from ``eye`` toward ``center``.

    The object's front is assumed to face -Z and its up to face +Y.
    """
    direction = Vec3(*center).sub(Vec3(*eye)).normalize()
    rot_dir = quat_between_vectors(Vec3(0.0, 0.0, -1.0), direction)
    up_current = rot_dir.rotate(Vec3(0.0, 1.0, 0.0))
    rot_up = quat_between_vectors(up_current, up)
    return rot_up.mul(rot_dir).inverse()


def quat_between_vectors(start: Sequence[float], dest: Sequence[float]) -> Quat:
    """Return the shortest rotation taking direction ``start`` to ``dest``."""
    start = Vec3(*start).normalize()
    dest = Vec3(*dest).normalize()
    epsilon = 0.001

    cos_theta = start.dot(dest)
    if cos_theta < -1.0 + epsilon:
        # Opposite directions: any axis perpendicular to start will do.
        axis = Vec3(1.0, 0.0, 0.0).cross(start)
        if axis.dot(axis) < epsilon:
            axis = Vec3(0.0, 1.0, 0.0).cross(start)
        return quat_rotate(math.pi, axis.normalize())

    axis = start.cross(dest)
    s = math.sqrt((1.0 + cos_theta) * 2.0)
    return Quat(s * 0.5, axis.mul(1.0 / s))