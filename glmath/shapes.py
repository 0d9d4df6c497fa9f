"""Vertex generation for simple 2D shapes and evaluation of Bezier curves.

Points are returned as :class:`~glmath.vector.Vec2` or
:class:`~glmath.vector.Vec3`; inputs may be any sequences of floats.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from glmath.util import clamp, float_equal
from glmath.vector import Vec2, Vec3

_P = TypeVar("_P", Vec2, Vec3)


def _check_unit_range(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"{name}={value} is not in the range [0.0, 1.0]")


def choose(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    if k == 0:
        return 1
    if n == 0:
        return 0
    if k < 0 or n < 0:
        raise ValueError(f"binomial coefficient undefined for n={n}, k={k}")
    return math.comb(n, k)


def circle(radius_x: float, radius_y: float, num_slices: int) -> list[Vec2]:
    """Return discrete triangles approximating an axis-aligned ellipse at the origin.

    Each triangle contributes three points: the centre, the previous rim
    point and the next rim point, so the result holds ``3 * num_slices`` points.
    """
    if num_slices < 1:
        raise ValueError(f"num_slices must be at least 1, got {num_slices}")

    two_pi = 2.0 * math.pi
    step = two_pi / num_slices
    center = Vec2(0.0, 0.0)
    previous = Vec2(radius_x, 0.0)
    points: list[Vec2] = []

    theta = step
    while not float_equal(theta, two_pi):
        current = Vec2(math.cos(theta) * radius_x, math.sin(theta) * radius_y)
        points.extend((center, previous, current))
        previous = current
        theta = clamp(theta + step, 0.0, two_pi)

    points.extend((center, previous, Vec2(radius_x, 0.0)))
    return points


def rect(width: float, height: float) -> list[Vec2]:
    """Return two triangles forming a rectangle with its top-left corner at the origin.

    The y coordinates grow downwards.
    """
    return [
        Vec2(0.0, 0.0),
        Vec2(0.0, -height),
        Vec2(width, -height),
        Vec2(0.0, 0.0),
        Vec2(width, -height),
        Vec2(width, 0.0),
    ]


def _quadratic(t: float, p1: _P, p2: _P, p3: _P) -> _P:
    _check_unit_range("t", t)
    u = 1.0 - t
    return p1.mul(u * u).add(p2.mul(2 * u * t)).add(p3.mul(t * t))


def _cubic(t: float, p1: _P, p2: _P, p3: _P, p4: _P) -> _P:
    _check_unit_range("t", t)
    u = 1.0 - t
    return (
        p1.mul(u * u * u)
        .add(p2.mul(3 * u * u * t))
        .add(p3.mul(3 * u * t * t))
        .add(p4.mul(t * t * t))
    )


def quadratic_bezier_curve_2d(
    t: float, p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]
) -> Vec2:
    """Evaluate a quadratic Bezier curve in 2D at ``t`` in [0, 1]."""
    return _quadratic(t, Vec2(*p1), Vec2(*p2), Vec2(*p3))


def quadratic_bezier_curve_3d(
    t: float, p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]
) -> Vec3:
    """Evaluate a quadratic Bezier curve in 3D at ``t`` in [0, 1]."""
    return _quadratic(t, Vec3(*p1), Vec3(*p2), Vec3(*p3))


def cubic_bezier_curve_2d(
    t: float,
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Vec2:
    """Evaluate a cubic Bezier curve in 2D at ``t`` in [0, 1]."""
    return _cubic(t, Vec2(*p1), Vec2(*p2), Vec2(*p3), Vec2(*p4))


def cubic_bezier_curve_3d(
    t: float,
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Vec3:
    """Evaluate a cubic Bezier curve in 3D at ``t`` in [0, 1]."""
    return _cubic(t, Vec3(*p1), Vec3(*p2), Vec3(*p3), Vec3(*p4))


def _bezier(t: float, points: Sequence[Sequence[float]], make: Callable[..., _P]) -> _P:
    _check_unit_range("t", t)
    if not points:
        raise ValueError("a Bezier curve needs at least one control point")
    control = [make(*p) for p in points]
    n = len(control) - 1
    point = control[0].mul(math.pow(1.0 - t, n))
    for i, p in enumerate(control[1:], start=1):
        weight = choose(n, i) * math.pow(1.0 - t, n - i) * math.pow(t, i)
        point = point.add(p.mul(weight))
    return point


def bezier_curve_2d(t: float, points: Sequence[Sequence[float]]) -> Vec2:
    """Evaluate an n-point Bezier curve in 2D at ``t`` in [0, 1]."""
    return _bezier(t, points, Vec2)


def bezier_curve_3d(t: float, points: Sequence[Sequence[float]]) -> Vec3:
    """Evaluate an n-point Bezier curve in 3D at ``t`` in [0, 1]."""
    return _bezier(t, points, Vec3)


def _make_curve(
    num_points: int,
    points: Sequence[Sequence[float]],
    make: Callable[..., _P],
    evaluate: Callable[[float, Sequence[Sequence[float]]], _P],
) -> list[_P]:
    if num_points < 0:
        raise ValueError(f"num_points must not be negative, got {num_points}")
    if num_points == 0:
        return []
    first = make(*points[0])
    if num_points == 1:
        return [first]
    last = make(*points[-1])
    interior = [
        evaluate(clamp(i / (num_points - 1), 0.0, 1.0), points)
        for i in range(1, num_points - 1)
    ]
    return [first, *interior, last]


def make_bezier_curve_2d(num_points: int, points: Sequence[Sequence[float]]) -> list[Vec2]:
    """Sample ``num_points`` evenly spaced points along a 2D Bezier curve.

    The first and last samples are the first and last control points.
    """
    return _make_curve(num_points, points, Vec2, bezier_curve_2d)


def make_bezier_curve_3d(num_points: int, points: Sequence[Sequence[float]]) -> list[Vec3]:
    """Sample ``num_points`` evenly spaced points along a 3D Bezier curve."""
    return _make_curve(num_points, points, Vec3, bezier_curve_3d)


def bezier_surface(
    u: float, v: float, points: Sequence[Sequence[Sequence[float]]]
) -> Vec3:
    """Evaluate a Bezier surface at ``(u, v)``, both in [0, 1].

    ``points`` is a rectangular grid of 3D control points; rows follow ``u``
    and columns follow ``v``.
    """
    _check_unit_range("u", u)
    _check_unit_range("v", v)
    if not points or not points[0]:
        raise ValueError("a Bezier surface needs at least one control point")
    width = len(points[0])
    if any(len(row) != width for row in points):
        raise ValueError("the control point grid must not be jagged")

    n = len(points) - 1
    m = width - 1
    point = Vec3(0.0, 0.0, 0.0)
    for i, row in enumerate(points):
        weight_u = choose(n, i) * math.pow(u, i) * math.pow(1.0 - u, n - i)
        for j, p in enumerate(row):
            weight_v = choose(m, j) * math.pow(v, j) * math.pow(1.0 - v, m - j)
            point = point.add(Vec3(*p).mul(weight_u * weight_v))
    return point


def _spline(
    t: float,
    ranges: Sequence[Sequence[float]],
    points: Sequence[Sequence[Sequence[float]]],
    evaluate: Callable[[float, Sequence[Sequence[float]]], _P],
) -> _P:
    if len(ranges) != len(points):
        raise ValueError("each Bezier curve needs a range")
    for (start, end), curve in zip(ranges, points):
        if start <= t <= end:
            return evaluate((t - start) / (end - start), curve)
    raise ValueError(f"t={t} is out of the range of every curve in the spline")


def bezier_spline_interpolate_2d(
    t: float,
    ranges: Sequence[Sequence[float]],
    points: Sequence[Sequence[Sequence[float]]],
) -> Vec2:
    """Evaluate a spline of 2D Bezier curves, each owning a ``(start, end)`` range of ``t``."""
    return _spline(t, ranges, points, bezier_curve_2d)


def bezier_spline_interpolate_3d(
    t: float,
    ranges: Sequence[Sequence[float]],
    points: Sequence[Sequence[Sequence[float]]],
) -> Vec3:
    """Evaluate a spline of 3D Bezier curves, each owning a ``(start, end)`` range of ``t``."""
    return _spline(t, ranges, points, bezier_curve_3d)


def reticulate_splines(ranges, points, with_llamas: bool) -> None:
    """Reticulate the splines. Prints a remark and does nothing else."""
    if not with_llamas:
        print("You can't reticulate splines without llamas, silly.")
    else:
        print("Actually, you can't even reticulate splines WITH llamas")


def screen_to_gl_coords(
    x: int, y: int, screen_width: int, screen_height: int
) -> tuple[float, float]:
    """Map pixel coordinates (origin top-left) to GL coordinates in [-1, 1]."""
    x_out = 2.0 * x / (screen_width - 1) - 1.0
    y_out = -2.0 * y / (screen_height - 1) + 1.0
    return x_out, y_out


def gl_to_screen_coords(
    x: float, y: float, screen_width: int, screen_height: int
) -> tuple[int, int]:
    """Map GL coordinates to pixel coordinates (origin top-left), truncating."""
    x_out = int((x + 1.0) * (screen_width - 1) / 2.0)
    y_out = int((1.0 - y) * (screen_height - 1) / 2.0)
    return x_out, y_out