"""Conversions between cartesian, spherical and cylindrical coordinates.

All angles are in radians. Spherical coordinates are (radius, inclination,
azimuth); cylindrical coordinates are (radial distance, azimuth, height).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from glmath.vector import Vec3


def cartesian_to_spherical(coord: Sequence[float]) -> tuple[float, float, float]:
    """Convert (x, y, z) to radius ``r``, inclination ``theta`` and azimuth ``phi``."""
    x, y, z = coord
    r = Vec3(x, y, z).length()
    theta = math.acos(z / r)
    phi = math.atan2(y, x)
    return r, theta, phi


def cartesian_to_cylindrical(coord: Sequence[float]) -> tuple[float, float, float]:
    """Convert (x, y, z) to radial distance ``rho``, azimuth ``phi`` and height ``z``."""
    x, y, z = coord
    return math.hypot(x, y), math.atan2(y, x), z


def spherical_to_cartesian(r: float, theta: float, phi: float) -> Vec3:
    """Convert spherical coordinates to a cartesian vector."""
    st, ct = math.sin(theta), math.cos(theta)
    sp, cp = math.sin(phi), math.cos(phi)
    return Vec3(r * (st * cp), r * (st * sp), r * ct)


def spherical_to_cylindrical(r: float, theta: float, phi: float) -> tuple[float, float, float]:
    """Convert spherical coordinates to (rho, phi, z)."""
    return r * math.sin(theta), phi, r * math.cos(theta)


def cylindrical_to_spherical(rho: float, phi: float, z: float) -> tuple[float, float, float]:
    """Convert cylindrical coordinates to (r, theta, phi)."""
    return math.hypot(rho, z), math.atan2(rho, z), phi


def cylindrical_to_cartesian(rho: float, phi: float, z: float) -> Vec3:
    """Convert cylindrical coordinates to a cartesian vector."""
    return Vec3(rho * math.cos(phi), rho * math.sin(phi), z)


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * math.pi / 180


def rad_to_deg(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * 180 / math.pi