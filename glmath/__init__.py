"""Vectors, quaternions, transform and projection matrices, coordinate conversions and Bezier curves for 3D graphics."""

__version__ = "0.1.0"