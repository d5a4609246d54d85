"""Geometry module for shape primitives.

This module provides geometric primitives and intersection algorithms:

Components:
    sphere: Sphere primitive with analytic ray-sphere intersection

Intersection routines are pure functions of the shape parameters and the
ray; no shape holds mutable state.
"""

from .sphere import NO_HIT, Sphere, hit_sphere, make_sphere

__all__ = [
    "NO_HIT",
    "Sphere",
    "hit_sphere",
    "make_sphere",
]
