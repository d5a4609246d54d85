"""Core rendering module.

This module contains the fundamental building blocks for ray casting:

Components:
    vector: Vector3 value type (points, directions, colors) and utilities
    ray: Ray data structure with parametric evaluation
    errors: Fatal error kinds raised during a render
    render: Render driver that fills an RGBA grid one pixel at a time

Every pixel is computed independently from read-only viewport state, and
each pixel write targets its own cell of the output grid.
"""

from .errors import DegenerateVectorError, ImageWriteError, SpherecastError
from .ray import Ray, make_ray, ray_at
from .vector import (
    NORMALIZE_EPSILON,
    Color,
    Point3,
    Vector3,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    normalize,
    unit_vector,
    vec3,
)

# Note: render is NOT imported here to avoid circular imports.
# Import directly from spherecast.core.render when needed.

__all__ = [
    "Vector3",
    "Point3",
    "Color",
    "vec3",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
    "unit_vector",
    "near_zero",
    "NORMALIZE_EPSILON",
    "Ray",
    "ray_at",
    "make_ray",
    "SpherecastError",
    "DegenerateVectorError",
    "ImageWriteError",
]
