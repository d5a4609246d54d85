"""Sphere primitive with analytic ray-sphere intersection.

The hit test solves |P(t) - center|^2 = radius^2 along the ray
P(t) = origin + t * direction. With oc = center - origin this is the quadratic

    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = -2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

A negative discriminant b^2 - 4ac means the ray misses the sphere, reported
by the NO_HIT sentinel (-1.0).

Example:
    >>> from spherecast.core.ray import Ray
    >>> from spherecast.core.vector import Vector3
    >>> from spherecast.geometry.sphere import hit_sphere
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
    >>> hit_sphere(Vector3(0.0, 0.0, -1.0), 0.5, ray)
    0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from spherecast.core.ray import Ray
from spherecast.core.vector import Point3, Vector3, normalize

# Returned by hit_sphere when the ray does not intersect the sphere
NO_HIT = -1.0


def hit_sphere(
    center: Point3,
    radius: float,
    ray: Ray,
    *,
    allow_behind: bool = False,
) -> float:
    """Test for ray-sphere intersection.

    By default only intersections at t >= 0 count: the nearer root is returned
    when it is non-negative, otherwise the farther root (the ray starts inside
    the sphere or on its surface), otherwise NO_HIT.

    Args:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        ray: The ray to test. The direction need not be normalized.
        allow_behind: If True, return the smaller root whenever the
            discriminant is non-negative, even when it lies behind the ray
            origin.

    Returns:
        The hit distance along the ray in multiples of ray.direction, or
        NO_HIT (-1.0) if there is no intersection.
    """
    oc = center - ray.origin
    a = ray.direction.dot(ray.direction)
    b = -2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - 4.0 * a * c

    # A zero direction never reaches the surface
    if discriminant < 0.0 or a == 0.0:
        return NO_HIT

    sqrt_d = math.sqrt(discriminant)
    near = (-b - sqrt_d) / (2.0 * a)
    if allow_behind or near >= 0.0:
        return near

    far = (-b + sqrt_d) / (2.0 * a)
    if far >= 0.0:
        return far
    return NO_HIT


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive float).
    """

    center: Point3
    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def intersect(self, ray: Ray) -> float | None:
        """Return the nearest hit distance along the ray, or None on a miss."""
        t = hit_sphere(self.center, self.radius, ray)
        if t == NO_HIT:
            return None
        return t

    def normal_at(self, point: Point3) -> Vector3:
        """Outward unit normal at a point on the surface.

        Raises:
            DegenerateVectorError: If point coincides with the center.
        """
        return normalize(point - self.center)


def make_sphere(center: Point3, radius: float) -> Sphere:
    """Create a sphere from center and radius.

    Raises:
        ValueError: If radius is not positive.
    """
    return Sphere(center=center, radius=radius)
