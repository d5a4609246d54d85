"""Ray data structure.

A ray is an origin point and a direction vector. Rays are built once per pixel,
never mutated, and discarded after shading.

Example:
    >>> from spherecast.core.ray import Ray, ray_at
    >>> from spherecast.core.vector import Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray_at(ray, 5.0)  # Point 5 units along the ray
    Vector3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from spherecast.core.vector import Point3, Vector3


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            normalized; hit distances are measured in multiples of it.
    """

    origin: Point3
    direction: Vector3

    def at(self, t: float) -> Point3:
        """Compute the point along the ray at parameter t.

        Any real t is accepted. Negative values lie behind the origin.
        """
        return self.origin + self.direction * t


def ray_at(ray: Ray, t: float) -> Point3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.at(t)


def make_ray(origin: Point3, direction: Vector3) -> Ray:
    """Create a ray from origin and direction."""
    return Ray(origin=origin, direction=direction)
