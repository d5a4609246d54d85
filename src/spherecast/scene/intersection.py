"""Scene-level intersection testing.

This module provides a scene container holding any number of shapes that
share a uniform intersection capability, and a nearest-hit query across them.
Shading policies only talk to the scene, so adding shapes never touches
shading code.

The default scene is the single sphere at (0, 0, -1) with radius 0.5.

Example:
    >>> from spherecast.core.ray import Ray
    >>> from spherecast.core.vector import Vector3
    >>> from spherecast.scene.intersection import default_scene
    >>> scene = default_scene()
    >>> hit = scene.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)))
    >>> hit.t
    0.5
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

from spherecast.core.ray import Ray
from spherecast.core.vector import Point3, Vector3, vec3
from spherecast.geometry.sphere import Sphere

# The fixed sphere every render uses
SPHERE_CENTER = vec3(0.0, 0.0, -1.0)
SPHERE_RADIUS = 0.5


class Hittable(Protocol):
    """A shape that can be intersected by a ray."""

    def intersect(self, ray: Ray) -> float | None:
        """Return the nearest hit distance along the ray, or None."""
        ...

    def normal_at(self, point: Point3) -> Vector3:
        """Outward unit normal at a surface point."""
        ...


@dataclass(frozen=True)
class SceneHit:
    """Record of a ray-scene intersection.

    Attributes:
        t: The parameter value along the ray where intersection occurred.
        shape: The shape that was hit.
    """

    t: float
    shape: Hittable


class Scene:
    """An immutable collection of shapes.

    The shapes are fixed at construction; a scene may be shared across
    renders and read concurrently.
    """

    def __init__(self, shapes: Iterable[Hittable] = ()) -> None:
        self._shapes: tuple[Hittable, ...] = tuple(shapes)

    @property
    def shapes(self) -> tuple[Hittable, ...]:
        return self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._shapes)

    def intersect(self, ray: Ray) -> SceneHit | None:
        """Find the closest intersection of the ray with any shape.

        Args:
            ray: The ray to test.

        Returns:
            The nearest SceneHit, or None if no shape is hit.
        """
        closest: SceneHit | None = None
        for shape in self._shapes:
            t = shape.intersect(ray)
            if t is None:
                continue
            if closest is None or t < closest.t:
                closest = SceneHit(t=t, shape=shape)
        return closest


def intersect_scene(scene: Scene, ray: Ray) -> SceneHit | None:
    """Find the closest intersection of a ray with the scene."""
    return scene.intersect(ray)


def default_scene() -> Scene:
    """Create the scene holding the single fixed sphere."""
    return Scene([Sphere(center=SPHERE_CENTER, radius=SPHERE_RADIUS)])
