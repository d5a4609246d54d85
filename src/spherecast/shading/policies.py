"""Shading policies mapping a ray to a color.

A shading policy is anything with a ``shade(ray) -> Color`` method. The render
driver depends only on that capability. Three policies are provided:

    SolidHit:            red where the ray hits the scene, sky elsewhere
    NormalVisualization: surface normal mapped from [-1, 1] to [0, 1]
    GradientSky:         vertical white-to-blue gradient, ignores the scene

All policies are pure: shading the same ray twice gives the same color and
nothing is mutated. A ray with a zero-length direction raises
DegenerateVectorError from the sky gradient.

Example:
    >>> from spherecast.core.ray import Ray
    >>> from spherecast.core.vector import Vector3
    >>> from spherecast.shading.policies import make_shader
    >>> shader = make_shader("normal")
    >>> shader.shade(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)))
    Vector3(x=0.5, y=0.5, z=1.0)
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

from spherecast.core.ray import Ray
from spherecast.core.vector import Color, normalize, vec3
from spherecast.scene.intersection import Scene, default_scene

# Type alias for shading policy names
ShaderName = Literal["solid", "normal", "sky"]

# Gradient endpoints: white at the bottom, light blue at the top
SKY_BOTTOM_COLOR = vec3(1.0, 1.0, 1.0)
SKY_TOP_COLOR = vec3(0.5, 0.7, 1.0)

# Color returned by SolidHit for rays that hit the scene
SOLID_HIT_COLOR = vec3(1.0, 0.0, 0.0)


@runtime_checkable
class Shader(Protocol):
    """Capability shared by all shading policies."""

    def shade(self, ray: Ray) -> Color:
        """Return the color seen along the ray."""
        ...


def sky_color(ray: Ray) -> Color:
    """Linearly blend white and light blue by the ray's vertical direction.

    The blend parameter is t = 0.5 * (unit_direction.y + 1), so a ray pointing
    straight up gives SKY_TOP_COLOR and straight down gives SKY_BOTTOM_COLOR.

    Raises:
        DegenerateVectorError: If the ray direction has zero length.
    """
    unit_direction = normalize(ray.direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_BOTTOM_COLOR * (1.0 - t) + SKY_TOP_COLOR * t


class GradientSky:
    """Background gradient only; the scene is never consulted."""

    def shade(self, ray: Ray) -> Color:
        return sky_color(ray)

    def __repr__(self) -> str:
        return "GradientSky()"


class SolidHit:
    """Flat color wherever the ray hits the scene in front of its origin.

    Attributes:
        scene: The scene to intersect.
        color: The color returned on a hit (red by default).
    """

    def __init__(self, scene: Scene | None = None, color: Color = SOLID_HIT_COLOR) -> None:
        self.scene = scene if scene is not None else default_scene()
        self.color = color

    def shade(self, ray: Ray) -> Color:
        hit = self.scene.intersect(ray)
        if hit is not None and hit.t > 0.0:
            return self.color
        return sky_color(ray)

    def __repr__(self) -> str:
        return f"SolidHit(color={self.color!r})"


class NormalVisualization:
    """Color each hit by its outward surface normal.

    The unit normal n at the nearest hit is mapped to the color
    (n + (1, 1, 1)) * 0.5, so each component lands in [0, 1].
    """

    def __init__(self, scene: Scene | None = None) -> None:
        self.scene = scene if scene is not None else default_scene()

    def shade(self, ray: Ray) -> Color:
        hit = self.scene.intersect(ray)
        if hit is not None and hit.t > 0.0:
            normal = hit.shape.normal_at(ray.at(hit.t))
            return (normal + vec3(1.0, 1.0, 1.0)) * 0.5
        return sky_color(ray)

    def __repr__(self) -> str:
        return "NormalVisualization()"


def make_shader(name: ShaderName, scene: Scene | None = None) -> Shader:
    """Create a shading policy by name.

    Args:
        name: One of "solid", "normal" or "sky".
        scene: Scene for the policies that intersect it. Defaults to the
            single-sphere scene.

    Returns:
        The shading policy.

    Raises:
        ValueError: If the name is not a known policy.
    """
    if name == "solid":
        return SolidHit(scene)
    elif name == "normal":
        return NormalVisualization(scene)
    elif name == "sky":
        return GradientSky()
    raise ValueError(f"Unknown shading policy: {name}")
