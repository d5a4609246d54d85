"""Scene management module.

Components:
    intersection: Scene container, Hittable capability and nearest-hit query

The scene is plain data handed to shading policies; nothing in it is
mutated during a render.
"""

from .intersection import (
    SPHERE_CENTER,
    SPHERE_RADIUS,
    Hittable,
    Scene,
    SceneHit,
    default_scene,
    intersect_scene,
)

__all__ = [
    "Hittable",
    "Scene",
    "SceneHit",
    "default_scene",
    "intersect_scene",
    "SPHERE_CENTER",
    "SPHERE_RADIUS",
]
