"""Camera module for viewport geometry and ray generation.

Components:
    pinhole: Fixed pinhole camera at the origin looking down -z

Camera responsibilities:
    - Derive image height and viewport size from width and aspect ratio
    - Compute the per-pixel step vectors and the center of pixel (0, 0)
    - Build the ray through any pixel center
"""

from .pinhole import (
    CAMERA_CENTER,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_WIDTH,
    FOCAL_LENGTH,
    VIEWPORT_HEIGHT,
    RenderConfig,
    Viewport,
    get_ray,
    setup_viewport,
)

__all__ = [
    "RenderConfig",
    "Viewport",
    "setup_viewport",
    "get_ray",
    "CAMERA_CENTER",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_IMAGE_WIDTH",
    "FOCAL_LENGTH",
    "VIEWPORT_HEIGHT",
]
