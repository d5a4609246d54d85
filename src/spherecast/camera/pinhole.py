"""Pinhole camera model for per-pixel ray generation.

The camera sits at the origin looking down -z. A viewport of fixed height
(2.0 world units) is placed one focal length in front of it, and its width
follows the requested aspect ratio. Pixel (0, 0) is the upper-left corner of
the image; x grows to the right and y grows downward.

Viewport geometry is computed once per render by setup_viewport() and is
immutable afterwards, so it may be shared read-only by any number of pixel
loops.

Example:
    >>> from spherecast.camera.pinhole import RenderConfig, get_ray, setup_viewport
    >>> viewport = setup_viewport(RenderConfig(image_width=400))
    >>> viewport.image_height
    225
    >>> ray = get_ray(viewport, 200, 112)  # Ray near the image center
"""

from __future__ import annotations

from dataclasses import dataclass

from spherecast.core.ray import Ray, make_ray
from spherecast.core.vector import Point3, Vector3, vec3

# =============================================================================
# Camera Constants
# =============================================================================

DEFAULT_IMAGE_WIDTH = 400
DEFAULT_ASPECT_RATIO = 16.0 / 9.0
FOCAL_LENGTH = 1.0
VIEWPORT_HEIGHT = 2.0

# Camera position is fixed
CAMERA_CENTER = vec3(0.0, 0.0, 0.0)


# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a single render.

    Attributes:
        image_width: Output width in pixels.
        aspect_ratio: Width divided by height of the output image.
        focal_length: Distance from the camera to the viewport.
        viewport_height: Height of the viewport in world units.
    """

    image_width: int = DEFAULT_IMAGE_WIDTH
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    focal_length: float = FOCAL_LENGTH
    viewport_height: float = VIEWPORT_HEIGHT

    def __post_init__(self) -> None:
        if self.image_width <= 0:
            raise ValueError(f"Image width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect_ratio}")
        if self.focal_length <= 0.0:
            raise ValueError(f"Focal length must be positive, got {self.focal_length}")
        if self.viewport_height <= 0.0:
            raise ValueError(
                f"Viewport height must be positive, got {self.viewport_height}"
            )
        if self.image_height < 1:
            raise ValueError(
                f"Image width {self.image_width} with aspect ratio "
                f"{self.aspect_ratio} gives an empty image"
            )

    @property
    def image_height(self) -> int:
        """Image height in pixels, truncated from width / aspect_ratio."""
        return int(self.image_width / self.aspect_ratio)


@dataclass(frozen=True)
class Viewport:
    """Viewport geometry derived from a RenderConfig.

    Attributes:
        image_width: Output width in pixels.
        image_height: Output height in pixels.
        viewport_width: Viewport width in world units.
        viewport_height: Viewport height in world units.
        focal_length: Distance from the camera to the viewport.
        camera_center: Camera position in world space.
        pixel_delta_u: Step between horizontally adjacent pixel centers.
        pixel_delta_v: Step between vertically adjacent pixel centers.
        pixel00_loc: World-space center of pixel (0, 0).
    """

    image_width: int
    image_height: int
    viewport_width: float
    viewport_height: float
    focal_length: float
    camera_center: Point3
    pixel_delta_u: Vector3
    pixel_delta_v: Vector3
    pixel00_loc: Point3

    def pixel_center(self, x: int, y: int) -> Point3:
        """World-space center of pixel (x, y)."""
        return self.pixel00_loc + self.pixel_delta_u * x + self.pixel_delta_v * y


# =============================================================================
# Camera Setup
# =============================================================================


def setup_viewport(config: RenderConfig | None = None) -> Viewport:
    """Compute viewport geometry for a render.

    The viewport width uses the requested aspect ratio rather than the ratio
    of the truncated pixel dimensions.

    Args:
        config: Render configuration. Defaults to a 400 pixel wide 16:9 image.

    Returns:
        The viewport for this render.
    """
    if config is None:
        config = RenderConfig()

    image_width = config.image_width
    image_height = config.image_height

    viewport_height = config.viewport_height
    viewport_width = config.aspect_ratio * viewport_height

    # u runs right along the top edge, v runs down the left edge
    viewport_u = vec3(viewport_width, 0.0, 0.0)
    viewport_v = vec3(0.0, -viewport_height, 0.0)

    pixel_delta_u = viewport_u / image_width
    pixel_delta_v = viewport_v / image_height

    viewport_upper_left = (
        CAMERA_CENTER
        - viewport_u / 2.0
        - viewport_v / 2.0
        - vec3(0.0, 0.0, config.focal_length)
    )
    pixel00_loc = viewport_upper_left + pixel_delta_u / 2.0 + pixel_delta_v / 2.0

    return Viewport(
        image_width=image_width,
        image_height=image_height,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        focal_length=config.focal_length,
        camera_center=CAMERA_CENTER,
        pixel_delta_u=pixel_delta_u,
        pixel_delta_v=pixel_delta_v,
        pixel00_loc=pixel00_loc,
    )


# =============================================================================
# Ray Generation
# =============================================================================


def get_ray(viewport: Viewport, x: int, y: int) -> Ray:
    """Generate the ray through the center of pixel (x, y).

    The direction runs from the camera center to the pixel center and is not
    normalized.

    Args:
        viewport: Viewport geometry from setup_viewport().
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).

    Returns:
        A Ray from the camera center through the pixel center.
    """
    pixel_center = viewport.pixel_center(x, y)
    return make_ray(viewport.camera_center, pixel_center - viewport.camera_center)
