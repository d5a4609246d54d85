"""Render driver filling an RGBA grid one pixel at a time.

The driver computes viewport geometry once, then for every pixel in row-major
order builds the ray through the pixel center, shades it with the chosen
policy, converts the color to an 8-bit pixel and stores it in the grid.

Any exception raised while shading (for example DegenerateVectorError)
abandons the render: no grid is returned and nothing is written.

Example:
    >>> from spherecast.core.render import render_image, render_to_file
    >>> from spherecast.shading.policies import GradientSky
    >>> grid = render_image(GradientSky())
    >>> grid.shape
    (225, 400, 4)
    >>> grid = render_to_file("normal_sphere.png", "normal")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

import numpy as np

from spherecast.camera.pinhole import RenderConfig, Viewport, get_ray, setup_viewport
from spherecast.preview.export import (
    PixelGrid,
    image_to_uint8,
    new_pixel_grid,
    save_png,
    write_color,
)
from spherecast.scene.intersection import Scene
from spherecast.shading.policies import Shader, ShaderName, make_shader

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]

# Dimensions of the calibration gradient
TEST_PATTERN_WIDTH = 200
TEST_PATTERN_HEIGHT = 100


def render_rows(
    viewport: Viewport,
    shader: Shader,
    grid: PixelGrid,
    rows: range,
) -> None:
    """Shade a band of rows into an existing grid.

    Each call writes only the cells of the given rows, so disjoint bands can
    be filled independently against the same read-only viewport.

    Args:
        viewport: Viewport geometry from setup_viewport().
        shader: Shading policy to apply.
        grid: Destination grid of shape (image_height, image_width, 4).
        rows: Row indices to fill.
    """
    for y in rows:
        for x in range(viewport.image_width):
            ray = get_ray(viewport, x, y)
            write_color(grid, x, y, shader.shade(ray))


def render_image(
    shader: Shader,
    config: RenderConfig | None = None,
    *,
    progress: ProgressCallback | None = None,
) -> PixelGrid:
    """Render a full image with the given shading policy.

    Args:
        shader: Shading policy mapping each pixel's ray to a color.
        config: Image width, aspect ratio and viewport settings. Defaults to
            a 400 pixel wide 16:9 image.
        progress: Optional callback called after each row with
            (rows_done, total_rows).

    Returns:
        RGBA grid of shape (image_height, image_width, 4), dtype uint8.

    Raises:
        DegenerateVectorError: If shading normalizes a zero-length vector.
    """
    viewport = setup_viewport(config)
    width = viewport.image_width
    height = viewport.image_height

    logger.debug("Rendering %dx%d with %r", width, height, shader)

    grid = new_pixel_grid(width, height)
    for y in range(height):
        render_rows(viewport, shader, grid, range(y, y + 1))
        if progress is not None:
            progress(y + 1, height)

    logger.debug("Finished %dx%d render", width, height)
    return grid


def render_to_file(
    filepath: str | os.PathLike[str],
    shader: Shader | ShaderName,
    config: RenderConfig | None = None,
    *,
    scene: Scene | None = None,
    progress: ProgressCallback | None = None,
) -> PixelGrid:
    """Render an image and write it as a PNG file.

    Args:
        filepath: Output file path.
        shader: A shading policy, or the name of one ("solid", "normal",
            "sky").
        config: Render configuration. Defaults to a 400 pixel wide 16:9 image.
        scene: Scene for named policies. Defaults to the single sphere.
        progress: Optional per-row progress callback.

    Returns:
        The rendered grid.

    Raises:
        ValueError: If the shader name is unknown.
        DegenerateVectorError: If shading normalizes a zero-length vector.
        ImageWriteError: If the image cannot be written.
    """
    if isinstance(shader, str):
        shader = make_shader(shader, scene)

    grid = render_image(shader, config, progress=progress)
    save_png(grid, filepath)
    return grid


def render_test_pattern(
    width: int = TEST_PATTERN_WIDTH,
    height: int = TEST_PATTERN_HEIGHT,
) -> PixelGrid:
    """Render a calibration gradient without casting any rays.

    Red increases left to right as x / width, green increases bottom to top
    as (height - y) / height, and blue is a constant 0.2.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        RGBA grid of shape (height, width, 4), dtype uint8.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    xs = np.arange(width, dtype=np.float32) / np.float32(width)
    ys = (height - np.arange(height, dtype=np.float32)) / np.float32(height)

    image = np.empty((height, width, 3), dtype=np.float32)
    image[:, :, 0] = xs[np.newaxis, :]
    image[:, :, 1] = ys[:, np.newaxis]
    image[:, :, 2] = 0.2
    return image_to_uint8(image)
