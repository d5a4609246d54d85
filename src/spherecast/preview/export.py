"""Pixel conversion and image export.

Colors are converted to 8-bit RGBA pixels by scaling each channel by 255,
truncating toward zero and saturating into [0, 255]. NaN becomes 0. The color
itself is never clamped first, so out-of-range channels saturate rather than
being rejected:

    1.0 -> 255    0.5 -> 127    0.0 -> 0    1.2 -> 255    -0.1 -> 0

Alpha is always 255.

The pixel grid is a NumPy array of shape (height, width, 4) and dtype uint8,
indexed as grid[y, x]. Grids are written with Pillow; the container format
follows the file extension.

Example:
    >>> from spherecast.core.vector import Vector3
    >>> from spherecast.preview.export import new_pixel_grid, save_png, write_color
    >>> grid = new_pixel_grid(4, 2)
    >>> write_color(grid, 0, 0, Vector3(1.0, 0.0, 0.0))
    >>> save_png(grid, "output.png")
"""

from __future__ import annotations

import logging
import math
import os
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from spherecast.core.errors import ImageWriteError

if TYPE_CHECKING:
    from spherecast.core.vector import Color

logger = logging.getLogger(__name__)

# Alpha channel value for every pixel
OPAQUE = 255

# Type alias for the RGBA pixel grid
PixelGrid = npt.NDArray[np.uint8]


def channel_to_byte(value: float) -> int:
    """Convert one color channel to an 8-bit value.

    Args:
        value: Channel intensity, nominally in [0, 1].

    Returns:
        value * 255 truncated toward zero and saturated into [0, 255].
    """
    if math.isnan(value):
        return 0
    scaled = value * 255.0
    if scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(scaled)


def color_to_rgba(color: Color) -> tuple[int, int, int, int]:
    """Convert a color to an opaque 8-bit RGBA pixel."""
    return (
        channel_to_byte(color.r),
        channel_to_byte(color.g),
        channel_to_byte(color.b),
        OPAQUE,
    )


def new_pixel_grid(width: int, height: int) -> PixelGrid:
    """Allocate a zeroed RGBA grid of shape (height, width, 4).

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    return np.zeros((height, width, 4), dtype=np.uint8)


def write_color(grid: PixelGrid, x: int, y: int, color: Color) -> None:
    """Store a color at pixel (x, y) of the grid."""
    grid[y, x] = color_to_rgba(color)


def image_to_uint8(image: npt.NDArray[np.floating]) -> PixelGrid:
    """Convert a float image to an RGBA uint8 grid.

    Applies the same rule as channel_to_byte() to every channel. A
    three-channel input gets an opaque alpha channel; a four-channel input
    has its alpha forced to 255.

    Args:
        image: Float image array of shape (H, W, 3) or (H, W, 4).

    Returns:
        8-bit image array of shape (H, W, 4).

    Raises:
        ValueError: If the array does not have 3 or 4 channels.
    """
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got {image.shape}")

    scaled = np.trunc(image[:, :, :3].astype(np.float64) * 255.0)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    rgb = np.clip(scaled, 0.0, 255.0).astype(np.uint8)

    height, width = image.shape[:2]
    alpha = np.full((height, width, 1), OPAQUE, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=2)


def _check_grid(grid: PixelGrid) -> None:
    if grid.ndim != 3 or grid.shape[2] != 4 or grid.dtype != np.uint8:
        raise ValueError(
            f"Pixel grid must be uint8 with shape (H, W, 4), "
            f"got {grid.dtype} {grid.shape}"
        )


def save_image(
    grid: PixelGrid,
    filepath: str | os.PathLike[str],
    *,
    format: str | None = None,
) -> None:
    """Write an RGBA grid to an image file.

    Args:
        grid: Pixel grid of shape (H, W, 4) and dtype uint8.
        filepath: Output file path. The extension selects the container
            unless format is given.
        format: Optional Pillow format name (e.g. "PNG").

    Raises:
        ValueError: If the grid has the wrong shape or dtype.
        ImageWriteError: If Pillow cannot encode or write the file.
    """
    _check_grid(grid)
    path = os.fspath(filepath)

    try:
        pil_image = PILImage.fromarray(grid)
        pil_image.save(path, format=format)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageWriteError(path, str(exc)) from exc

    logger.info("Wrote %dx%d image to %s", grid.shape[1], grid.shape[0], path)


def save_png(grid: PixelGrid, filepath: str | os.PathLike[str]) -> None:
    """Write an RGBA grid as a PNG file.

    Raises:
        ValueError: If the grid has the wrong shape or dtype.
        ImageWriteError: If the file cannot be written.
    """
    save_image(grid, filepath, format="PNG")
