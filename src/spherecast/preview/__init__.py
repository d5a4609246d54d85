"""Preview module for pixel conversion and image output.

Components:
    export: Color-to-pixel conversion, the RGBA pixel grid, and PNG export

Features:
    - Truncating, saturating float-to-byte conversion (no pre-clamping)
    - Constant opaque alpha
    - Pillow-based encoding with write failures raised as ImageWriteError

Example:
    >>> from spherecast.core.render import render_image
    >>> from spherecast.preview import save_png
    >>> from spherecast.shading import GradientSky
    >>>
    >>> grid = render_image(GradientSky())
    >>> save_png(grid, "blue_background.png")
"""

from spherecast.preview.export import (
    OPAQUE,
    PixelGrid,
    channel_to_byte,
    color_to_rgba,
    image_to_uint8,
    new_pixel_grid,
    save_image,
    save_png,
    write_color,
)

__all__ = [
    "PixelGrid",
    "OPAQUE",
    "channel_to_byte",
    "color_to_rgba",
    "new_pixel_grid",
    "write_color",
    "image_to_uint8",
    "save_image",
    "save_png",
]
