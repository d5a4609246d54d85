"""Pinhole-camera sphere renderer.

This package casts one ray per pixel from a fixed pinhole camera into a scene
holding a single sphere and maps every ray to a color with an interchangeable
shading policy. The rendered grid is written out as an 8-bit RGBA image.

Subpackages:
    core: Vector algebra, rays, error kinds, and the render driver
    geometry: Sphere primitive and the analytic ray-sphere hit test
    scene: Scene container with nearest-hit queries
    shading: Shading policies (solid hit, normal visualization, gradient sky)
    camera: Viewport geometry and per-pixel ray generation
    preview: Pixel conversion and PNG export
"""

__version__ = "0.1.0"
