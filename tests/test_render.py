"""Tests for the render driver.

Tests cover:
- Grid shape, dtype and alpha of a full-size render
- Per-pixel agreement with the shading policy and conversion rule
- Gradient sky layout: top and bottom rows, left-right mirror symmetry
- Solid-hit and normal renders at low resolution
- Progress callback, row bands and failure propagation
- The calibration gradient
"""

from __future__ import annotations

import numpy as np
import pytest

# Small 16:9 render used where the full size is not needed
SMALL_WIDTH = 64
SMALL_HEIGHT = 36


def _small_config():
    from spherecast.camera.pinhole import RenderConfig

    return RenderConfig(image_width=SMALL_WIDTH)


class TestSkyRender:
    """Tests on the full 400x225 gradient sky render."""

    def test_grid_shape_and_alpha(self, sky_render):
        """Test the grid is 225x400 RGBA uint8 and fully opaque."""
        assert sky_render.shape == (225, 400, 4)
        assert sky_render.dtype == np.uint8
        assert np.all(sky_render[:, :, 3] == 255)

    def test_pixels_match_shading_policy(self, sky_render, viewport):
        """Test sampled pixels equal the converted policy color."""
        from spherecast.camera.pinhole import get_ray
        from spherecast.preview.export import color_to_rgba
        from spherecast.shading.policies import sky_color

        for x, y in ((0, 0), (399, 0), (0, 224), (399, 224), (200, 112), (57, 181)):
            expected = color_to_rgba(sky_color(get_ray(viewport, x, y)))
            assert tuple(sky_render[y, x]) == expected

    def test_top_center_and_bottom_center(self, sky_render):
        """Test literal colors at the middle of the top and bottom rows."""
        top = sky_render[0, 200].astype(int)
        bottom = sky_render[224, 200].astype(int)

        # top: unit y ~ 0.7055 -> color ~ (0.574, 0.744, 1.0)
        assert abs(top[0] - 146) <= 1
        assert abs(top[1] - 189) <= 1
        assert top[2] >= 254

        # bottom: unit y ~ -0.7055 -> color ~ (0.926, 0.956, 1.0)
        assert abs(bottom[0] - 236) <= 1
        assert abs(bottom[1] - 243) <= 1
        assert bottom[2] >= 254

    def test_top_is_bluer_than_bottom(self, sky_render):
        """Test red and green fall from the bottom row to the top row."""
        top = sky_render[0].astype(int)
        bottom = sky_render[224].astype(int)

        assert np.all(top[:, 0] < bottom[:, 0])
        assert np.all(top[:, 1] < bottom[:, 1])

    def test_columns_are_monotonic(self, sky_render):
        """Test red and green never decrease going down a column."""
        for x in (0, 100, 200, 399):
            column = sky_render[:, x].astype(int)
            assert np.all(np.diff(column[:, 0]) >= 0)
            assert np.all(np.diff(column[:, 1]) >= 0)

    def test_left_right_mirror_symmetry(self, sky_render):
        """Test each row mirrors about the vertical center line."""
        mirrored = sky_render[:, ::-1].astype(int)
        assert np.all(np.abs(sky_render.astype(int) - mirrored) <= 1)

    def test_top_and_bottom_endpoints_complement(self, viewport):
        """Test mirrored top/bottom endpoint colors sum to white + blue."""
        from spherecast.camera.pinhole import get_ray
        from spherecast.core.vector import Vector3
        from spherecast.shading.policies import sky_color

        last_x = viewport.image_width - 1
        last_y = viewport.image_height - 1
        for x in (0, last_x):
            top = sky_color(get_ray(viewport, x, 0))
            bottom = sky_color(get_ray(viewport, x, last_y))
            assert (top + bottom).isclose(Vector3(1.5, 1.7, 2.0), abs_tol=1e-12)


class TestPolicyRenders:
    """Tests rendering the sphere at low resolution."""

    def test_solid_render(self):
        """Test the sphere shows as red in the middle and sky in the corners."""
        from spherecast.core.render import render_image
        from spherecast.shading.policies import SolidHit

        grid = render_image(SolidHit(), _small_config())

        assert grid.shape == (SMALL_HEIGHT, SMALL_WIDTH, 4)
        assert tuple(grid[18, 32]) == (255, 0, 0, 255)
        for y, x in ((0, 0), (0, 63), (35, 0), (35, 63)):
            assert tuple(grid[y, x]) != (255, 0, 0, 255)

        red = np.all(grid == np.array([255, 0, 0, 255], dtype=np.uint8), axis=2)
        # Sphere spans roughly a quarter of the image height
        assert 50 < red.sum() < 400

    def test_normal_render(self):
        """Test the sphere center maps to roughly (0.5, 0.5, 1.0)."""
        from spherecast.core.render import render_image
        from spherecast.shading.policies import NormalVisualization

        grid = render_image(NormalVisualization(), _small_config()).astype(int)
        r, g, b, a = grid[18, 32]

        assert abs(r - 127) <= 6
        assert abs(g - 127) <= 6
        assert b >= 250
        assert a == 255

    def test_sky_matches_solid_outside_sphere(self):
        """Test the two policies agree wherever the sphere is not hit."""
        from spherecast.core.render import render_image
        from spherecast.shading.policies import GradientSky, SolidHit

        solid = render_image(SolidHit(), _small_config())
        sky = render_image(GradientSky(), _small_config())

        red = np.all(solid == np.array([255, 0, 0, 255], dtype=np.uint8), axis=2)
        assert np.array_equal(solid[~red], sky[~red])

    def test_accepts_custom_shader(self):
        """Test any object with shade() can drive a render."""
        from spherecast.core.render import render_image
        from spherecast.core.vector import Vector3

        class Flat:
            def shade(self, ray):
                return Vector3(0.0, 1.0, 0.0)

        grid = render_image(Flat(), _small_config())
        assert np.all(grid == np.array([0, 255, 0, 255], dtype=np.uint8))


class TestRenderDriver:
    """Tests for progress reporting, row bands and failures."""

    def test_progress_called_per_row(self):
        """Test the callback sees every row in order."""
        from spherecast.core.render import render_image
        from spherecast.shading.policies import GradientSky

        calls = []
        render_image(GradientSky(), _small_config(), progress=lambda c, t: calls.append((c, t)))

        assert calls == [(i, SMALL_HEIGHT) for i in range(1, SMALL_HEIGHT + 1)]

    def test_row_bands_compose(self):
        """Test filling disjoint row bands gives the same grid as a full render."""
        from spherecast.camera.pinhole import setup_viewport
        from spherecast.core.render import render_image, render_rows
        from spherecast.preview.export import new_pixel_grid
        from spherecast.shading.policies import NormalVisualization

        config = _small_config()
        shader = NormalVisualization()
        viewport = setup_viewport(config)

        grid = new_pixel_grid(viewport.image_width, viewport.image_height)
        render_rows(viewport, shader, grid, range(20, SMALL_HEIGHT))
        render_rows(viewport, shader, grid, range(0, 20))

        assert np.array_equal(grid, render_image(shader, config))

    def test_degenerate_vector_aborts_render(self):
        """Test a shading failure propagates and no grid is returned."""
        from spherecast.core.errors import DegenerateVectorError
        from spherecast.core.render import render_image
        from spherecast.core.vector import Vector3

        class Broken:
            def shade(self, ray):
                return Vector3(0.0, 0.0, 0.0).normalize()

        calls = []
        with pytest.raises(DegenerateVectorError):
            render_image(Broken(), _small_config(), progress=lambda c, t: calls.append(c))
        assert calls == []


class TestTestPattern:
    """Tests for the calibration gradient."""

    def test_shape_and_corners(self):
        """Test dimensions and corner pixel values."""
        from spherecast.core.render import render_test_pattern

        grid = render_test_pattern()

        assert grid.shape == (100, 200, 4)
        assert grid.dtype == np.uint8
        assert tuple(grid[0, 0]) == (0, 255, 51, 255)
        assert tuple(grid[99, 199]) == (253, 2, 51, 255)

    def test_gradients_run_right_and_up(self):
        """Test red grows to the right and green grows upward."""
        from spherecast.core.render import render_test_pattern

        grid = render_test_pattern(50, 40).astype(int)

        assert np.all(np.diff(grid[0, :, 0]) >= 0)
        assert np.all(np.diff(grid[:, 0, 1]) <= 0)
        assert np.all(grid[:, :, 2] == 51)

    def test_rejects_empty(self):
        """Test non-positive dimensions raise ValueError."""
        from spherecast.core.render import render_test_pattern

        with pytest.raises(ValueError, match="positive"):
            render_test_pattern(0, 10)
