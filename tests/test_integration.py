"""Integration tests for end-to-end rendering to disk.

This module tests the complete pipeline from shading policy selection through
the written image file. Renders run at low resolution to keep the tests fast.
"""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image as PILImage


def _small_config():
    from spherecast.camera.pinhole import RenderConfig

    return RenderConfig(image_width=48)


class TestRenderToFile:
    """Integration tests for render_to_file."""

    def test_every_named_policy_writes_png(self, tmp_path):
        """Test each policy name renders and writes a readable PNG."""
        from spherecast.core.render import render_to_file

        for name in ("solid", "normal", "sky"):
            filepath = tmp_path / f"{name}.png"
            grid = render_to_file(filepath, name, _small_config())

            assert filepath.exists()
            loaded = PILImage.open(filepath)
            assert loaded.format == "PNG"
            assert loaded.mode == "RGBA"
            assert loaded.size == (48, 27)
            assert np.array_equal(np.array(loaded), grid)

    def test_policy_instance_accepted(self, tmp_path):
        """Test a shader object can be passed instead of a name."""
        from spherecast.core.render import render_image, render_to_file
        from spherecast.shading.policies import GradientSky

        filepath = tmp_path / "sky.png"
        grid = render_to_file(filepath, GradientSky(), _small_config())

        assert np.array_equal(grid, render_image(GradientSky(), _small_config()))

    def test_custom_scene_used_for_named_policy(self, tmp_path):
        """Test the scene argument reaches the named policy."""
        from spherecast.core.render import render_to_file
        from spherecast.scene.intersection import Scene

        grid = render_to_file(tmp_path / "empty.png", "solid", _small_config(), scene=Scene())

        red = np.all(grid == np.array([255, 0, 0, 255], dtype=np.uint8), axis=2)
        assert not red.any()

    def test_unknown_policy_writes_nothing(self, tmp_path):
        """Test an unknown name fails before anything is written."""
        from spherecast.core.render import render_to_file

        filepath = tmp_path / "bad.png"
        with pytest.raises(ValueError, match="Unknown shading policy"):
            render_to_file(filepath, "phong", _small_config())
        assert not filepath.exists()

    def test_shading_failure_writes_nothing(self, tmp_path):
        """Test a degenerate vector abandons the render without a file."""
        from spherecast.core.errors import DegenerateVectorError
        from spherecast.core.render import render_to_file
        from spherecast.core.vector import Vector3

        class Broken:
            def shade(self, ray):
                return Vector3(0.0, 0.0, 0.0).normalize()

        filepath = tmp_path / "broken.png"
        with pytest.raises(DegenerateVectorError):
            render_to_file(filepath, Broken(), _small_config())
        assert not filepath.exists()

    def test_unwritable_path_raises_image_write_error(self, tmp_path):
        """Test a write failure surfaces as ImageWriteError."""
        from spherecast.core.errors import ImageWriteError, SpherecastError
        from spherecast.core.render import render_to_file

        filepath = tmp_path / "no" / "such" / "dir" / "out.png"
        with pytest.raises(ImageWriteError):
            render_to_file(filepath, "sky", _small_config())

        # Both fatal kinds share a base class
        with pytest.raises(SpherecastError):
            render_to_file(filepath, "sky", _small_config())

    def test_write_is_logged(self, tmp_path, caplog):
        """Test a successful write is logged at INFO level."""
        import logging

        from spherecast.core.render import render_to_file

        filepath = tmp_path / "logged.png"
        with caplog.at_level(logging.INFO, logger="spherecast.preview.export"):
            render_to_file(filepath, "sky", _small_config())

        assert any(str(filepath) in record.getMessage() for record in caplog.records)

    def test_renders_are_independent(self, tmp_path):
        """Test rendering twice gives identical images."""
        from spherecast.core.render import render_to_file

        first = render_to_file(tmp_path / "a.png", "normal", _small_config())
        second = render_to_file(tmp_path / "b.png", "normal", _small_config())

        assert np.array_equal(first, second)
