"""Pytest configuration for renderer tests.

This module provides shared fixtures for all test modules. The full-size
gradient render is session scoped because a 400x225 image takes a few
seconds to shade in pure Python.
"""

import pytest


@pytest.fixture
def scene():
    """The single-sphere scene used by every render."""
    from spherecast.scene.intersection import default_scene

    return default_scene()


@pytest.fixture
def viewport():
    """Viewport for the default 400x225 render."""
    from spherecast.camera.pinhole import setup_viewport

    return setup_viewport()


@pytest.fixture
def sample_vectors():
    """A spread of non-degenerate vectors for algebraic property checks."""
    from spherecast.core.vector import Vector3

    return [
        Vector3(1.0, 2.0, 3.0),
        Vector3(-4.5, 0.25, 7.0),
        Vector3(0.0, -1.0, 0.0),
        Vector3(1e-3, 2e-3, -5e-3),
        Vector3(123.0, -456.0, 789.0),
        Vector3(0.1, 0.2, 0.3),
    ]


@pytest.fixture(scope="session")
def sky_render():
    """Full-size 16:9 render with the gradient sky policy."""
    from spherecast.core.render import render_image
    from spherecast.shading.policies import GradientSky

    return render_image(GradientSky())
