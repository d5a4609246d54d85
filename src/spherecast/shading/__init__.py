"""Shading module for ray-to-color policies.

Components:
    policies: Shader capability with SolidHit, NormalVisualization and
        GradientSky variants, plus the name-based selector make_shader

The render driver accepts any object implementing ``shade(ray) -> Color``.
"""

from .policies import (
    SKY_BOTTOM_COLOR,
    SKY_TOP_COLOR,
    SOLID_HIT_COLOR,
    GradientSky,
    NormalVisualization,
    Shader,
    ShaderName,
    SolidHit,
    make_shader,
    sky_color,
)

__all__ = [
    "Shader",
    "ShaderName",
    "SolidHit",
    "NormalVisualization",
    "GradientSky",
    "make_shader",
    "sky_color",
    "SKY_BOTTOM_COLOR",
    "SKY_TOP_COLOR",
    "SOLID_HIT_COLOR",
]
