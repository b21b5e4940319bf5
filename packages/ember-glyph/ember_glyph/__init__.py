"""ember-glyph - text sampling and glow for the ember engine."""
from __future__ import annotations

from ember_glyph.config import GlyphConfig
from ember_glyph.layer import GlyphLayer
from ember_glyph.mask import AlphaMask, Rasterizer
from ember_glyph.sampler import GlyphSampler, font_size_for
from ember_glyph.systems import make_glow_system

__all__ = [
    "AlphaMask",
    "GlyphConfig",
    "GlyphLayer",
    "GlyphSampler",
    "Rasterizer",
    "font_size_for",
    "make_glow_system",
]
