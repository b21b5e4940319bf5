"""Glyph configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from ember.types import Color


@dataclass(frozen=True)
class GlyphConfig:
    """Immutable settings for glyph sampling and its glow backdrop.

    Attributes:
        text: String rendered and sampled.
        font_scale: Font size as a fraction of viewport width.
        max_font_size: Upper bound on the font size in pixels.
        stride: Sample every ``stride``-th pixel on both axes.
        threshold: Pixels with alpha strictly above this are covered.
    """

    text: str = "2026"
    font_scale: float = 0.25
    max_font_size: float = 300.0
    stride: int = 4
    threshold: int = 128
    fill_color: Color = (255, 200, 100)
    fill_alpha: float = 0.05
    glow_color: Color = (255, 160, 0)
    glow_alpha: float = 0.5
    glow_blur: float = 20.0
