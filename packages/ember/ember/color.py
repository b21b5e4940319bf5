"""HSL helpers producing 8-bit RGB tuples."""

from __future__ import annotations

import colorsys

from ember.types import Color


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """Convert HSL to RGB.

    ``hue`` is in degrees and wraps; ``saturation`` and ``lightness`` are
    fractions in ``[0, 1]`` and are clamped.
    """
    s = min(1.0, max(0.0, saturation))
    l = min(1.0, max(0.0, lightness))
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, l, s)
    return (round(r * 255), round(g * 255), round(b * 255))


def scale(color: Color, factor: float) -> Color:
    """Multiply each channel by ``factor`` (clamped to 0..1)."""
    f = min(1.0, max(0.0, factor))
    return (int(color[0] * f), int(color[1] * f), int(color[2] * f))
