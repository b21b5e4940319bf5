"""ember-pygame - pygame backends for drawing, glyph rasterization, and sound."""
from __future__ import annotations

from ember_pygame.mixer import MixerAudio
from ember_pygame.raster import PygameRasterizer
from ember_pygame.surface import PygameSurface

__all__ = [
    "MixerAudio",
    "PygameRasterizer",
    "PygameSurface",
]
