"""Show configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from ember.types import Color
from ember_fireworks import FireworkConfig
from ember_glyph import GlyphConfig
from ember_particles import ParticleConfig


@dataclass(frozen=True)
class ShowConfig:
    """Immutable settings for a whole show.

    Attributes:
        tps: Ticks per second; one tick per displayed frame.
        fade_color: Colour composited over the previous frame each tick.
        fade_alpha: Opacity of that fade; lower values leave longer trails.
        reset_on_resize: Drop all particles and rockets when the viewport changes.
    """

    tps: int = 60
    fade_color: Color = (0, 0, 0)
    fade_alpha: float = 0.2
    reset_on_resize: bool = True
    crackle_probability: float = 0.15
    glyph: GlyphConfig = field(default_factory=GlyphConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    fireworks: FireworkConfig = field(default_factory=FireworkConfig)
