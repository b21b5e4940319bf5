"""Particle configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParticleConfig:
    """Immutable tunables for sparkler particles.

    Ranges are ``(low, high)`` bounds for uniform draws. Lightness is a
    fraction, hues are degrees.

    Attributes:
        gravity: Downward acceleration added to ``vy`` every tick.
        emission_rate: Sparklers spawned per tick from the glyph point set.
        max_particles: Sparkler pool cap; the oldest are evicted first.
    """

    gravity: float = 0.05
    sparkler_speed: tuple[float, float] = (0.0, 1.5)
    sparkler_decay: tuple[float, float] = (0.02, 0.07)
    sparkler_size: tuple[float, float] = (0.5, 2.5)
    sparkler_hue: tuple[float, float] = (30.0, 60.0)
    sparkler_lightness: tuple[float, float] = (0.5, 1.0)
    emission_rate: int = 200
    max_particles: int = 12_000
