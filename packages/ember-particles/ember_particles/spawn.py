"""Particle factories."""
from __future__ import annotations

import math
import random

from ember.color import hsl_to_rgb
from ember.types import Color, Point

from ember_particles.components import Particle
from ember_particles.config import ParticleConfig


def radial(
    x: float,
    y: float,
    rng: random.Random,
    speed: tuple[float, float],
    decay: tuple[float, float],
    size: tuple[float, float],
    color: Color,
) -> Particle:
    """Particle at ``(x, y)`` moving in a uniformly random direction."""
    angle = rng.uniform(0.0, 2.0 * math.pi)
    magnitude = rng.uniform(*speed)
    return Particle(
        x=x,
        y=y,
        vx=math.cos(angle) * magnitude,
        vy=math.sin(angle) * magnitude,
        color=color,
        size=rng.uniform(*size),
        decay=rng.uniform(*decay),
    )


def spawn_sparkler(point: Point, rng: random.Random, config: ParticleConfig) -> Particle:
    """Warm gold-to-white spark at a glyph sample point."""
    color = hsl_to_rgb(
        rng.uniform(*config.sparkler_hue), 1.0, rng.uniform(*config.sparkler_lightness),
    )
    return radial(
        point.x,
        point.y,
        rng,
        config.sparkler_speed,
        config.sparkler_decay,
        config.sparkler_size,
        color,
    )
