"""Firework entity and lifecycle states."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ember_particles import ParticleField, Physics


class FireworkState(Enum):
    RISING = "rising"
    EXPLODED = "exploded"
    DEAD = "dead"


@dataclass
class Firework:
    """Rocket that rises, bursts into its own particle pool, then dies.

    ``particles`` stays empty while rising and is filled exactly once when
    the rocket explodes.
    """

    x: float
    y: float
    target_y: float
    vx: float
    vy: float
    hue: float
    state: FireworkState = FireworkState.RISING
    particles: ParticleField = field(
        default_factory=lambda: ParticleField(Physics.EXPLOSION)
    )
