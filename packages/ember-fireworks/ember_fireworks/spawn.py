"""Rocket and burst factories."""
from __future__ import annotations

import random

from ember.color import hsl_to_rgb
from ember_particles import Particle, ParticleField, Physics, radial

from ember_fireworks.components import Firework
from ember_fireworks.config import FireworkConfig


def create_firework(
    rng: random.Random, width: int, height: int, config: FireworkConfig,
) -> Firework:
    """Rocket launched from a random x on the bottom edge."""
    low, high = config.target_band
    return Firework(
        x=rng.random() * width,
        y=float(height),
        target_y=rng.uniform(low * height, high * height),
        vx=rng.uniform(*config.launch_vx),
        vy=rng.uniform(*config.launch_vy),
        hue=rng.random() * 360.0,
        particles=ParticleField(
            Physics.EXPLOSION,
            gravity=config.particle_gravity,
            drag=config.particle_drag,
        ),
    )


def spawn_burst(fw: Firework, rng: random.Random, config: FireworkConfig) -> list[Particle]:
    """Radial burst of ``burst_base`` to ``burst_base + burst_spread - 1`` particles."""
    count = config.burst_base + int(rng.random() * config.burst_spread)
    color = hsl_to_rgb(fw.hue, 1.0, config.burst_lightness)
    return [
        radial(
            fw.x,
            fw.y,
            rng,
            config.burst_speed,
            config.burst_decay,
            config.burst_size,
            color,
        )
        for _ in range(count)
    ]
