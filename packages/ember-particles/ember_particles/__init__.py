"""ember-particles - particle pools and sparkler emission for the ember engine."""
from __future__ import annotations

from ember_particles.components import Particle, Physics
from ember_particles.config import ParticleConfig
from ember_particles.field import ParticleField
from ember_particles.spawn import radial, spawn_sparkler
from ember_particles.systems import make_emission_system, make_particle_system

__all__ = [
    "Particle",
    "ParticleConfig",
    "ParticleField",
    "Physics",
    "make_emission_system",
    "make_particle_system",
    "radial",
    "spawn_sparkler",
]
