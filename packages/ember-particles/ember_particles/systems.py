"""System factories for sparkler emission and particle updates."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from ember.surface import BlendMode
from ember.types import Point

from ember_particles.config import ParticleConfig
from ember_particles.field import ParticleField
from ember_particles.spawn import spawn_sparkler

if TYPE_CHECKING:
    from ember import Surface, TickContext


def make_emission_system(
    field: ParticleField,
    points: Callable[[], Sequence[Point]],
    config: ParticleConfig | None = None,
) -> Callable[["Surface", "TickContext"], None]:
    """Spawn ``emission_rate`` sparklers per tick at random glyph points.

    Points are drawn with replacement. An empty point set emits nothing.
    """
    cfg = config if config is not None else ParticleConfig()

    def emission_system(surface: "Surface", ctx: "TickContext") -> None:
        pts = points()
        if not pts:
            return
        rng = ctx.random
        field.extend(
            spawn_sparkler(rng.choice(pts), rng, cfg) for _ in range(cfg.emission_rate)
        )

    return emission_system


def make_particle_system(
    field: ParticleField,
    blend: BlendMode = BlendMode.ADD,
) -> Callable[["Surface", "TickContext"], None]:
    """Advance, cull, and draw a particle pool with the given blend mode."""

    def particle_system(surface: "Surface", ctx: "TickContext") -> None:
        field.advance()
        surface.set_blend_mode(blend)
        field.draw(surface)

    return particle_system
