"""ParticleField - a pool of particles sharing one update policy."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ember.surface import Surface

from ember_particles.components import Particle, Physics

logger = logging.getLogger("ember.particles")


class ParticleField:
    """Owns a dynamically sized, unordered collection of particles.

    ``advance()`` integrates every particle once and culls those whose
    life dropped to zero or below, so ``draw()`` only ever sees live
    particles. ``max_size`` is a safety valve: when exceeded, the oldest
    particles are evicted.
    """

    def __init__(
        self,
        physics: Physics,
        gravity: float = 0.05,
        drag: float = 0.96,
        max_size: int | None = None,
    ) -> None:
        self.physics = physics
        self.gravity = gravity
        self.drag = drag
        self.max_size = max_size
        self.evicted = 0
        self._particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def __bool__(self) -> bool:
        return bool(self._particles)

    def add(self, particle: Particle) -> None:
        self._particles.append(particle)
        self._enforce_cap()

    def extend(self, particles: Iterable[Particle]) -> None:
        self._particles.extend(particles)
        self._enforce_cap()

    def clear(self) -> None:
        self._particles.clear()

    def _enforce_cap(self) -> None:
        if self.max_size is None:
            return
        overflow = len(self._particles) - self.max_size
        if overflow > 0:
            del self._particles[:overflow]
            self.evicted += overflow
            logger.debug("evicted %d particles (cap %d)", overflow, self.max_size)

    def advance(self) -> int:
        """Integrate one tick and cull dead particles. Returns the cull count."""
        gravity = self.gravity
        live: list[Particle] = []
        if self.physics is Physics.EXPLOSION:
            drag = self.drag
            for p in self._particles:
                p.x += p.vx
                p.y += p.vy
                p.vy += gravity
                p.vx *= drag
                p.vy *= drag
                p.life -= p.decay
                if p.life > 0:
                    live.append(p)
        else:
            for p in self._particles:
                p.x += p.vx
                p.y += p.vy
                p.vy += gravity
                p.life -= p.decay
                if p.life > 0:
                    live.append(p)
        culled = len(self._particles) - len(live)
        self._particles = live
        return culled

    def draw(self, surface: Surface) -> None:
        """Draw each particle as a disc whose opacity is its life."""
        for p in self._particles:
            surface.set_alpha(min(1.0, p.life))
            surface.fill_circle(p.x, p.y, p.size, p.color)
        surface.set_alpha(1.0)
