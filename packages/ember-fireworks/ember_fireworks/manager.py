"""FireworkManager - owns the active rockets and drives their lifecycle."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Iterator

from ember.audio import AudioCues
from ember.color import hsl_to_rgb
from ember.surface import BlendMode

from ember_fireworks.components import Firework, FireworkState
from ember_fireworks.config import FireworkConfig
from ember_fireworks.spawn import create_firework, spawn_burst
from ember_fireworks.transitions import find_transition, transition

if TYPE_CHECKING:
    from ember import Surface, TickContext

logger = logging.getLogger("ember.fireworks")

TransitionCallback = Callable[[Firework, FireworkState, FireworkState], None]


class FireworkManager:
    """Launches rockets at random, advances each one, and drops the dead.

    Rockets never interact, so they are processed in any order. The
    explosion cue goes to ``audio`` exactly once per detonation.
    """

    def __init__(
        self,
        config: FireworkConfig | None = None,
        audio: AudioCues | None = None,
        blend: BlendMode = BlendMode.ADD,
    ) -> None:
        self.config = config if config is not None else FireworkConfig()
        self.audio = audio
        self.blend = blend
        self.launched = 0
        self.exploded = 0
        self._fireworks: list[Firework] = []
        self._on_transition: list[TransitionCallback] = []

    def __len__(self) -> int:
        return len(self._fireworks)

    def __iter__(self) -> Iterator[Firework]:
        return iter(self._fireworks)

    def on_transition(self, callback: TransitionCallback) -> None:
        self._on_transition.append(callback)

    def launch(self, fw: Firework) -> bool:
        """Add a rocket to the active set. Returns False when at capacity."""
        if len(self._fireworks) >= self.config.max_active:
            logger.debug("launch skipped, %d rockets active", len(self._fireworks))
            return False
        self._fireworks.append(fw)
        self.launched += 1
        return True

    def maybe_launch(self, rng: random.Random, width: int, height: int) -> Firework | None:
        if rng.random() >= self.config.launch_probability:
            return None
        fw = create_firework(rng, width, height, self.config)
        return fw if self.launch(fw) else None

    def clear(self) -> None:
        self._fireworks.clear()

    def explode(self, fw: Firework, rng: random.Random) -> None:
        """Fill the rocket's pool with a burst and mark it exploded."""
        old = transition(fw, FireworkState.EXPLODED)
        fw.particles.extend(spawn_burst(fw, rng, self.config))
        self.exploded += 1
        self._notify(fw, old, FireworkState.EXPLODED)
        if self.audio is not None:
            self.audio.emit_explosion_cue()

    def update(self, surface: "Surface", ctx: "TickContext") -> None:
        self.maybe_launch(ctx.random, ctx.width, ctx.height)
        for fw in self._fireworks:
            if fw.state is FireworkState.RISING:
                self._rise(fw, surface, ctx.random)
            elif fw.state is FireworkState.EXPLODED:
                self._burn(fw, surface)
        self._fireworks = [fw for fw in self._fireworks if fw.state is not FireworkState.DEAD]

    def _rise(self, fw: Firework, surface: "Surface", rng: random.Random) -> None:
        cfg = self.config
        fw.x += fw.vx
        fw.y += fw.vy
        fw.vy += cfg.gravity

        surface.stroke_line(
            fw.x,
            fw.y,
            fw.x - fw.vx * cfg.trail_length,
            fw.y - fw.vy * cfg.trail_length,
            hsl_to_rgb(fw.hue, 1.0, cfg.trail_lightness),
            cfg.trail_alpha,
            cfg.trail_width,
        )

        if find_transition(fw) is FireworkState.EXPLODED:
            self.explode(fw, rng)

    def _burn(self, fw: Firework, surface: "Surface") -> None:
        fw.particles.advance()
        surface.set_blend_mode(self.blend)
        fw.particles.draw(surface)
        if find_transition(fw) is FireworkState.DEAD:
            old = transition(fw, FireworkState.DEAD)
            self._notify(fw, old, FireworkState.DEAD)

    def _notify(self, fw: Firework, old: FireworkState, target: FireworkState) -> None:
        for cb in self._on_transition:
            cb(fw, old, target)
