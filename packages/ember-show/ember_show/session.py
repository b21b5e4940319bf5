"""Show session - one engine wired with every system of a frame."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ember import CueGate, Engine, Surface
from ember.audio import AudioCues
from ember_fireworks import FireworkManager, make_firework_system
from ember_glyph import GlyphLayer, GlyphSampler, Rasterizer, make_glow_system
from ember_particles import ParticleField, Physics, make_emission_system, make_particle_system

from ember_show.config import ShowConfig
from ember_show.systems import make_crackle_system, make_fade_system, make_reset_system

logger = logging.getLogger("ember.show")


@dataclass
class Show:
    """Everything a running show owns. Built by :func:`build_show`."""

    engine: Engine
    glyph: GlyphLayer
    sparklers: ParticleField
    fireworks: FireworkManager
    audio: CueGate
    config: ShowConfig

    @property
    def audio_enabled(self) -> bool:
        return self.audio.enabled

    @audio_enabled.setter
    def audio_enabled(self, value: bool) -> None:
        self.audio.enabled = value

    def tick(self) -> None:
        self.engine.step()

    def run(self, n: int) -> None:
        self.engine.run(n)

    def resize(self, width: int, height: int) -> None:
        self.engine.resize(width, height)

    def stop(self) -> None:
        self.engine.stop()

    def reset(self) -> None:
        self.sparklers.clear()
        self.fireworks.clear()


def build_show(
    surface: Surface,
    rasterizer: Rasterizer,
    width: int,
    height: int,
    audio: AudioCues | None = None,
    config: ShowConfig | None = None,
    seed: int | None = None,
    audio_enabled: bool = False,
) -> Show:
    """Wire up a complete show and return it, ready to tick."""
    cfg = config if config is not None else ShowConfig()
    engine = Engine(surface, width, height, tps=cfg.tps, seed=seed)

    gate = CueGate(
        audio,
        enabled=audio_enabled,
        crackle_probability=cfg.crackle_probability,
        seed=engine.seed,
    )

    g = cfg.glyph
    sampler = GlyphSampler(
        rasterizer,
        stride=g.stride,
        threshold=g.threshold,
        font_scale=g.font_scale,
        max_font_size=g.max_font_size,
    )
    glyph = GlyphLayer(sampler, g.text)
    glyph.resample(width, height)

    p = cfg.particles
    sparklers = ParticleField(
        Physics.SPARKLER, gravity=p.gravity, max_size=p.max_particles,
    )
    fireworks = FireworkManager(cfg.fireworks, audio=gate)

    show = Show(
        engine=engine,
        glyph=glyph,
        sparklers=sparklers,
        fireworks=fireworks,
        audio=gate,
        config=cfg,
    )

    def on_resize(w: int, h: int) -> None:
        glyph.resample(w, h)
        if cfg.reset_on_resize:
            show.reset()

    engine.on_resize(on_resize)

    # Systems (order matters!)
    engine.add_system(make_fade_system(cfg.fade_color, cfg.fade_alpha))  # 1
    engine.add_system(make_glow_system(glyph, g))                         # 2
    engine.add_system(make_emission_system(sparklers, lambda: glyph.points, p))  # 3
    engine.add_system(make_crackle_system(glyph, gate))                   # 4
    engine.add_system(make_particle_system(sparklers))                    # 5
    engine.add_system(make_firework_system(fireworks))                    # 6
    engine.add_system(make_reset_system())                                # 7

    logger.debug("show built: %dx%d, seed=%d", width, height, engine.seed)
    return show
