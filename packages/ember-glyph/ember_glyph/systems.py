"""System factory for the glyph glow backdrop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ember.surface import Glow

from ember_glyph.config import GlyphConfig
from ember_glyph.layer import GlyphLayer

if TYPE_CHECKING:
    from ember import Surface, TickContext


def make_glow_system(
    layer: GlyphLayer,
    config: GlyphConfig | None = None,
) -> Callable[["Surface", "TickContext"], None]:
    """Draw the text faintly with a soft halo, centred in the viewport."""
    cfg = config if config is not None else GlyphConfig()
    glow = Glow(cfg.glow_color, cfg.glow_alpha, cfg.glow_blur)

    def glow_system(surface: "Surface", ctx: "TickContext") -> None:
        if ctx.width <= 0 or ctx.height <= 0:
            return
        surface.fill_text(
            layer.text,
            ctx.width / 2,
            ctx.height / 2,
            layer.sampler.font_size(ctx.width),
            cfg.fill_color,
            cfg.fill_alpha,
            glow,
        )

    return glow_system
