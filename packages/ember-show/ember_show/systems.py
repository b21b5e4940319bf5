"""Frame-level systems: trail fade, crackle cue, and draw-state reset."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ember.audio import AudioCues
from ember.types import Color
from ember_glyph import GlyphLayer

if TYPE_CHECKING:
    from ember import Surface, TickContext


def make_fade_system(
    color: Color = (0, 0, 0),
    alpha: float = 0.2,
) -> Callable[["Surface", "TickContext"], None]:
    """Darken the previous frame instead of clearing it, leaving trails."""

    def fade_system(surface: "Surface", ctx: "TickContext") -> None:
        surface.fill_rect(0, 0, ctx.width, ctx.height, color, alpha)

    return fade_system


def make_crackle_system(
    layer: GlyphLayer,
    audio: AudioCues,
) -> Callable[["Surface", "TickContext"], None]:
    """Offer one crackling cue per tick while there is a glyph to burn."""

    def crackle_system(surface: "Surface", ctx: "TickContext") -> None:
        if layer.points:
            audio.emit_crackling_cue()

    return crackle_system


def make_reset_system() -> Callable[["Surface", "TickContext"], None]:
    """Restore default alpha and blend mode at the end of a tick."""

    def reset_system(surface: "Surface", ctx: "TickContext") -> None:
        surface.reset()

    return reset_system
