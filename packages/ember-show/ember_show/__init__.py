"""ember-show - the glowing-text fireworks show built on the ember engine."""
from __future__ import annotations

from ember_show.config import ShowConfig
from ember_show.session import Show, build_show
from ember_show.systems import make_crackle_system, make_fade_system, make_reset_system

__all__ = [
    "Show",
    "ShowConfig",
    "build_show",
    "make_crackle_system",
    "make_fade_system",
    "make_reset_system",
]
