"""ember-fireworks - rocket lifecycle and bursts for the ember engine."""
from __future__ import annotations

from ember_fireworks.components import Firework, FireworkState
from ember_fireworks.config import FireworkConfig
from ember_fireworks.manager import FireworkManager
from ember_fireworks.spawn import create_firework, spawn_burst
from ember_fireworks.systems import make_firework_system
from ember_fireworks.transitions import TRANSITIONS, find_transition, transition

__all__ = [
    "Firework",
    "FireworkConfig",
    "FireworkManager",
    "FireworkState",
    "TRANSITIONS",
    "create_firework",
    "find_transition",
    "make_firework_system",
    "spawn_burst",
    "transition",
]
