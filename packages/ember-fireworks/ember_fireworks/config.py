"""Firework configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FireworkConfig:
    """Immutable tunables for rockets and their bursts.

    Ranges are ``(low, high)`` bounds for uniform draws. ``target_band``
    is a fraction of viewport height measured from the top.

    Attributes:
        launch_probability: Chance per tick of launching one rocket.
        gravity: Acceleration added to a rising rocket's ``vy`` per tick.
        burst_base: Minimum particles in a burst.
        burst_spread: Burst size is ``burst_base + int(uniform * burst_spread)``.
        max_active: Launches are skipped while this many rockets are alive.
    """

    launch_probability: float = 0.03
    gravity: float = 0.2
    launch_vx: tuple[float, float] = (-2.0, 2.0)
    launch_vy: tuple[float, float] = (-15.0, -12.0)
    target_band: tuple[float, float] = (0.1, 0.5)
    burst_base: int = 80
    burst_spread: int = 50
    burst_speed: tuple[float, float] = (1.0, 7.0)
    burst_decay: tuple[float, float] = (0.01, 0.025)
    burst_size: tuple[float, float] = (1.0, 4.0)
    burst_lightness: float = 0.6
    particle_gravity: float = 0.05
    particle_drag: float = 0.96
    trail_length: float = 3.0
    trail_alpha: float = 0.5
    trail_width: float = 2.0
    trail_lightness: float = 0.5
    max_active: int = 64
