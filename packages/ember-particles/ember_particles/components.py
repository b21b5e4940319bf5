"""Particle data type and physics flavours."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from ember.types import Color


class Physics(Enum):
    """Update policy a pool applies to all of its particles.

    Both flavours integrate position and decay life. ``SPARKLER`` adds
    gravity only; ``EXPLOSION`` adds gravity and then multiplicative drag.
    """

    SPARKLER = auto()
    EXPLOSION = auto()


@dataclass(slots=True)
class Particle:
    """Point mass with a finite life. ``size`` and ``color`` never change."""

    x: float
    y: float
    vx: float
    vy: float
    color: Color
    size: float
    decay: float
    life: float = 1.0
    max_life: float = 1.0
