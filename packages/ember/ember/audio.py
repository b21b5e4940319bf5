"""Audio cue interface and the gate the engine talks to.

The simulation only ever calls :class:`CueGate`. The gate applies the
enable flag, the crackle acceptance draw, and fault isolation before
handing the cue to whatever backend is plugged in.
"""
from __future__ import annotations

import logging
import random as _random_mod
from typing import Protocol, runtime_checkable

logger = logging.getLogger("ember.audio")


@runtime_checkable
class AudioCues(Protocol):
    """Backend that turns cues into sound."""

    def emit_explosion_cue(self) -> None: ...

    def emit_crackling_cue(self) -> None: ...


class SilentAudio:
    """Backend that accepts every cue and produces nothing."""

    def emit_explosion_cue(self) -> None:
        pass

    def emit_crackling_cue(self) -> None:
        pass


class CueGate:
    """Front for an optional audio backend.

    Args:
        backend: Backend receiving accepted cues, or ``None`` for silence.
        enabled: Initial state of the host's audio toggle.
        crackle_probability: Chance that a crackling cue is forwarded.
        seed: Seed for the gate's own RNG. Kept separate from the engine's
            random stream so audio never perturbs the simulation.
    """

    def __init__(
        self,
        backend: AudioCues | None = None,
        enabled: bool = True,
        crackle_probability: float = 0.15,
        seed: int | None = None,
    ) -> None:
        self.backend = backend
        self.enabled = enabled
        self.crackle_probability = crackle_probability
        self._rng = _random_mod.Random(seed)
        self.explosions = 0
        self.crackles = 0
        self.faults = 0

    @property
    def active(self) -> bool:
        return self.enabled and self.backend is not None

    def emit_explosion_cue(self) -> None:
        if not self.active:
            return
        if self._forward("emit_explosion_cue"):
            self.explosions += 1

    def emit_crackling_cue(self) -> None:
        if not self.active:
            return
        if self._rng.random() > self.crackle_probability:
            return
        if self._forward("emit_crackling_cue"):
            self.crackles += 1

    def _forward(self, name: str) -> bool:
        try:
            getattr(self.backend, name)()
        except Exception:
            self.faults += 1
            logger.warning("audio backend failed in %s", name, exc_info=True)
            return False
        return True
