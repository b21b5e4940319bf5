"""Transition table for the firework lifecycle.

Each state maps to ``(guard, target)`` pairs checked in order; the first
guard that holds wins. States only move forward.
"""
from __future__ import annotations

from typing import Callable

from ember.types import TransitionError

from ember_fireworks.components import Firework, FireworkState

Guard = Callable[[Firework], bool]

# Float drift from summing gravity tick by tick must not delay the apex.
APEX_EPSILON = 1e-9


def reached_apex(fw: Firework) -> bool:
    return fw.vy >= -APEX_EPSILON


def reached_target(fw: Firework) -> bool:
    return fw.y <= fw.target_y


def burnt_out(fw: Firework) -> bool:
    return not fw.particles


TRANSITIONS: dict[FireworkState, list[tuple[Guard, FireworkState]]] = {
    FireworkState.RISING: [
        (reached_apex, FireworkState.EXPLODED),
        (reached_target, FireworkState.EXPLODED),
    ],
    FireworkState.EXPLODED: [
        (burnt_out, FireworkState.DEAD),
    ],
    FireworkState.DEAD: [],
}

_SUCCESSOR = {
    FireworkState.RISING: FireworkState.EXPLODED,
    FireworkState.EXPLODED: FireworkState.DEAD,
}


def find_transition(fw: Firework) -> FireworkState | None:
    """Return the target of the first passing guard, or None."""
    for guard, target in TRANSITIONS[fw.state]:
        if guard(fw):
            return target
    return None


def transition(fw: Firework, target: FireworkState) -> FireworkState:
    """Move ``fw`` to ``target`` and return the previous state.

    Raises TransitionError unless ``target`` is the direct successor of
    the current state.
    """
    old = fw.state
    if _SUCCESSOR.get(old) is not target:
        raise TransitionError(f"Cannot move firework from {old.value} to {target.value}")
    fw.state = target
    return old
