"""System factory for the firework manager."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ember_fireworks.manager import FireworkManager

if TYPE_CHECKING:
    from ember import Surface, TickContext


def make_firework_system(
    manager: FireworkManager,
) -> Callable[["Surface", "TickContext"], None]:
    """Return a system that launches, advances, draws, and culls rockets."""

    def firework_system(surface: "Surface", ctx: "TickContext") -> None:
        manager.update(surface, ctx)

    return firework_system
