"""Shared types, aliases, and errors for the ember engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable 2D sample location in viewport pixels."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    width: int
    height: int
    request_stop: Callable[[], None]
    random: _random.Random


class EmberError(Exception):
    """Base class for engine errors."""


class ViewportError(EmberError, ValueError):
    """Raised when a viewport is given negative dimensions."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid viewport size {width}x{height}")


class TransitionError(EmberError):
    """Raised on a state change that is not allowed by a transition table."""


if TYPE_CHECKING:
    from ember.surface import Surface

System = Callable[["Surface", TickContext], None]
