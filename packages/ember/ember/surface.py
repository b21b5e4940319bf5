"""Raster surface protocol, blend modes, and a recording implementation.

Every draw call made by the engine goes through :class:`Surface`. Real
backends rasterize; :class:`RecordingSurface` keeps a bounded log of
commands so headless runs and tests can inspect what a frame drew.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ember.types import Color


class BlendMode(Enum):
    NORMAL = "source-over"
    ADD = "lighter"


@dataclass(frozen=True, slots=True)
class Glow:
    """Soft halo drawn behind filled text."""

    color: Color
    alpha: float
    blur: float


@runtime_checkable
class Surface(Protocol):
    """2D drawing surface used by all systems.

    ``fill_circle`` honours the global alpha and blend mode; the other
    primitives take an explicit alpha and always composite normally.
    """

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: Color, alpha: float = 1.0,
    ) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def stroke_line(
        self,
        x1: float, y1: float, x2: float, y2: float,
        color: Color, alpha: float = 1.0, width: float = 1.0,
    ) -> None: ...

    def fill_text(
        self,
        text: str, x: float, y: float, font_size: float,
        color: Color, alpha: float = 1.0, glow: Glow | None = None,
    ) -> None: ...

    def set_alpha(self, alpha: float) -> None: ...

    def set_blend_mode(self, mode: BlendMode) -> None: ...

    def reset(self) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCommand:
    op: str
    args: tuple[Any, ...]
    alpha: float
    blend: BlendMode


class RecordingSurface:
    """Surface that records draw commands instead of rasterizing.

    ``limit`` bounds how many commands are retained (oldest dropped
    first); ``None`` keeps everything and ``0`` keeps nothing. ``total``
    counts every command regardless of the limit.
    """

    def __init__(self, limit: int | None = None) -> None:
        self.commands: deque[DrawCommand] = deque(maxlen=limit)
        self.total = 0
        self.alpha = 1.0
        self.blend_mode = BlendMode.NORMAL

    def _record(self, op: str, args: tuple[Any, ...], alpha: float) -> None:
        self.total += 1
        if self.commands.maxlen != 0:
            self.commands.append(DrawCommand(op, args, alpha, self.blend_mode))

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        self._record("fill_rect", (x, y, w, h, color), alpha)

    def fill_circle(self, x, y, radius, color):
        self._record("fill_circle", (x, y, radius, color), self.alpha)

    def stroke_line(self, x1, y1, x2, y2, color, alpha=1.0, width=1.0):
        self._record("stroke_line", (x1, y1, x2, y2, color, width), alpha)

    def fill_text(self, text, x, y, font_size, color, alpha=1.0, glow=None):
        self._record("fill_text", (text, x, y, font_size, color, glow), alpha)

    def set_alpha(self, alpha: float) -> None:
        self.alpha = alpha

    def set_blend_mode(self, mode: BlendMode) -> None:
        self.blend_mode = mode

    def reset(self) -> None:
        self.alpha = 1.0
        self.blend_mode = BlendMode.NORMAL

    def ops(self, op: str) -> list[DrawCommand]:
        """Return retained commands with the given op name."""
        return [c for c in self.commands if c.op == op]

    def clear(self) -> None:
        self.commands.clear()
        self.total = 0
