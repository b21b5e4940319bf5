"""Alpha masks and the rasterizer protocol that produces them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class AlphaMask:
    """Row-major 8-bit coverage of a rendered glyph, one byte per pixel."""

    width: int
    height: int
    alpha: bytes

    def __post_init__(self) -> None:
        if len(self.alpha) != self.width * self.height:
            raise ValueError(
                f"Mask data has {len(self.alpha)} bytes, expected {self.width * self.height}"
            )

    @classmethod
    def empty(cls, width: int, height: int) -> "AlphaMask":
        return cls(width, height, bytes(width * height))

    def at(self, x: int, y: int) -> int:
        return self.alpha[y * self.width + x]


@runtime_checkable
class Rasterizer(Protocol):
    """Renders ``text`` filled in one flat colour, centred in a canvas."""

    def __call__(self, text: str, font_size: float, width: int, height: int) -> AlphaMask: ...
