"""GlyphSampler - turns rendered text into a sparse set of points."""
from __future__ import annotations

from ember.types import Point

from ember_glyph.mask import AlphaMask, Rasterizer


def font_size_for(width: int, scale: float = 0.25, maximum: float = 300.0) -> float:
    return min(width * scale, maximum)


class GlyphSampler:
    """Samples the covered pixels of a rendered string on a fixed grid.

    Sampling is deterministic for a given rasterizer, text, and viewport.
    A zero-area viewport or a blank render yields an empty tuple.
    """

    def __init__(
        self,
        rasterizer: Rasterizer,
        stride: int = 4,
        threshold: int = 128,
        font_scale: float = 0.25,
        max_font_size: float = 300.0,
    ) -> None:
        if stride <= 0:
            raise ValueError("stride must be positive")
        self.rasterizer = rasterizer
        self.stride = stride
        self.threshold = threshold
        self.font_scale = font_scale
        self.max_font_size = max_font_size

    def font_size(self, width: int) -> float:
        return font_size_for(width, self.font_scale, self.max_font_size)

    def sample(self, text: str, width: int, height: int) -> tuple[Point, ...]:
        if width <= 0 or height <= 0 or not text:
            return ()
        mask = self.rasterizer(text, self.font_size(width), width, height)
        return self.scan(mask)

    def scan(self, mask: AlphaMask) -> tuple[Point, ...]:
        stride = self.stride
        threshold = self.threshold
        alpha = mask.alpha
        points: list[Point] = []
        for y in range(0, mask.height, stride):
            row = y * mask.width
            for x in range(0, mask.width, stride):
                if alpha[row + x] > threshold:
                    points.append(Point(float(x), float(y)))
        return tuple(points)
