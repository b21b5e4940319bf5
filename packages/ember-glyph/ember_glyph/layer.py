"""GlyphLayer - the glyph point set for the current viewport."""
from __future__ import annotations

import logging

from ember.types import Point

from ember_glyph.sampler import GlyphSampler

logger = logging.getLogger("ember.glyph")


class GlyphLayer:
    """Caches the sampled points of ``text`` until the viewport changes."""

    def __init__(self, sampler: GlyphSampler, text: str) -> None:
        self.sampler = sampler
        self.text = text
        self._viewport = (0, 0)
        self._points: tuple[Point, ...] = ()

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def viewport(self) -> tuple[int, int]:
        return self._viewport

    @property
    def font_size(self) -> float:
        return self.sampler.font_size(self._viewport[0])

    def resample(self, width: int, height: int) -> tuple[Point, ...]:
        self._viewport = (width, height)
        self._points = self.sampler.sample(self.text, width, height)
        logger.info(
            "sampled %d glyph points for %r at %dx%d",
            len(self._points), self.text, width, height,
        )
        return self._points
