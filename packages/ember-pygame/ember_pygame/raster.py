"""Glyph rasterizer backed by pygame.font."""
from __future__ import annotations

import pygame

from ember_glyph import AlphaMask


class PygameRasterizer:
    """Renders text centred on a transparent canvas and reads back its alpha.

    A fresh ``Font`` is opened per call: rasterizing only happens when the
    viewport changes, and a ``Font`` must not outlive ``pygame.font.quit()``.

    Args:
        font_name: Path to a font file, or ``None`` for pygame's default font.
        bold: Render with a heavy weight.
    """

    def __init__(self, font_name: str | None = None, bold: bool = True) -> None:
        self.font_name = font_name
        self.bold = bold

    def __call__(self, text: str, font_size: float, width: int, height: int) -> AlphaMask:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(self.font_name, max(1, round(font_size)))
        font.set_bold(self.bold)
        rendered = font.render(text, True, (255, 255, 255))

        canvas = pygame.Surface((width, height), pygame.SRCALPHA)
        canvas.blit(rendered, rendered.get_rect(center=(width // 2, height // 2)))
        rgba = pygame.image.tobytes(canvas, "RGBA")
        return AlphaMask(width, height, rgba[3::4])
