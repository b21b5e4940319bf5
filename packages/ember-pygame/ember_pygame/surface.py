"""PygameSurface - the Surface protocol drawn onto a pygame.Surface.

Additive blending uses ``BLEND_RGB_ADD`` with discs pre-multiplied by
their alpha, which is what "lighter" compositing does on black. Sprites,
overlays, and rendered text are cached since a frame draws thousands of
near-identical discs.
"""
from __future__ import annotations

from functools import lru_cache

import pygame

from ember.color import scale
from ember.surface import BlendMode, Glow
from ember.types import Color


def _alpha8(alpha: float) -> int:
    return max(0, min(255, round(alpha * 255)))


@lru_cache(maxsize=4096)
def _additive_disc(radius: int, color: Color) -> pygame.Surface:
    sprite = pygame.Surface((radius * 2, radius * 2))
    sprite.fill((0, 0, 0))
    pygame.draw.circle(sprite, color, (radius, radius), radius)
    return sprite


@lru_cache(maxsize=1024)
def _alpha_disc(radius: int, color: Color, alpha: int) -> pygame.Surface:
    sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(sprite, (*color, alpha), (radius, radius), radius)
    return sprite


@lru_cache(maxsize=8)
def _overlay(size: tuple[int, int], color: Color, alpha: int) -> pygame.Surface:
    overlay = pygame.Surface(size)
    overlay.fill(color)
    overlay.set_alpha(alpha)
    return overlay


def _blur(source: pygame.Surface, radius: float) -> pygame.Surface:
    """Cheap blur: pad, shrink, and scale back up with smoothscale."""
    pad = int(radius)
    w, h = source.get_size()
    padded = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
    padded.blit(source, (pad, pad))
    if radius < 2:
        return padded
    factor = radius / 2
    size = padded.get_size()
    small = pygame.transform.smoothscale(
        padded, (max(1, int(size[0] / factor)), max(1, int(size[1] / factor))),
    )
    return pygame.transform.smoothscale(small, size)


@lru_cache(maxsize=8)
def _text(
    text: str, size: int, color: Color, alpha: int, glow: Glow | None,
) -> pygame.Surface:
    # Font objects are never cached; only the rendered surfaces outlive the call
    font = pygame.font.Font(None, size)
    font.set_bold(True)
    body = font.render(text, True, color)
    body.set_alpha(alpha)
    if glow is None:
        return body

    halo = _blur(font.render(text, True, glow.color), glow.blur)
    halo.set_alpha(_alpha8(glow.alpha))
    out = pygame.Surface(halo.get_size(), pygame.SRCALPHA)
    out.blit(halo, (0, 0))
    out.blit(body, body.get_rect(center=out.get_rect().center))
    return out


class PygameSurface:
    """Draws onto ``target``, usually the display surface."""

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self.alpha = 1.0
        self.blend_mode = BlendMode.NORMAL

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        if alpha >= 1.0:
            self.target.fill(color, rect)
        elif alpha > 0.0:
            self.target.blit(_overlay(rect.size, tuple(color), _alpha8(alpha)), rect)

    def fill_circle(self, x, y, radius, color):
        r = max(1, round(radius))
        pos = (int(x) - r, int(y) - r)
        if self.blend_mode is BlendMode.ADD:
            premultiplied = scale(color, min(1.0, self.alpha))
            if premultiplied != (0, 0, 0):
                self.target.blit(
                    _additive_disc(r, premultiplied), pos,
                    special_flags=pygame.BLEND_RGB_ADD,
                )
        else:
            self.target.blit(_alpha_disc(r, tuple(color), _alpha8(self.alpha)), pos)

    def stroke_line(self, x1, y1, x2, y2, color, alpha=1.0, width=1.0):
        w = max(1, round(width))
        left, top = int(min(x1, x2)) - w, int(min(y1, y2)) - w
        size = (int(abs(x2 - x1)) + w * 2 + 2, int(abs(y2 - y1)) + w * 2 + 2)
        stroke = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.line(
            stroke, (*color, _alpha8(alpha)),
            (x1 - left, y1 - top), (x2 - left, y2 - top), w,
        )
        self.target.blit(stroke, (left, top))

    def fill_text(self, text, x, y, font_size, color, alpha=1.0, glow=None):
        if not text:
            return
        if not pygame.font.get_init():
            pygame.font.init()
        rendered = _text(text, max(1, round(font_size)), tuple(color), _alpha8(alpha), glow)
        self.target.blit(rendered, rendered.get_rect(center=(int(x), int(y))))

    def set_alpha(self, alpha: float) -> None:
        self.alpha = alpha

    def set_blend_mode(self, mode: BlendMode) -> None:
        self.blend_mode = mode

    def reset(self) -> None:
        self.alpha = 1.0
        self.blend_mode = BlendMode.NORMAL
