"""Tests for PygameSurface."""
from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from ember import BlendMode, Glow, Surface  # noqa: E402
from ember_pygame import PygameSurface  # noqa: E402


@pytest.fixture(autouse=True, scope="module")
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def target():
    surf = pygame.Surface((64, 64))
    surf.fill((0, 0, 0))
    return surf


def _rgb(surf, x, y):
    return tuple(surf.get_at((x, y)))[:3]


def test_satisfies_protocol(target):
    assert isinstance(PygameSurface(target), Surface)


class TestFillRect:
    def test_opaque(self, target):
        PygameSurface(target).fill_rect(0, 0, 64, 64, (10, 20, 30))
        assert _rgb(target, 5, 5) == (10, 20, 30)

    def test_translucent_fade(self, target):
        target.fill((255, 255, 255))
        PygameSurface(target).fill_rect(0, 0, 64, 64, (0, 0, 0), 0.2)
        r, g, b = _rgb(target, 32, 32)
        assert abs(r - 204) <= 2


class TestFillCircle:
    def test_additive_accumulates(self, target):
        s = PygameSurface(target)
        s.set_blend_mode(BlendMode.ADD)
        s.fill_circle(32, 32, 3, (100, 50, 0))
        assert _rgb(target, 32, 32) == (100, 50, 0)
        s.fill_circle(32, 32, 3, (100, 50, 0))
        assert _rgb(target, 32, 32) == (200, 100, 0)

    def test_additive_saturates(self, target):
        s = PygameSurface(target)
        s.set_blend_mode(BlendMode.ADD)
        for _ in range(4):
            s.fill_circle(32, 32, 3, (100, 100, 100))
        assert _rgb(target, 32, 32) == (255, 255, 255)

    def test_global_alpha_scales_additive(self, target):
        s = PygameSurface(target)
        s.set_blend_mode(BlendMode.ADD)
        s.set_alpha(0.5)
        s.fill_circle(32, 32, 3, (200, 100, 0))
        assert _rgb(target, 32, 32) == (100, 50, 0)

    def test_normal_blend(self, target):
        s = PygameSurface(target)
        s.fill_circle(32, 32, 3, (200, 100, 50))
        assert _rgb(target, 32, 32) == (200, 100, 50)

    def test_untouched_outside_disc(self, target):
        s = PygameSurface(target)
        s.set_blend_mode(BlendMode.ADD)
        s.fill_circle(32, 32, 2, (255, 255, 255))
        assert _rgb(target, 5, 5) == (0, 0, 0)


def test_stroke_line_draws(target):
    PygameSurface(target).stroke_line(10, 32, 50, 32, (255, 0, 0), 1.0, 2)
    assert _rgb(target, 30, 32)[0] > 200


def test_fill_text_with_glow(target):
    PygameSurface(target).fill_text(
        "8", 32, 32, 40, (255, 200, 100), 1.0, Glow((255, 160, 0), 0.5, 6),
    )
    lit = [_rgb(target, x, y) for x in range(64) for y in range(64)]
    assert any(px != (0, 0, 0) for px in lit)


def test_reset(target):
    s = PygameSurface(target)
    s.set_alpha(0.1)
    s.set_blend_mode(BlendMode.ADD)
    s.reset()
    assert s.alpha == 1.0
    assert s.blend_mode is BlendMode.NORMAL


def test_fill_text_survives_font_reinit(target):
    s = PygameSurface(target)
    s.fill_text("7", 32, 32, 40, (255, 255, 255), 1.0, None)
    pygame.font.quit()
    pygame.font.init()
    target.fill((0, 0, 0))
    s.fill_text("7", 32, 32, 41, (255, 255, 255), 1.0, None)
    lit = [_rgb(target, x, y) for x in range(64) for y in range(64)]
    assert any(px != (0, 0, 0) for px in lit)
