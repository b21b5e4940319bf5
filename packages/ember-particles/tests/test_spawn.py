"""Tests for sparkler spawn distributions."""
from __future__ import annotations

import colorsys
import math
import random

from ember.types import Point
from ember_particles import ParticleConfig, spawn_sparkler


def _sparks(n: int = 2000, seed: int = 42):
    rng = random.Random(seed)
    config = ParticleConfig()
    return [spawn_sparkler(Point(10.0, 20.0), rng, config) for _ in range(n)]


def test_spawns_at_point_with_full_life():
    for p in _sparks(50):
        assert (p.x, p.y) == (10.0, 20.0)
        assert p.life == 1.0
        assert p.max_life == 1.0


def test_speed_decay_and_size_ranges():
    for p in _sparks():
        assert math.hypot(p.vx, p.vy) <= 1.5 + 1e-9
        assert 0.02 <= p.decay <= 0.07
        assert 0.5 <= p.size <= 2.5


def test_colors_are_warm():
    for p in _sparks(500):
        r, g, b = (c / 255 for c in p.color)
        h, l, s = colorsys.rgb_to_hls(r, g, b)
        assert l >= 0.49
        if s > 0.05 and l < 0.9:
            # 8-bit rounding moves the hue a little
            assert 29.0 <= h * 360 <= 61.0


def test_directions_cover_full_circle():
    angles = [math.atan2(p.vy, p.vx) for p in _sparks() if math.hypot(p.vx, p.vy) > 0.1]
    assert min(angles) < -2.5
    assert max(angles) > 2.5


def test_same_seed_same_particles():
    assert _sparks(100, seed=9) == _sparks(100, seed=9)
