"""Tests for the recording surface."""

from ember.surface import BlendMode, Glow, RecordingSurface, Surface


def test_recording_surface_satisfies_protocol():
    assert isinstance(RecordingSurface(), Surface)


def test_circle_records_global_alpha_and_blend():
    surface = RecordingSurface()
    surface.set_alpha(0.25)
    surface.set_blend_mode(BlendMode.ADD)
    surface.fill_circle(10.0, 20.0, 2.0, (255, 200, 0))

    (cmd,) = surface.ops("fill_circle")
    assert cmd.args == (10.0, 20.0, 2.0, (255, 200, 0))
    assert cmd.alpha == 0.25
    assert cmd.blend is BlendMode.ADD


def test_explicit_alpha_primitives_ignore_global_alpha():
    surface = RecordingSurface()
    surface.set_alpha(0.1)
    surface.fill_rect(0, 0, 10, 10, (0, 0, 0), 0.2)
    surface.stroke_line(0, 0, 5, 5, (255, 0, 0), 0.5, 2)

    assert [c.alpha for c in surface.commands] == [0.2, 0.5]


def test_text_records_glow():
    surface = RecordingSurface()
    glow = Glow((255, 160, 0), 0.5, 20.0)
    surface.fill_text("2026", 400, 300, 200, (255, 200, 100), 0.05, glow)

    (cmd,) = surface.ops("fill_text")
    assert cmd.args[0] == "2026"
    assert cmd.args[-1] == glow


def test_reset_restores_defaults():
    surface = RecordingSurface()
    surface.set_alpha(0.3)
    surface.set_blend_mode(BlendMode.ADD)
    surface.reset()
    assert surface.alpha == 1.0
    assert surface.blend_mode is BlendMode.NORMAL


def test_limit_bounds_retained_commands():
    surface = RecordingSurface(limit=3)
    for i in range(10):
        surface.fill_circle(i, i, 1.0, (1, 1, 1))

    assert surface.total == 10
    assert [c.args[0] for c in surface.commands] == [7, 8, 9]


def test_zero_limit_only_counts():
    surface = RecordingSurface(limit=0)
    surface.fill_rect(0, 0, 1, 1, (0, 0, 0))
    assert surface.total == 1
    assert len(surface.commands) == 0
