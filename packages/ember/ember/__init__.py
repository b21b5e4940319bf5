"""ember - a fixed-timestep particle animation engine."""

from ember.audio import AudioCues, CueGate, SilentAudio
from ember.clock import Clock
from ember.color import hsl_to_rgb
from ember.engine import Engine
from ember.surface import BlendMode, DrawCommand, Glow, RecordingSurface, Surface
from ember.types import (
    Color,
    EmberError,
    Point,
    TickContext,
    TransitionError,
    ViewportError,
)

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "Point",
    "Color",
    "hsl_to_rgb",
    "Surface",
    "RecordingSurface",
    "DrawCommand",
    "BlendMode",
    "Glow",
    "AudioCues",
    "CueGate",
    "SilentAudio",
    "EmberError",
    "ViewportError",
    "TransitionError",
]
