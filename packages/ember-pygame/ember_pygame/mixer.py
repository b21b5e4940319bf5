"""MixerAudio - synthesised explosion and crackle cues on pygame.mixer.

Both sounds are built once from a shared white-noise buffer: the
explosion is low-passed noise with a swept cutoff and a short attack,
crackles are tiny high-passed slices of noise with a fast decay.
"""
from __future__ import annotations

import logging

import numpy as np
import pygame
from numpy.typing import NDArray

logger = logging.getLogger("ember.audio")

TWO_PI = 2.0 * np.pi

NOISE_SECONDS = 2.0

EXPLOSION_SECONDS = 0.6
EXPLOSION_SWEEP = (400.0, 100.0)
EXPLOSION_SWEEP_SECONDS = 0.3
EXPLOSION_PEAK = 0.2
EXPLOSION_ATTACK = 0.02
EXPLOSION_FLOOR = 0.01
EXPLOSION_DECAY_END = 0.5

CRACKLE_SECONDS = 0.05
CRACKLE_CUTOFF = 5000.0
CRACKLE_VOLUME = (0.02, 0.05)
CRACKLE_FLOOR = 0.001
CRACKLE_BANK = 16


def white_noise(
    rate: int, rng: np.random.Generator, seconds: float = NOISE_SECONDS,
) -> NDArray[np.float64]:
    return rng.uniform(-1.0, 1.0, int(rate * seconds))


def lowpass_alpha(cutoff_hz: NDArray[np.float64] | float, rate: int) -> NDArray[np.float64]:
    """One-pole smoothing factor for each cutoff."""
    rc = 1.0 / (TWO_PI * np.asarray(cutoff_hz, dtype=np.float64))
    dt = 1.0 / rate
    return dt / (rc + dt)


def one_pole_lp(signal: NDArray[np.float64], alpha: NDArray[np.float64]) -> NDArray[np.float64]:
    """One-pole low-pass with a per-sample (or constant) smoothing factor."""
    alpha = np.broadcast_to(alpha, signal.shape)
    out = np.empty_like(signal)
    prev = 0.0
    for i in range(len(signal)):
        prev += alpha[i] * (signal[i] - prev)
        out[i] = prev
    return out


def explosion_samples(noise: NDArray[np.float64], rate: int) -> NDArray[np.float64]:
    """Low-passed noise burst, cutoff sweeping down while the gain decays."""
    start, end = EXPLOSION_SWEEP
    n = int(rate * EXPLOSION_SECONDS)
    t = np.arange(n) / rate

    sweep = np.minimum(1.0, t / EXPLOSION_SWEEP_SECONDS)
    filtered = one_pole_lp(np.resize(noise, n), lowpass_alpha(start * (end / start) ** sweep, rate))

    # exponential decay from the peak to the floor between attack and decay end
    k = np.log(EXPLOSION_FLOOR / EXPLOSION_PEAK) / (EXPLOSION_DECAY_END - EXPLOSION_ATTACK)
    gain = np.where(
        t < EXPLOSION_ATTACK,
        EXPLOSION_PEAK * t / EXPLOSION_ATTACK,
        EXPLOSION_PEAK * np.exp(k * (t - EXPLOSION_ATTACK)),
    )
    return filtered * gain


def click_samples(
    noise: NDArray[np.float64], rate: int, rng: np.random.Generator,
) -> NDArray[np.float64]:
    """One crackle: a random slice of noise, high-passed, with a fast decay."""
    n = int(rate * CRACKLE_SECONDS)
    offset = int(rng.integers(0, len(noise) - n))
    volume = rng.uniform(*CRACKLE_VOLUME)

    chunk = noise[offset:offset + n]
    highpassed = chunk - one_pole_lp(chunk, lowpass_alpha(CRACKLE_CUTOFF, rate))
    k = np.log(CRACKLE_FLOOR / volume) / CRACKLE_SECONDS
    return highpassed * volume * np.exp(k * np.arange(n) / rate)


def to_pcm(samples: NDArray[np.float64], channels: int) -> NDArray[np.int16]:
    """Clip to [-1, 1] and convert to int16, one column per mixer channel."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    if channels == 1:
        return pcm
    return np.ascontiguousarray(np.repeat(pcm[:, None], channels, axis=1))


class MixerAudio:
    """Plays synthesised cues on an initialised 16-bit pygame mixer.

    Use :meth:`open` rather than the constructor; it initialises the
    mixer and returns ``None`` when there is no usable audio device.
    """

    def __init__(self, seed: int | None = None) -> None:
        init = pygame.mixer.get_init()
        if init is None:
            raise pygame.error("mixer not initialised")
        rate, size, channels = init
        if size != -16:
            raise pygame.error(f"unsupported mixer sample size {size}")

        self._rng = np.random.default_rng(seed)
        noise = white_noise(rate, self._rng)
        self._explosion = pygame.sndarray.make_sound(
            to_pcm(explosion_samples(noise, rate), channels),
        )
        self._clicks = [
            pygame.sndarray.make_sound(to_pcm(click_samples(noise, rate, self._rng), channels))
            for _ in range(CRACKLE_BANK)
        ]
        logger.debug("mixer audio ready at %d Hz, %d channel(s)", rate, channels)

    @classmethod
    def open(cls, frequency: int = 44100, seed: int | None = None) -> MixerAudio | None:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=frequency, size=-16, channels=1)
                pygame.mixer.set_num_channels(32)
            return cls(seed=seed)
        except pygame.error as exc:
            logger.warning("audio unavailable: %s", exc)
            return None

    def emit_explosion_cue(self) -> None:
        self._explosion.play()

    def emit_crackling_cue(self) -> None:
        self._clicks[self._rng.integers(len(self._clicks))].play()

    def close(self) -> None:
        pygame.mixer.quit()
