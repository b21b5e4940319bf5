"""Engine - core loop, pacing, viewport, and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Callable

from ember.clock import Clock
from ember.surface import Surface
from ember.types import System, TickContext, ViewportError

logger = logging.getLogger("ember.engine")

Hook = Callable[[Surface, TickContext], None]
ResizeHook = Callable[[int, int], None]


class Engine:
    def __init__(
        self,
        surface: Surface,
        width: int,
        height: int,
        tps: int = 60,
        seed: int | None = None,
    ) -> None:
        _check_viewport(width, height)
        self._clock = Clock(tps)
        self._surface = surface
        self._viewport = (width, height)
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._resize_hooks: list[ResizeHook] = []
        self._stop_requested: bool = False
        self._stopped: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def viewport(self) -> tuple[int, int]:
        return self._viewport

    @property
    def stopped(self) -> bool:
        return self._stopped

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_resize(self, hook: ResizeHook) -> None:
        self._resize_hooks.append(hook)

    def resize(self, width: int, height: int) -> None:
        """Change the viewport and notify resize hooks in registration order."""
        _check_viewport(width, height)
        self._viewport = (width, height)
        logger.debug("viewport resized to %dx%d", width, height)
        for hook in self._resize_hooks:
            hook(width, height)

    def context(self) -> TickContext:
        return self._clock.context(self._viewport, self._request_stop, self._rng)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self.context()
        for system in self._systems:
            system(self._surface, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self.context()
        for hook in hooks:
            hook(self._surface, ctx)

    def step(self) -> None:
        if self._stopped:
            return
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        if self._stopped:
            return
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        if not self._stopped:
            self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        if self._stopped:
            return
        self._stop_requested = False
        self._fire(self._start_hooks)
        logger.debug("running at %d tps (seed=%d)", self._clock.tps, self._seed)

        dt = self._clock.dt
        while not self._stop_requested and not self._stopped:
            start = time.monotonic()
            self._tick()
            if self._stop_requested or self._stopped:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        if not self._stopped:
            self._fire(self._stop_hooks)

    def stop(self) -> None:
        """Stop scheduling ticks for good. Safe to call more than once."""
        if self._stopped:
            return
        self._stop_requested = True
        self._stopped = True
        logger.debug("stopped at tick %d", self._clock.tick_number)
        self._fire(self._stop_hooks)


def _check_viewport(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ViewportError(width, height)
