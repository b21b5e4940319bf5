"""New Year - glowing text sparklers and fireworks.

Runs the ember show in a resizable pygame window.

Controls:
  M       Toggle sound
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ember_glyph import GlyphConfig
from ember_pygame import MixerAudio, PygameRasterizer, PygameSurface
from ember_show import ShowConfig, build_show

TITLE = "Happy New Year"

logger = logging.getLogger("ember.host")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: random)")
    parser.add_argument("--text", default=GlyphConfig.text, help="text to burn (default: %(default)s)")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--audio", action="store_true", help="start with sound on (default: muted)")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


class AudioToggle:
    """Opens the mixer the first time sound is switched on."""

    def __init__(self, show, seed: int) -> None:
        self.show = show
        self.seed = seed
        self.opened = False

    def set(self, enabled: bool) -> None:
        if enabled and not self.opened:
            self.opened = True
            self.show.audio.backend = MixerAudio.open(seed=self.seed)
        self.show.audio_enabled = enabled
        logger.info("sound %s", "on" if self.show.audio.active else "off")

    def toggle(self) -> None:
        self.set(not self.show.audio_enabled)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()

    config = ShowConfig(tps=args.fps, glyph=GlyphConfig(text=args.text))
    surface = PygameSurface(screen)
    show = build_show(
        surface,
        PygameRasterizer(),
        *screen.get_size(),
        config=config,
        seed=args.seed,
        audio_enabled=False,
    )
    sound = AudioToggle(show, show.engine.seed)
    sound.set(args.audio)

    running = True
    while running:
        pg_clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_m:
                    sound.toggle()
            elif event.type == pygame.VIDEORESIZE:
                surface.target = pygame.display.get_surface()
                show.resize(*surface.target.get_size())

        if not running:
            break

        # --- Update + draw ---
        show.tick()
        pygame.display.flip()

    show.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
