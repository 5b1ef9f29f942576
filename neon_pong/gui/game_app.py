"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys

import numpy as np
import pygame

from neon_pong.core.entities import InputSignals
from neon_pong.core.game_engine import GameEngine
from neon_pong.gui.input_mapper import Command, InputMapper
from neon_pong.gui.pygame_renderer import PygameRenderer
from neon_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class NeonPongApp:
    """Driver loop: device events in, snapshots out"""

    def __init__(self, config: GameConfig, seed: int | None = None):
        self.config = config
        # Waits for SPACE before the first serve
        self.game_engine = GameEngine(
            config=config, rng=np.random.default_rng(seed), start_paused=True
        )
        self.renderer = PygameRenderer(config)
        self.input_mapper = InputMapper(
            self.renderer.viewport,
            control_scheme=config.CONTROL_SCHEME,
            pointer_zone=config.POINTER_ZONE,
        )
        self.running = False
        self._last_signals = InputSignals()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                self.renderer.resize(event.w, event.h)
                continue

            command = self.input_mapper.handle_event(event)
            if command is Command.QUIT:
                self.running = False
            elif command is Command.TOGGLE_PAUSE:
                self.game_engine.toggle_pause()
            elif command is Command.RESTART:
                # Like a fresh page: wait for SPACE again
                self.game_engine.restart()
                self.game_engine.toggle_pause()

        signals = self.input_mapper.signals
        if signals != self._last_signals:
            self.game_engine.set_input(signals)
            self._last_signals = signals

    def run(self) -> None:
        """Runs until the window is closed or ESC is pressed"""
        self.running = True
        logger.info(
            "Neon Pong started (%dx%d arena)", self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT
        )
        try:
            while self.running:
                dt = min(self.renderer.tick(self.config.FPS), self.config.MAX_FRAME_TIME)
                self.handle_events()
                snapshot = self.game_engine.advance(dt)
                self.renderer.render_frame(snapshot)
        finally:
            self.renderer.cleanup()
            logger.info("Final score %d:%d", *self.game_engine.score.to_tuple())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Neon Pong - play against the computer")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serve angles and jitter")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.load_from_file(args.config) if args.config else game_config.model_copy()
        if args.fps is not None:
            config.FPS = args.fps
    except (OSError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    NeonPongApp(config, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
