"""
Headless demo: two computer paddles play a short match without a window
"""

import argparse
import logging

import numpy as np

from neon_pong.ai.tracking_ai import create_ai
from neon_pong.core.entities import SimulationSnapshot
from neon_pong.core.game_engine import GameEngine
from neon_pong.core.interfaces.renderer import RendererProtocol
from neon_pong.utils.config import game_config

logger = logging.getLogger(__name__)

AI_TYPES = ["tracking", "dummy"]


class ScoreLogRenderer:
    """Renders a match as log lines, one per point"""

    def __init__(self) -> None:
        self.last_score = (0, 0)
        self.frames = 0

    def render_frame(self, snapshot: SimulationSnapshot) -> None:
        self.frames += 1
        if snapshot.score != self.last_score:
            self.last_score = snapshot.score
            logger.info("Frame %d: score %d : %d", self.frames, *snapshot.score)

    def cleanup(self) -> None:
        logger.info("Rendered %d frames", self.frames)


def play_match(
    frames: int,
    seed: int | None,
    dt: float = 1 / 60,
    renderer: RendererProtocol | None = None,
    left_ai: str = "tracking",
    right_ai: str = "tracking",
) -> tuple[int, int]:
    """Runs a fixed number of frames and returns the final score"""
    config = game_config.model_copy()
    engine = GameEngine(
        config=config,
        rng=np.random.default_rng(seed),
        left_controller=create_ai(
            left_ai, config.FIELD_HEIGHT, lag=0.12, max_speed=config.PADDLE_SPEED
        ),
        right_controller=create_ai(
            right_ai, config.FIELD_HEIGHT, lag=config.AI_LAG, max_speed=config.AI_MAX_SPEED
        ),
    )
    renderer = renderer if renderer is not None else ScoreLogRenderer()
    try:
        snapshot = engine.advance(0.0)
        for _ in range(frames):
            snapshot = engine.advance(min(dt, config.MAX_FRAME_TIME))
            renderer.render_frame(snapshot)
    finally:
        renderer.cleanup()
    return snapshot.score


def main() -> None:
    parser = argparse.ArgumentParser(description="Neon Pong AI vs AI, headless")
    parser.add_argument("--frames", type=int, default=60 * 120, help="Frames to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--left-ai", choices=AI_TYPES, default="tracking", help="Left paddle AI")
    parser.add_argument("--right-ai", choices=AI_TYPES, default="tracking", help="Right paddle AI")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    left, right = play_match(
        args.frames, args.seed, left_ai=args.left_ai, right_ai=args.right_ai
    )
    print(f"Final score after {args.frames} frames: {left} : {right}")


if __name__ == "__main__":
    main()
