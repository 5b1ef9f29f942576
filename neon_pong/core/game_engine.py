"""
Neon Pong game engine: serve/score state machine around the physics
"""

import logging

import numpy as np

from neon_pong.ai.tracking_ai import TrackingAI
from neon_pong.core.entities import (
    Ball,
    GameLifecycle,
    InputSignals,
    Paddle,
    Score,
    Side,
    SimulationSnapshot,
    StatusKey,
)
from neon_pong.core.interfaces.controller import PaddleController
from neon_pong.core.interfaces.random_source import RandomSource
from neon_pong.core.physics import PhysicsEngine
from neon_pong.core.player import PlayerController
from neon_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns one match: entities, controllers, score and lifecycle.

    The engine is driven by an external loop calling :meth:`advance` once per
    frame. It never blocks and never raises from :meth:`advance`.

    Args:
        config: Game constants. Defaults to a copy of the global configuration.
        rng: Source of the serve and jitter draws. Defaults to a fresh
            ``numpy.random.Generator``.
        left_controller: Controller of the left paddle. Defaults to a
            :class:`PlayerController` fed by :meth:`set_input`.
        right_controller: Controller of the right paddle. Defaults to a
            :class:`TrackingAI` using the configured lag and speed.
        start_paused: Start with the pause flag set, waiting for
            :meth:`toggle_pause` before the first serve.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
        left_controller: PaddleController | None = None,
        right_controller: PaddleController | None = None,
        start_paused: bool = False,
    ):
        self.config = config if config is not None else game_config.model_copy()
        self.rng: RandomSource = rng if rng is not None else np.random.default_rng()
        self.physics = PhysicsEngine(self.config, self.rng)

        self.player = PlayerController(self.config.FIELD_HEIGHT)
        self.left_controller: PaddleController = (
            left_controller if left_controller is not None else self.player
        )
        self.right_controller: PaddleController = (
            right_controller
            if right_controller is not None
            else TrackingAI(
                self.config.FIELD_HEIGHT,
                lag=self.config.AI_LAG,
                max_speed=self.config.AI_MAX_SPEED,
            )
        )

        self.score = Score()
        self.phase = GameLifecycle.IDLE
        self.paused = start_paused
        self.serve_timer = 0.0
        # Direction of the next serve: toward the side that was scored against
        self.serve_direction = 1
        self.points_played = 0

    @property
    def ball(self) -> Ball:
        return self.physics.ball

    @property
    def left_paddle(self) -> Paddle:
        return self.physics.left_paddle

    @property
    def right_paddle(self) -> Paddle:
        return self.physics.right_paddle

    @property
    def lifecycle(self) -> GameLifecycle:
        """Current lifecycle; pause hides the underlying phase"""
        return GameLifecycle.PAUSED if self.paused else self.phase

    def set_input(self, signals: InputSignals) -> None:
        """Stores the latest input signals; takes effect on the next advance"""
        self.player.set_signals(signals)

    def toggle_pause(self) -> None:
        """Pauses / resumes the game"""
        self.paused = not self.paused
        logger.info("Game %s", "paused" if self.paused else "resumed")

    def restart(self) -> None:
        """Resets score, paddles and ball; the next advance arms a fresh serve"""
        self.score.reset()
        self.physics.center_paddles()
        self.left_controller.reset()
        self.right_controller.reset()
        self.serve_direction = 1
        self.points_played = 0
        self.serve_timer = 0.0
        self.paused = False
        self.phase = GameLifecycle.IDLE
        self._park_ball()
        logger.info("Game restarted")

    def advance(self, dt: float) -> SimulationSnapshot:
        """
        Advances the game by one frame.

        Args:
            dt: Frame time in seconds, already clamped by the caller

        Returns:
            SimulationSnapshot: State after the frame
        """
        dt = max(0.0, dt)

        if self.paused:
            return self.snapshot()

        if self.phase is GameLifecycle.IDLE:
            self._start_serve()
            return self.snapshot()

        self.left_controller.update(self.left_paddle, self.ball, dt)
        self.right_controller.update(self.right_paddle, self.ball, dt)

        if self.phase is GameLifecycle.SERVING:
            self.serve_timer -= dt
            if self.serve_timer <= 0:
                self.phase = GameLifecycle.PLAYING
                logger.debug("Ball in play")
        else:
            events = self.physics.advance_ball(dt)
            if events["scored"] is not None:
                self._score_point(events["scored"])

        return self.snapshot()

    def snapshot(self) -> SimulationSnapshot:
        """Returns the current state without advancing"""
        ball = self.ball
        return SimulationSnapshot(
            left_paddle_x=self.left_paddle.position.x,
            left_paddle_y=self.left_paddle.position.y,
            right_paddle_x=self.right_paddle.position.x,
            right_paddle_y=self.right_paddle.position.y,
            paddle_width=self.config.PADDLE_WIDTH,
            paddle_height=self.config.PADDLE_HEIGHT,
            ball_x=ball.position.x,
            ball_y=ball.position.y,
            ball_vx=ball.velocity.x,
            ball_vy=ball.velocity.y,
            ball_radius=ball.radius,
            score_left=self.score.left,
            score_right=self.score.right,
            lifecycle=self.lifecycle,
            status=self.status,
        )

    @property
    def status(self) -> StatusKey:
        if self.paused:
            if self.phase is GameLifecycle.IDLE:
                return StatusKey.READY
            return StatusKey.PAUSED
        if self.phase is GameLifecycle.IDLE:
            return StatusKey.READY
        if self.phase is GameLifecycle.SERVING:
            return StatusKey.POINT if self.points_played else StatusKey.SERVING
        return StatusKey.PLAYING

    def _score_point(self, scorer: Side) -> None:
        self.score.add_point(scorer)
        self.points_played += 1
        # Serve toward the side that was scored against
        self.serve_direction = 1 if scorer.opponent is Side.RIGHT else -1
        logger.info("Point for %s (%d:%d)", scorer.value, self.score.left, self.score.right)
        self._start_serve()

    def _start_serve(self) -> None:
        """Relaunches the ball from the center and arms the serve countdown"""
        self._park_ball()
        tilt_range = self.config.SERVE_TILT_MAX - self.config.SERVE_TILT_MIN
        tilt = self.rng.random() * tilt_range + self.config.SERVE_TILT_MIN
        if self.rng.random() <= 0.5:
            tilt = -tilt

        ball = self.ball
        ball.velocity.x = ball.speed * self.serve_direction
        ball.velocity.y = ball.speed * tilt

        self.serve_timer = self.config.SERVE_DELAY
        self.phase = GameLifecycle.SERVING
        direction = "right" if self.serve_direction > 0 else "left"
        logger.debug("Serving toward %s in %.2fs", direction, self.serve_timer)

    def _park_ball(self) -> None:
        ball = self.ball
        ball.position.x = self.physics.field_width / 2
        ball.position.y = self.physics.field_height / 2
        ball.speed = self.config.BALL_SPEED
        ball.velocity.x = 0.0
        ball.velocity.y = 0.0
