"""
Physics system for Neon Pong
"""

from typing import Any

from neon_pong.core.collision import resolve_paddle_hit
from neon_pong.core.collision import resolve_wall_bounce
from neon_pong.core.collision import test_paddle_collision
from neon_pong.core.entities import Ball, Paddle, Side
from neon_pong.core.geometry import clamp
from neon_pong.core.interfaces.random_source import RandomSource
from neon_pong.utils.config import GameConfig


def move_paddle_toward(
    paddle: Paddle, target_y: float, max_speed: float, dt: float, field_height: float
) -> float:
    """
    Moves a paddle toward target_y at no more than max_speed.

    The resulting position is clamped so the paddle stays inside the arena.
    Returns the distance actually travelled.
    """
    max_step = max_speed * dt
    step = clamp(target_y - paddle.position.y, -max_step, max_step)
    previous_y = paddle.position.y
    paddle.position.y = clamp(previous_y + step, 0.0, field_height - paddle.height)

    moved = paddle.position.y - previous_y
    paddle.velocity_y = moved / dt if dt > 0 else 0.0
    return moved


class PhysicsEngine:
    """Ball integrator with fixed sub-steps and paddle collision handling"""

    def __init__(self, config: GameConfig, rng: RandomSource):
        self.config = config
        self.rng = rng
        self.field_width = float(config.FIELD_WIDTH)
        self.field_height = float(config.FIELD_HEIGHT)

        self.left_paddle = Paddle(
            config.PADDLE_MARGIN,
            config.paddle_center_y,
            Side.LEFT,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            speed=config.PADDLE_SPEED,
        )
        self.right_paddle = Paddle(
            self.field_width - config.PADDLE_MARGIN - config.PADDLE_WIDTH,
            config.paddle_center_y,
            Side.RIGHT,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            speed=config.PADDLE_SPEED,
        )
        self.ball = Ball(
            self.field_width / 2,
            self.field_height / 2,
            0.0,
            0.0,
            radius=config.BALL_RADIUS,
            speed=config.BALL_SPEED,
        )

    def paddle(self, side: Side) -> Paddle:
        return self.left_paddle if side is Side.LEFT else self.right_paddle

    def center_paddles(self) -> None:
        """Puts both paddles back at vertical center"""
        for paddle in (self.left_paddle, self.right_paddle):
            paddle.position.y = self.config.paddle_center_y
            paddle.velocity_y = 0.0

    def advance_ball(self, dt: float) -> dict[str, Any]:
        """
        Advances the ball by dt seconds in sub-steps of at most PHYSICS_SUBSTEP.

        A paddle hit within a sub-step skips the exit check of that sub-step,
        since the paddle would have intercepted the ball first. Leaving the
        arena ends integration immediately.

        Returns:
            Dictionary with the events that occurred:
            {
                "scored": Side.LEFT, Side.RIGHT or None,
                "paddle_hits": [...],
                "wall_bounces": [...],
            }
        """
        events: dict[str, Any] = {"scored": None, "paddle_hits": [], "wall_bounces": []}
        ball = self.ball
        remaining = dt

        while remaining > 0:
            step = min(self.config.PHYSICS_SUBSTEP, remaining)
            remaining -= step

            ball.update(step)

            wall = resolve_wall_bounce(ball, self.field_height)
            if wall is not None:
                events["wall_bounces"].append(wall)

            hit_side = self._check_paddle_hits()
            if hit_side is not None:
                events["paddle_hits"].append(
                    {"side": hit_side, "position": ball.position.to_tuple(), "speed": ball.speed}
                )
                continue

            if ball.position.x < -ball.radius:
                events["scored"] = Side.RIGHT
                break
            if ball.position.x > self.field_width + ball.radius:
                events["scored"] = Side.LEFT
                break

        return events

    def _check_paddle_hits(self) -> Side | None:
        """Resolves at most one paddle hit, left paddle first"""
        for paddle in (self.left_paddle, self.right_paddle):
            if test_paddle_collision(self.ball, paddle):
                resolve_paddle_hit(self.ball, paddle, paddle.side, self.config, self.rng)
                return paddle.side
        return None
