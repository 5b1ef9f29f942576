"""
Computer paddle controllers for Neon Pong
"""

from typing import Any

from neon_pong.core.entities import Ball, Paddle
from neon_pong.core.interfaces.controller import PaddleController
from neon_pong.core.physics import move_paddle_toward


class TrackingAI:
    """
    Damped pursuit of the ball's height.

    Each tick the paddle closes only ``lag`` of the gap to the ball, and never
    faster than ``max_speed``. It plays competently but can be beaten with
    steep returns.
    """

    def __init__(
        self,
        field_height: float,
        lag: float = 0.15,
        max_speed: float = 470.0,
        name: str = "TrackingAI",
    ):
        self.name = name
        self.field_height = field_height
        self.lag = lag
        self.max_speed = max_speed

    def target_y(self, paddle: Paddle, ball: Ball) -> float:
        """Paddle top edge that would center the paddle on the ball"""
        return ball.position.y - paddle.height / 2

    def predicted_y(self, paddle: Paddle, ball: Ball) -> float:
        current_y = paddle.position.y
        return current_y + (self.target_y(paddle, ball) - current_y) * self.lag

    def update(self, paddle: Paddle, ball: Ball, dt: float) -> None:
        move_paddle_toward(
            paddle, self.predicted_y(paddle, ball), self.max_speed, dt, self.field_height
        )

    def reset(self) -> None:
        pass


class DummyAI:
    """Controller that never moves its paddle"""

    def __init__(self, field_height: float, name: str = "DummyAI", **kwargs: Any):
        self.name = name
        self.field_height = field_height

    def update(self, paddle: Paddle, ball: Ball, dt: float) -> None:
        paddle.velocity_y = 0.0

    def reset(self) -> None:
        pass


def create_ai(ai_type: str, field_height: float, **kwargs: Any) -> PaddleController:
    """
    Factory to create computer controllers

    Args:
        ai_type: AI type ('tracking', 'dummy')
        field_height: Arena height the paddle is clamped to
        **kwargs: Additional arguments for the AI

    Returns:
        PaddleController: Instance of the requested AI
    """
    ai_classes: dict[str, type] = {
        "tracking": TrackingAI,
        "dummy": DummyAI,
    }

    if ai_type not in ai_classes:
        raise ValueError(f"Unknown AI type: {ai_type}. Available types: {list(ai_classes.keys())}")

    controller: PaddleController = ai_classes[ai_type](field_height, **kwargs)
    return controller
