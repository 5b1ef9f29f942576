"""
Tests for Neon Pong game entities and geometry helpers
"""

import dataclasses

import pytest

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
from neon_pong.core.geometry import Vector2D, clamp


class TestClamp:
    """Tests for clamp"""

    def test_value_inside_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_value_below_range(self) -> None:
        assert clamp(-3.0, 0.0, 10.0) == 0.0

    def test_value_above_range(self) -> None:
        assert clamp(42.0, 0.0, 10.0) == 10.0

    def test_degenerate_range(self) -> None:
        """min == max always yields that bound"""
        assert clamp(7.0, 2.0, 2.0) == 2.0


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result == Vector2D(4.0, 6.0)

    def test_in_place_addition(self) -> None:
        v = Vector2D(1.0, 1.0)
        v += Vector2D(0.5, -2.0)
        assert v == Vector2D(1.5, -1.0)

    def test_subtraction(self) -> None:
        result = Vector2D(5.0, 7.0) - Vector2D(2.0, 3.0)
        assert result == Vector2D(3.0, 4.0)

    def test_scalar_multiplication(self) -> None:
        result = Vector2D(2.0, 3.0) * 2.5
        assert result == Vector2D(5.0, 7.5)

    def test_negation(self) -> None:
        assert -Vector2D(1.0, -2.0) == Vector2D(-1.0, 2.0)

    def test_magnitude(self) -> None:
        assert Vector2D(3.0, 4.0).magnitude() == 5.0

    def test_normalize(self) -> None:
        normalized = Vector2D(3.0, 4.0).normalize()
        assert normalized.x == pytest.approx(0.6)
        assert normalized.y == pytest.approx(0.8)

    def test_normalize_zero_vector(self) -> None:
        assert Vector2D(0.0, 0.0).normalize() == Vector2D(0.0, 0.0)

    def test_copy_is_independent(self) -> None:
        v = Vector2D(1.0, 2.0)
        c = v.copy()
        c.x = 10.0
        assert v.x == 1.0


class TestBall:
    """Tests for Ball class"""

    def test_speed_defaults_to_velocity_magnitude(self) -> None:
        ball = Ball(0, 0, 300, 400, radius=10)
        assert ball.speed == 500.0

    def test_explicit_speed(self) -> None:
        ball = Ball(0, 0, 350, 192.5, radius=10, speed=350)
        assert ball.speed == 350

    def test_component_properties(self) -> None:
        ball = Ball(40, 360, -350, 0, radius=10)
        ball.x = 60
        ball.vy = 12.5
        assert ball.position == Vector2D(60, 360)
        assert ball.velocity == Vector2D(-350, 12.5)
        assert (ball.x, ball.y, ball.vx, ball.vy) == (60, 360, -350, 12.5)

    def test_update_moves_linearly(self) -> None:
        ball = Ball(100, 100, 240, -120, radius=10)
        ball.update(0.5)
        assert ball.position == Vector2D(220, 40)

    def test_rect_is_bounding_square(self) -> None:
        ball = Ball(100, 50, 0, 0, radius=10)
        assert ball.get_rect() == (90, 40, 20, 20)


class TestPaddle:
    """Tests for Paddle class"""

    def test_dimensions_and_center(self) -> None:
        paddle = Paddle(34, 300, Side.LEFT, width=16, height=120, speed=560)
        assert paddle.x == 34
        assert paddle.center_y == 360
        assert paddle.get_rect() == (34, 300, 16, 120)

    def test_defaults_from_config(self, config) -> None:
        paddle = Paddle(0, 0, Side.RIGHT)
        assert paddle.width == config.PADDLE_WIDTH
        assert paddle.height == config.PADDLE_HEIGHT
        assert paddle.speed == config.PADDLE_SPEED
        assert paddle.velocity_y == 0.0


class TestScore:
    """Tests for Score class"""

    def test_add_point(self) -> None:
        score = Score()
        score.add_point(Side.LEFT)
        score.add_point(Side.RIGHT)
        score.add_point(Side.RIGHT)
        assert score.to_tuple() == (1, 2)

    def test_reset(self) -> None:
        score = Score(4, 7)
        score.reset()
        assert score.to_tuple() == (0, 0)


def test_side_opponent() -> None:
    assert Side.LEFT.opponent is Side.RIGHT
    assert Side.RIGHT.opponent is Side.LEFT


def test_input_signals_default_to_idle() -> None:
    signals = InputSignals()
    assert not signals.up
    assert not signals.down
    assert not signals.pointer_active


def test_snapshot_is_read_only() -> None:
    snapshot = SimulationSnapshot(
        left_paddle_x=34,
        left_paddle_y=300,
        right_paddle_x=1150,
        right_paddle_y=300,
        paddle_width=16,
        paddle_height=120,
        ball_x=600,
        ball_y=360,
        ball_vx=350,
        ball_vy=0,
        ball_radius=10,
        score_left=2,
        score_right=1,
        lifecycle=GameLifecycle.PLAYING,
        status=StatusKey.PLAYING,
    )
    assert snapshot.score == (2, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.ball_x = 0  # type: ignore[misc]
