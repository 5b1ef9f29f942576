"""
Collision detection and response for Neon Pong
"""

from neon_pong.core.entities import Ball, Paddle, Side
from neon_pong.core.geometry import clamp
from neon_pong.core.interfaces.random_source import RandomSource
from neon_pong.utils.config import GameConfig


def rect_overlap(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    """Checks if two (x, y, width, height) rectangles overlap, edges included"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax + aw < bx or ax > bx + bw or ay + ah < by or ay > by + bh)


def test_paddle_collision(ball: Ball, paddle: Paddle) -> bool:
    """Checks if the ball's bounding square overlaps the paddle rectangle"""
    return rect_overlap(ball.get_rect(), paddle.get_rect())


def impact_offset(ball: Ball, paddle: Paddle) -> float:
    """
    Normalized vertical hit position on the paddle.

    Returns -1 at the top edge, 0 at the center and 1 at the bottom edge,
    clamped to that range for hits on the paddle corners.
    """
    impact = (ball.position.y - paddle.center_y) / (paddle.height / 2)
    return clamp(impact, -1.0, 1.0)


def resolve_paddle_hit(
    ball: Ball, paddle: Paddle, side: Side, config: GameConfig, rng: RandomSource
) -> None:
    """
    Bounces the ball off a paddle.

    Center hits leave almost horizontally, edge hits leave steeply. Every hit
    raises the rally speed by one step up to the maximum speed, and the
    horizontal component gets a small random jitter. The ball is then placed
    flush against the paddle face so it is not seen as colliding again.
    """
    impact = impact_offset(ball, paddle)
    ball.speed = min(config.MAX_BALL_SPEED, ball.speed + config.BALL_SPEED_STEP)

    direction = 1 if side is Side.LEFT else -1
    jitter = config.HIT_JITTER_MIN + rng.random() * (1.0 - config.HIT_JITTER_MIN)
    ball.velocity.x = direction * ball.speed * jitter
    ball.velocity.y = ball.speed * impact * config.HIT_ANGLE_FACTOR

    if side is Side.LEFT:
        ball.position.x = paddle.position.x + paddle.width + ball.radius
    else:
        ball.position.x = paddle.position.x - ball.radius


def resolve_wall_bounce(ball: Ball, field_height: float) -> str | None:
    """Bounces the ball off the top and bottom walls. Returns the wall hit, if any."""
    if ball.position.y - ball.radius <= 0:
        ball.position.y = ball.radius
        ball.velocity.y = -ball.velocity.y
        return "top"
    if ball.position.y + ball.radius >= field_height:
        ball.position.y = field_height - ball.radius
        ball.velocity.y = -ball.velocity.y
        return "bottom"
    return None
