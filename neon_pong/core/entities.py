"""
Neon Pong game entities: ball, paddles, score, input signals and snapshots
"""

from dataclasses import dataclass
from enum import Enum

from neon_pong.core.geometry import Vector2D
from neon_pong.utils.config import game_config


class Side(Enum):
    """Arena side, used for paddles and scorers"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class GameLifecycle(Enum):
    """High-level mode of the game"""

    IDLE = "idle"
    SERVING = "serving"
    PLAYING = "playing"
    PAUSED = "paused"


class StatusKey(Enum):
    """Status line keys; wording is left to the front-end"""

    READY = "ready"
    SERVING = "serving"
    POINT = "point"
    PLAYING = "playing"
    PAUSED = "paused"


class Ball:
    """Game ball"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        radius: float | None = None,
        speed: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS
        # Scalar rally speed; only paddle hits change it
        self.speed = speed if speed is not None else self.velocity.magnitude()

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = value

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @property
    def vx(self) -> float:
        return self.velocity.x

    @vx.setter
    def vx(self, value: float) -> None:
        self.velocity.x = value

    @property
    def vy(self) -> float:
        return self.velocity.y

    @vy.setter
    def vy(self, value: float) -> None:
        self.velocity.y = value

    def update(self, dt: float) -> None:
        """Moves the ball linearly over dt"""
        self.position += self.velocity * dt

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding square (x, y, width, height)"""
        return (
            self.position.x - self.radius,
            self.position.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )


class Paddle:
    """Player paddle, moving along the vertical axis only"""

    def __init__(
        self,
        x: float,
        y: float,
        side: Side,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = speed if speed is not None else game_config.PADDLE_SPEED
        # Velocity applied on the last move, for renderers
        self.velocity_y = 0.0

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class Score:
    """Points of both sides"""

    left: int = 0
    right: int = 0

    def add_point(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass(frozen=True)
class InputSignals:
    """Logical input, decoded from devices by the front-end"""

    up: bool = False
    down: bool = False
    pointer_active: bool = False
    pointer_y: float = 0.0


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view of the simulation after a frame"""

    left_paddle_x: float
    left_paddle_y: float
    right_paddle_x: float
    right_paddle_y: float
    paddle_width: float
    paddle_height: float
    ball_x: float
    ball_y: float
    ball_vx: float
    ball_vy: float
    ball_radius: float
    score_left: int
    score_right: int
    lifecycle: GameLifecycle
    status: StatusKey

    @property
    def score(self) -> tuple[int, int]:
        return (self.score_left, self.score_right)
