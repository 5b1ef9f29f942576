"""
Neon Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

CONTROL_SCHEMES = ("arrows", "wasd", "both")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for temporary overrides
    model_config = {"validate_assignment": True}

    # Arena dimensions (logical units, independent of the window)
    FIELD_WIDTH: int = Field(default=1200, gt=0, description="Arena width")
    FIELD_HEIGHT: int = Field(default=720, gt=0, description="Arena height")

    # Ball physics
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius")
    MAX_BALL_SPEED: float = Field(default=760.0, gt=0, description="Maximum ball speed")
    BALL_SPEED: float = Field(default=350.0, gt=0, description="Serve speed")
    BALL_SPEED_STEP: float = Field(default=24.0, ge=0, description="Speed gained per paddle hit")
    HIT_ANGLE_FACTOR: float = Field(
        default=0.9, gt=0, le=1.0, description="Vertical share of speed on an edge hit"
    )
    HIT_JITTER_MIN: float = Field(
        default=0.92, gt=0, le=1.0, description="Lower bound of horizontal hit jitter"
    )
    SERVE_TILT_MIN: float = Field(default=0.2, ge=0, description="Minimum serve tilt")
    SERVE_TILT_MAX: float = Field(default=0.9, ge=0, description="Maximum serve tilt")
    SERVE_DELAY: float = Field(default=0.8, ge=0, description="Serve countdown in seconds")

    # Integration
    PHYSICS_SUBSTEP: float = Field(default=1 / 240, gt=0, description="Max physics sub-step")
    MAX_FRAME_TIME: float = Field(default=0.04, gt=0, description="Max frame time fed to advance")

    # Paddles
    PADDLE_WIDTH: float = Field(default=16.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=120.0, gt=0, description="Paddle height")
    PADDLE_SPEED: float = Field(default=560.0, gt=0, description="Player paddle speed")
    PADDLE_MARGIN: float = Field(default=34.0, ge=0, description="Paddle margin from edge")

    # Computer opponent
    AI_LAG: float = Field(default=0.15, gt=0, lt=1.0, description="Fraction of the gap closed per tick")
    AI_MAX_SPEED: float = Field(default=470.0, gt=0, description="Computer paddle speed")

    # Front-end
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_WIDTH: int = Field(default=1200, gt=0, description="Initial window width")
    WINDOW_HEIGHT: int = Field(default=720, gt=0, description="Initial window height")
    POINTER_ZONE: float = Field(
        default=1 / 3, gt=0, le=1.0, description="Share of the window that grabs the paddle"
    )
    CONTROL_SCHEME: str = Field(default="both", description="Keyboard control scheme")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(8, 1, 13), description="RGB color")
    ARENA_COLOR: tuple[int, int, int] = Field(default=(16, 4, 24), description="RGB color")
    NEON_COLOR: tuple[int, int, int] = Field(default=(255, 79, 216), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("CONTROL_SCHEME")
    @classmethod
    def validate_control_scheme(cls, v: str) -> str:
        if v not in CONTROL_SCHEMES:
            raise ValueError(f"Unknown control scheme '{v}'. Available: {list(CONTROL_SCHEMES)}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate speeds and that the arena is large enough for paddles and ball"""
        # Also runs on assignment, catching a lowered MAX_BALL_SPEED
        if self.BALL_SPEED > self.MAX_BALL_SPEED:
            raise ValueError(
                f"BALL_SPEED ({self.BALL_SPEED}) must not exceed "
                f"MAX_BALL_SPEED ({self.MAX_BALL_SPEED})"
            )

        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH + self.BALL_RADIUS) + 100
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width}")

        min_height = self.PADDLE_HEIGHT + 4 * self.BALL_RADIUS
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height}")

        if self.SERVE_TILT_MIN > self.SERVE_TILT_MAX:
            raise ValueError("SERVE_TILT_MIN must not exceed SERVE_TILT_MAX")

        return self

    @property
    def paddle_center_y(self) -> float:
        """Top edge of a vertically centered paddle"""
        return self.FIELD_HEIGHT / 2 - self.PADDLE_HEIGHT / 2

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "neon_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "neon_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global default configuration
game_config = GameConfig()


def load_config_from_file(filepath: str = "neon_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Config file %s not found, keeping defaults", filepath)
        return False
    except (ValueError, OSError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # The loaded model is already validated as a whole; per-field assignment
    # would re-run the cross-field checks against a half-updated config
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones"""
    for name, new_value in kwargs.items():
        # Recorded first: a failing model validator may leave the new value set
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Undo in reverse order so each step is valid against the previous state
        _change_values(game_config, {}, **dict(reversed(old_values.items())))
