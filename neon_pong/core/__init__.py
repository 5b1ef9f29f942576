"""
Core module of Neon Pong: entities, collisions, physics and game engine
"""

from neon_pong.core.entities import Ball
from neon_pong.core.entities import GameLifecycle
from neon_pong.core.entities import InputSignals
from neon_pong.core.entities import Paddle
from neon_pong.core.entities import Score
from neon_pong.core.entities import Side
from neon_pong.core.entities import SimulationSnapshot
from neon_pong.core.entities import StatusKey
from neon_pong.core.geometry import Vector2D
from neon_pong.core.geometry import clamp

__all__ = [
    "Ball",
    "Paddle",
    "Score",
    "Side",
    "InputSignals",
    "GameLifecycle",
    "StatusKey",
    "SimulationSnapshot",
    "Vector2D",
    "clamp",
]
