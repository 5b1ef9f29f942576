"""
Paddle controller protocol - defines interface for human and computer paddles
"""

from typing import Protocol

from neon_pong.core.entities import Ball
from neon_pong.core.entities import Paddle


class PaddleController(Protocol):
    """
    Protocol that every paddle controller (human, computer) must implement.

    The game engine drives both paddles the same way and doesn't need to
    know who is behind each of them.
    """

    name: str

    def update(self, paddle: Paddle, ball: Ball, dt: float) -> None:
        """
        Move the paddle for one frame.

        Args:
            paddle: Paddle owned by this controller; the only entity it may mutate
            ball: Current ball, read-only
            dt: Frame time in seconds

        The paddle must end the call inside the arena.
        """
        ...

    def reset(self) -> None:
        """
        Called when the game restarts.

        Controllers holding per-game state clear it here.
        """
        ...
