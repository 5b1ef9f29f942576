"""
Neon Pong: a two-paddle ball game against a computer opponent
"""

from neon_pong.core.game_engine import GameEngine

__version__ = "0.1.0"

__all__ = ["GameEngine", "__version__"]
