"""
Utility module of Neon Pong
"""

from neon_pong.utils.config import GameConfig
from neon_pong.utils.config import game_config
from neon_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
