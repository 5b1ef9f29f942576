"""
Protocols between the simulation core and its collaborators
"""

from neon_pong.core.interfaces.controller import PaddleController
from neon_pong.core.interfaces.random_source import RandomSource
from neon_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["PaddleController", "RandomSource", "RendererProtocol"]
