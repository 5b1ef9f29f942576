"""
Computer opponents for Neon Pong
"""

from neon_pong.ai.tracking_ai import DummyAI
from neon_pong.ai.tracking_ai import TrackingAI
from neon_pong.ai.tracking_ai import create_ai

__all__ = ["TrackingAI", "DummyAI", "create_ai"]
