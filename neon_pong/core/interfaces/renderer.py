"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from neon_pong.core.entities import SimulationSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only ever see snapshots, so the core has no knowledge of
    pixels, windows or devices.
    """

    def render_frame(self, snapshot: SimulationSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: State returned by the last ``advance`` call
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
