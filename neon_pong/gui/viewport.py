"""
Mapping between the logical arena and window pixels
"""

from dataclasses import dataclass

from neon_pong.core.geometry import clamp


@dataclass
class ArenaViewport:
    """Letterboxed placement of the arena in a window: uniform scale, centered"""

    window_width: int
    window_height: int
    arena_width: float
    arena_height: float

    @property
    def scale(self) -> float:
        return min(self.window_width / self.arena_width, self.window_height / self.arena_height)

    @property
    def offset_x(self) -> float:
        return (self.window_width - self.arena_width * self.scale) / 2

    @property
    def offset_y(self) -> float:
        return (self.window_height - self.arena_height * self.scale) / 2

    def resize(self, window_width: int, window_height: int) -> None:
        self.window_width = max(1, window_width)
        self.window_height = max(1, window_height)

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Arena point to window pixel"""
        return (
            round(self.offset_x + x * self.scale),
            round(self.offset_y + y * self.scale),
        )

    def to_screen_length(self, length: float) -> int:
        return max(1, round(length * self.scale))

    def to_arena_y(self, screen_y: float) -> float:
        """Window row to arena height, clamped to the arena"""
        return clamp((screen_y - self.offset_y) / self.scale, 0.0, self.arena_height)

    def in_pointer_zone(self, screen_x: float, zone: float) -> bool:
        """True when screen_x lies in the leftmost ``zone`` share of the window"""
        return screen_x <= self.window_width * zone
