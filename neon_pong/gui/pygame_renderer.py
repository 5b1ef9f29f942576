"""
PyGame renderer for Neon Pong
"""

import pygame

from neon_pong.core.entities import GameLifecycle, SimulationSnapshot, StatusKey
from neon_pong.gui.viewport import ArenaViewport
from neon_pong.utils.config import GameConfig

STATUS_TEXT = {
    StatusKey.READY: "Press SPACE to start",
    StatusKey.SERVING: "Here we go!",
    StatusKey.POINT: "Point! Get ready...",
    StatusKey.PLAYING: "Playing...",
    StatusKey.PAUSED: "Paused - SPACE to resume",
}


class PygameRenderer:
    """PyGame-based renderer for Neon Pong"""

    def __init__(self, config: GameConfig):
        """Initialize the PyGame renderer"""
        self.config = config

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode(
            (config.WINDOW_WIDTH, config.WINDOW_HEIGHT), pygame.RESIZABLE
        )
        pygame.display.set_caption("Neon Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.viewport = ArenaViewport(
            config.WINDOW_WIDTH, config.WINDOW_HEIGHT, config.FIELD_WIDTH, config.FIELD_HEIGHT
        )

        self.background_color = config.BACKGROUND_COLOR
        self.arena_color = config.ARENA_COLOR
        self.neon_color = config.NEON_COLOR
        self.text_color = config.TEXT_COLOR
        self.net_color = tuple(c // 2 for c in config.NEON_COLOR)

        # Font for text rendering
        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 32)

        self.active = True

    def resize(self, width: int, height: int) -> None:
        """Follow the window size; the arena stays letterboxed"""
        self.viewport.resize(width, height)

    def tick(self, fps: int) -> float:
        """Waits for the next frame and returns the elapsed time in seconds"""
        return self.clock.tick(fps) / 1000.0

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)
        top_left = self.viewport.to_screen(0, 0)
        bottom_right = self.viewport.to_screen(self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT)
        arena_rect = pygame.Rect(
            top_left, (bottom_right[0] - top_left[0], bottom_right[1] - top_left[1])
        )
        pygame.draw.rect(self.screen, self.arena_color, arena_rect)

    def draw_net(self) -> None:
        """Dashed center line"""
        center_x = self.config.FIELD_WIDTH / 2
        dash = 12
        y = 0
        while y < self.config.FIELD_HEIGHT:
            start = self.viewport.to_screen(center_x, y)
            end = self.viewport.to_screen(center_x, min(y + dash, self.config.FIELD_HEIGHT))
            pygame.draw.line(
                self.screen, self.net_color, start, end, self.viewport.to_screen_length(3)
            )
            y += 2 * dash

    def draw_paddle(self, x: float, y: float, width: float, height: float) -> None:
        left, top = self.viewport.to_screen(x, y)
        rect = pygame.Rect(
            left,
            top,
            self.viewport.to_screen_length(width),
            self.viewport.to_screen_length(height),
        )
        self._draw_glow(rect)
        pygame.draw.rect(self.screen, self.neon_color, rect)

    def draw_ball(self, x: float, y: float, radius: float) -> None:
        center = self.viewport.to_screen(x, y)
        screen_radius = self.viewport.to_screen_length(radius)
        glow_rect = pygame.Rect(0, 0, screen_radius * 2, screen_radius * 2)
        glow_rect.center = center
        self._draw_glow(glow_rect)
        pygame.draw.circle(self.screen, self.neon_color, center, screen_radius)

    def _draw_glow(self, rect: pygame.Rect) -> None:
        """Soft halo around a neon shape"""
        margin = self.viewport.to_screen_length(8)
        glow = pygame.Surface((rect.width + 2 * margin, rect.height + 2 * margin), pygame.SRCALPHA)
        for i in range(margin, 0, -2):
            alpha = int(60 * (1 - i / margin)) + 10
            pygame.draw.rect(
                glow,
                (*self.neon_color, alpha),
                pygame.Rect(margin - i, margin - i, rect.width + 2 * i, rect.height + 2 * i),
                border_radius=i,
            )
        self.screen.blit(glow, (rect.x - margin, rect.y - margin))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score"""
        text_surface = self.font_large.render(f"{score[0]} : {score[1]}", True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.viewport.window_width // 2
        text_rect.top = 20
        self.screen.blit(text_surface, text_rect)

    def draw_status(self, status: StatusKey) -> None:
        text_surface = self.font_small.render(STATUS_TEXT[status], True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.viewport.window_width // 2
        text_rect.bottom = self.viewport.window_height - 16
        self.screen.blit(text_surface, text_rect)

    def draw_pause_overlay(self) -> None:
        overlay = pygame.Surface((self.viewport.window_width, self.viewport.window_height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

    def render_frame(self, snapshot: SimulationSnapshot) -> None:
        """Draws one snapshot and presents it"""
        self.clear_screen()
        self.draw_net()
        self.draw_paddle(
            snapshot.left_paddle_x,
            snapshot.left_paddle_y,
            snapshot.paddle_width,
            snapshot.paddle_height,
        )
        self.draw_paddle(
            snapshot.right_paddle_x,
            snapshot.right_paddle_y,
            snapshot.paddle_width,
            snapshot.paddle_height,
        )
        self.draw_ball(snapshot.ball_x, snapshot.ball_y, snapshot.ball_radius)
        if snapshot.lifecycle is GameLifecycle.PAUSED:
            self.draw_pause_overlay()
        self.draw_score(snapshot.score)
        self.draw_status(snapshot.status)
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        if self.active:
            pygame.quit()
            self.active = False
