"""
Translation of pygame device events into logical game input
"""

from enum import Enum

import pygame

from neon_pong.core.entities import InputSignals
from neon_pong.gui.viewport import ArenaViewport

# Held movement keys per control scheme
CONTROL_KEYS: dict[str, dict[str, tuple[int, ...]]] = {
    "arrows": {"up": (pygame.K_UP,), "down": (pygame.K_DOWN,)},
    "wasd": {"up": (pygame.K_w,), "down": (pygame.K_s,)},
    "both": {"up": (pygame.K_UP, pygame.K_w), "down": (pygame.K_DOWN, pygame.K_s)},
}


class Command(Enum):
    """One-shot requests raised by the player"""

    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"


class InputMapper:
    """
    Keeps the logical input state up to date from pygame events.

    Held keys and pointer drags become :class:`InputSignals`; SPACE and R
    released, ESC pressed and window close become :class:`Command` values.
    A press in the left part of the window grabs the human paddle until
    released.
    """

    def __init__(
        self, viewport: ArenaViewport, control_scheme: str = "both", pointer_zone: float = 1 / 3
    ):
        if control_scheme not in CONTROL_KEYS:
            raise ValueError(
                f"Unknown control scheme: {control_scheme}. "
                f"Available: {list(CONTROL_KEYS.keys())}"
            )
        self.viewport = viewport
        self.key_mapping = CONTROL_KEYS[control_scheme]
        self.pointer_zone = pointer_zone

        self.held_keys: set[int] = set()
        self.pointer_active = False
        self.pointer_y = viewport.arena_height / 2

    @property
    def signals(self) -> InputSignals:
        return InputSignals(
            up=any(key in self.held_keys for key in self.key_mapping["up"]),
            down=any(key in self.held_keys for key in self.key_mapping["down"]),
            pointer_active=self.pointer_active,
            pointer_y=self.pointer_y,
        )

    def handle_event(self, event: pygame.event.Event) -> Command | None:
        """Updates the input state; returns a command if the event raises one"""
        if event.type == pygame.QUIT:
            return Command.QUIT

        if event.type == pygame.KEYDOWN:
            self.held_keys.add(event.key)
            if event.key == pygame.K_ESCAPE:
                return Command.QUIT
        elif event.type == pygame.KEYUP:
            self.held_keys.discard(event.key)
            if event.key == pygame.K_SPACE:
                return Command.TOGGLE_PAUSE
            if event.key == pygame.K_r:
                return Command.RESTART

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._press(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self._drag(event.pos[1])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pointer_active = False

        elif event.type == pygame.FINGERDOWN:
            self._press(*self._finger_pos(event))
        elif event.type == pygame.FINGERMOTION:
            self._drag(self._finger_pos(event)[1])
        elif event.type == pygame.FINGERUP:
            self.pointer_active = False

        elif event.type in (pygame.WINDOWLEAVE, pygame.WINDOWFOCUSLOST):
            self.pointer_active = False
            self.held_keys.clear()

        return None

    def _press(self, x: float, y: float) -> None:
        if self.viewport.in_pointer_zone(x, self.pointer_zone):
            self.pointer_active = True
            self.pointer_y = self.viewport.to_arena_y(y)

    def _drag(self, y: float) -> None:
        if self.pointer_active:
            self.pointer_y = self.viewport.to_arena_y(y)

    def _finger_pos(self, event: pygame.event.Event) -> tuple[float, float]:
        """Touch events carry normalized coordinates"""
        return (event.x * self.viewport.window_width, event.y * self.viewport.window_height)
