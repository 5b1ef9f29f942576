"""
Human paddle controller, driven by logical input signals
"""

from neon_pong.core.entities import Ball, InputSignals, Paddle
from neon_pong.core.physics import move_paddle_toward


class PlayerController:
    """Moves the human paddle from held keys or an active pointer"""

    def __init__(self, field_height: float, name: str = "Player"):
        self.name = name
        self.field_height = field_height
        self.signals = InputSignals()

    def set_signals(self, signals: InputSignals) -> None:
        self.signals = signals

    def direction(self) -> int:
        """-1 for up, 1 for down, 0 when both or neither key is held"""
        direction = 0
        if self.signals.up:
            direction -= 1
        if self.signals.down:
            direction += 1
        return direction

    def update(self, paddle: Paddle, ball: Ball, dt: float) -> None:
        if self.signals.pointer_active:
            # Direct tracking of the pointer, centered on the paddle
            target_y = self.signals.pointer_y - paddle.height / 2
        else:
            # Any target farther than one frame of travel moves at full speed
            target_y = paddle.position.y + self.direction() * self.field_height
        move_paddle_toward(paddle, target_y, paddle.speed, dt, self.field_height)

    def reset(self) -> None:
        """Input mirrors the devices, so held keys survive a restart"""
