"""Falling bonuses that drop from destroyed bricks."""

from __future__ import annotations

from abc import abstractmethod

from brickbreaker.objects import MovableObject
from brickbreaker.paddle import Paddle, PaddleState


class Bonus(MovableObject):
    """A pick-up that falls straight down and changes the paddle when caught."""

    TEXTURE_WIDTH = 32
    TEXTURE_HEIGHT = 16
    DEFAULT_VELOCITY = 1
    DEFAULT_SPEED = 2

    def __init__(self, texture_source: str, x: int, y: int) -> None:
        super().__init__(
            texture_source,
            x,
            y,
            self.TEXTURE_WIDTH,
            self.TEXTURE_HEIGHT,
            self.DEFAULT_SPEED,
            0,
            self.DEFAULT_VELOCITY,
        )

    def move(self) -> None:
        self.pos = self.pos + self.velocity * self.speed

    @abstractmethod
    def apply(self, paddle: Paddle) -> None:
        """Apply the bonus to the player's paddle."""


class WidePaddleBonus(Bonus):
    """Makes the paddle wider."""

    TEXTURE_SOURCE = "assets/sprites/bonus-yellow.bmp"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(self.TEXTURE_SOURCE, x, y)

    def apply(self, paddle: Paddle) -> None:
        paddle.set_state(PaddleState.WIDE)


class FastPaddleBonus(Bonus):
    """Makes the paddle move faster."""

    TEXTURE_SOURCE = "assets/sprites/bonus-red.bmp"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(self.TEXTURE_SOURCE, x, y)

    def apply(self, paddle: Paddle) -> None:
        paddle.set_state(PaddleState.FAST)


class HealthBonus(Bonus):
    """Gives an extra life and resets the paddle."""

    TEXTURE_SOURCE = "assets/sprites/bonus-gray.bmp"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(self.TEXTURE_SOURCE, x, y)

    def apply(self, paddle: Paddle) -> None:
        paddle.gain_life()
        paddle.set_state(PaddleState.DEFAULT)


class CatchBonus(Bonus):
    """Lets the paddle catch the ball."""

    TEXTURE_SOURCE = "assets/sprites/bonus-blue.bmp"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(self.TEXTURE_SOURCE, x, y)

    def apply(self, paddle: Paddle) -> None:
        paddle.set_state(PaddleState.CATCH)