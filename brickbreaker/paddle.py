"""The player controlled paddle."""

from __future__ import annotations

from enum import Enum, auto

from brickbreaker.keyboard import Key, Keyboard
from brickbreaker.objects import MovableObject
from brickbreaker.vector import Vector2


class PaddleState(Enum):
    """States a paddle can be put into by bonuses."""

    DEFAULT = auto()
    FAST = auto()
    WIDE = auto()
    CATCH = auto()


class Paddle(MovableObject):
    """The paddle used to reflect the bouncing ball."""

    WIDTH = 64
    WIDE_WIDTH = 128
    HEIGHT = 16

    DEFAULT_TEXTURE_SOURCE = "assets/sprites/paddle-default.bmp"
    WIDE_TEXTURE_SOURCE = "assets/sprites/paddle-wide.bmp"
    FAST_TEXTURE_SOURCE = "assets/sprites/paddle-red.bmp"
    CATCH_TEXTURE_SOURCE = "assets/sprites/paddle-blue.bmp"

    VELOCITY = 1.0
    DEFAULT_SPEED = 5.0
    FAST_SPEED = 7.5
    DEFAULT_LIVES = 1

    _TEXTURES = {
        PaddleState.DEFAULT: DEFAULT_TEXTURE_SOURCE,
        PaddleState.FAST: FAST_TEXTURE_SOURCE,
        PaddleState.WIDE: WIDE_TEXTURE_SOURCE,
        PaddleState.CATCH: CATCH_TEXTURE_SOURCE,
    }

    def __init__(self, x: int, y: int) -> None:
        super().__init__(self.DEFAULT_TEXTURE_SOURCE, x, y, self.WIDTH, self.HEIGHT, self.DEFAULT_SPEED)
        self._state = PaddleState.DEFAULT
        self.lives = self.DEFAULT_LIVES
        self.shooting = False

    @property
    def state(self) -> PaddleState:
        return self._state

    def set_state(self, state: PaddleState) -> None:
        """Switch state, adjusting texture, width and speed; a width change keeps the paddle centred."""
        was_wide = self._state is PaddleState.WIDE
        is_wide = state is PaddleState.WIDE
        if is_wide and not was_wide:
            self.pos.x -= self.WIDTH / 2.0
        elif was_wide and not is_wide:
            self.pos.x += self.WIDTH / 2.0

        self._state = state
        self.texture_source = self._TEXTURES[state]
        self.width = self.WIDE_WIDTH if is_wide else self.WIDTH
        self.speed = self.FAST_SPEED if state is PaddleState.FAST else self.DEFAULT_SPEED

    def reset_state(self) -> None:
        self.set_state(PaddleState.DEFAULT)

    def process_input(self, keyboard: Keyboard) -> None:
        """Read movement and shooting intent from the keyboard."""
        self.shooting = keyboard.key_pressed(Key.SPACE)
        if keyboard.key_down(Key.A):
            self.velocity.x -= self.VELOCITY
        if keyboard.key_down(Key.D):
            self.velocity.x += self.VELOCITY

    def move(self) -> None:
        self.pos = self.pos + self.velocity * self.speed
        self.velocity = Vector2(0.0, 0.0)

    def gain_life(self) -> None:
        self.lives += 1

    def lose_life(self) -> None:
        self.lives -= 1
        self.reset_state()