"""The bouncing ball that destroys bricks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from brickbreaker.objects import MovableObject
from brickbreaker.paddle import Paddle, PaddleState

if TYPE_CHECKING:
    from brickbreaker.brick import Brick


class Ball(MovableObject):
    """A projectile that bounces off walls, bricks and the paddle."""

    TEXTURE_WIDTH = 16
    TEXTURE_HEIGHT = 16
    TEXTURE_SOURCE = "assets/sprites/ball.bmp"

    DEFAULT_VELOCITY = 1.0
    DEFAULT_SPEED = 3.0
    MAX_SPEED = 8.0
    SPEED_STEP = 0.05

    def __init__(self, x: int, y: int, x_velocity: float = 0.0, y_velocity: float = -1.0) -> None:
        super().__init__(
            self.TEXTURE_SOURCE,
            x,
            y,
            self.TEXTURE_WIDTH,
            self.TEXTURE_HEIGHT,
            self.DEFAULT_SPEED,
            x_velocity,
            y_velocity,
        )
        self.caught_by: Paddle | None = None
        self.caught_at = 0

    def _step(self, sign: float) -> None:
        self.pos.x += sign * self.velocity.x * self.speed
        self.pos.y += sign * self.velocity.y * self.speed

    def move(self) -> None:
        """Follow the catching paddle, or fly freely once released."""
        if self.caught_by is not None and not self.caught_by.shooting:
            self.pos.x = self.caught_by.rect.x - self.caught_at
        else:
            self.caught_by = None
            self._step(1.0)

    def hit_paddle(self, paddle: Paddle) -> None:
        """Bounce off the paddle at an angle set by the point of impact."""
        self._step(-1.0)
        ball, pad = self.rect, paddle.rect
        if ball.y >= pad.y + pad.h or ball.y + ball.h <= pad.y:
            self.velocity.y *= -1
            self.pos.y = pad.y - ball.h
        else:
            self._step(1.0)
            return

        ball, pad = self.rect, paddle.rect
        centre = ball.x + ball.w // 2
        start = pad.x
        end = pad.x + pad.w
        quarter = pad.w // 4
        v = self.DEFAULT_VELOCITY

        if centre < start:
            self.velocity.y = -(v / 3)
            self.velocity.x = -(v + 2 * (v / 3))
        if start < centre <= start + quarter:
            self.velocity.y = -v
            self.velocity.x = -v
        if start + quarter < centre <= start + 2 * quarter:
            self.velocity.y = -(v + v / 2)
            self.velocity.x = -v / 2
        if start + 2 * quarter < centre <= start + 3 * quarter:
            self.velocity.y = -(v + v / 2)
            self.velocity.x = v / 2
        if start + 3 * quarter < centre <= end:
            self.velocity.y = -v
            self.velocity.x = v
        if end < centre:
            self.velocity.y = -(v / 3)
            self.velocity.x = v + 2 * (v / 3)

        if paddle.state is PaddleState.CATCH:
            self.caught_by = paddle
            self.caught_at = pad.x - self.rect.x
        else:
            self.caught_by = None

    def hit_wall(self) -> None:
        self.velocity.x *= -1

    def hit_ceiling(self) -> None:
        self.velocity.y *= -1

    def hit_brick(self, brick: Brick) -> None:
        """Bounce off the side of the brick that was hit and speed up."""
        self._step(-1.0)
        ball, other = self.rect, brick.rect
        if ball.x >= other.x + other.w or ball.x + ball.w <= other.x:
            self.velocity.x *= -1
        if ball.y >= other.y + other.h or ball.y + ball.h <= other.y:
            self.velocity.y *= -1

        if self.speed < self.MAX_SPEED:
            self.speed += self.SPEED_STEP
        else:
            self.speed = self.MAX_SPEED