"""The game itself: levels, objects and the rules between them."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from os import PathLike
from typing import Protocol

from brickbreaker.ball import Ball
from brickbreaker.bonuses import Bonus, CatchBonus, FastPaddleBonus, HealthBonus, WidePaddleBonus
from brickbreaker.brick import Brick
from brickbreaker.graphics import WINDOW_HEIGHT, WINDOW_WIDTH
from brickbreaker.keyboard import Keyboard
from brickbreaker.level import Level
from brickbreaker.objects import GameObject, Rect
from brickbreaker.paddle import Paddle
from brickbreaker.scoreboard import Scoreboard

DEFAULT_LEVELS = ("assets/maps/1", "assets/maps/2", "assets/maps/3")
MAX_BONUSES = 4
_BONUS_TYPES = (WidePaddleBonus, FastPaddleBonus, HealthBonus, CatchBonus)


class _Renderer(Protocol):
    def render(self, rect: Rect, texture_path: str) -> None: ...


class Game:
    """One play-through: a queue of levels, the paddle, balls, bricks and bonuses."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        level_files: Iterable[str | PathLike[str]] = DEFAULT_LEVELS,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        if self.width < WINDOW_WIDTH or self.height < WINDOW_HEIGHT:
            self.width = WINDOW_WIDTH
            self.height = WINDOW_HEIGHT

        self._levels: deque[Level] = deque(Level(path) for path in level_files)
        self.bricks: list[Brick] = self._levels[0].bricks() if self._levels else []

        self.paddle = Paddle(32, self.height - 3 * 16)
        self.balls: list[Ball] = []
        self.bonuses: list[Bonus] = []
        self._added_balls: list[Ball] = []
        self._added_bonuses: list[Bonus] = []

        self._rng = rng if rng is not None else random.Random()

    @property
    def lives(self) -> int:
        return self.paddle.lives

    def next_level(self) -> None:
        """Drop the finished level and set up the next one, if any."""
        self._levels.popleft()
        if not self._levels:
            return
        self.bricks = self._levels[0].bricks()
        self.balls.clear()
        self._added_balls.clear()
        self.bonuses.clear()
        self._added_bonuses.clear()
        self.paddle.reset_state()

    def update(self, scoreboard: Scoreboard, keyboard: Keyboard) -> None:
        """Advance the game by one tick."""
        self._update_objects(keyboard)
        self._resolve_collisions(scoreboard)

    def render(self, graphics: _Renderer, x_offset: int = 0, y_offset: int = 0) -> None:
        """Draw every object, shifted by the given offsets."""
        objects: list[GameObject] = [*self.bricks, *self.bonuses, *self.balls, self.paddle]
        for obj in objects:
            obj.render(graphics, obj.rect.x + x_offset, obj.rect.y + y_offset)

    def active_balls(self) -> bool:
        """Whether at least one ball is in play."""
        return bool(self.balls or self._added_balls)

    def game_over(self) -> bool:
        """Whether the player is out of lives or has cleared the last level."""
        return (
            not self.paddle.lives and self._remaining_bricks() and not self.active_balls()
        ) or (not self._levels and not self._remaining_bricks())

    def level_over(self) -> bool:
        """Whether the current level has been cleared."""
        return not self._remaining_bricks()

    def _remaining_bricks(self) -> bool:
        return bool(self.bricks)

    def _update_objects(self, keyboard: Keyboard) -> None:
        self.paddle.process_input(keyboard)
        self.paddle.move()
        if self.paddle.shooting and not self.active_balls():
            pad = self.paddle.rect
            ball = Ball(pad.x, pad.y)
            ball.x = pad.x + (pad.w - ball.rect.w) / 2.0
            ball.y = pad.y - ball.rect.h
            self._added_balls.append(ball)

        for ball in self.balls:
            ball.move()
        for bonus in self.bonuses:
            bonus.move()

    def _resolve_collisions(self, scoreboard: Scoreboard) -> None:
        for bonus in self.bonuses:
            if bonus.rect.y > self.height:
                bonus.deactivate()
                continue
            if bonus.intersects(self.paddle):
                bonus.apply(self.paddle)
                bonus.deactivate()

        if self.paddle.rect.x < 0:
            self.paddle.x = 0
        if self.paddle.rect.x + self.paddle.rect.w > self.width:
            self.paddle.x = self.width - self.paddle.rect.w

        for ball in self.balls:
            if ball.rect.y > self.height:
                self.paddle.lose_life()
                ball.deactivate()
                continue
            if ball.rect.x < 0:
                ball.x = 0
                ball.hit_wall()
            if ball.rect.x + ball.rect.w > self.width:
                ball.x = self.width - ball.rect.w
                ball.hit_wall()
            if ball.rect.y < 0:
                ball.y = 0
                ball.hit_ceiling()

            brick = self._colliding_brick(ball)
            if brick is not None:
                ball.hit_brick(brick)
                brick.decrease_health()

            if ball.intersects(self.paddle):
                ball.hit_paddle(self.paddle)

        for brick in self.bricks:
            if not brick.active:
                pending = len(self.bonuses) + len(self._added_bonuses)
                if pending < MAX_BONUSES and self._rng.randint(0, 3) == 0:
                    rect = brick.rect
                    self._spawn_random_bonus(rect.x + rect.w // 2 - 32 // 2, rect.y)
                scoreboard.increase_current_score(brick.value)

        self._remove_inactive()
        self._flip_buffers()

    def _colliding_brick(self, obj: GameObject) -> Brick | None:
        """The intersecting brick with the largest overlap, if any."""
        best: Brick | None = None
        best_overlap = 0.0
        for brick in self.bricks:
            if obj.intersects(brick):
                area = obj.overlap(brick)
                if area > best_overlap:
                    best_overlap = area
                    best = brick
        return best

    def _spawn_random_bonus(self, x: int, y: int) -> None:
        bonus_type = _BONUS_TYPES[self._rng.randint(0, 3)]
        self._added_bonuses.append(bonus_type(x, y))

    def _remove_inactive(self) -> None:
        self.bricks = [brick for brick in self.bricks if brick.active]
        self.bonuses = [bonus for bonus in self.bonuses if bonus.active]
        self.balls = [ball for ball in self.balls if ball.active]

    def _flip_buffers(self) -> None:
        self.balls.extend(self._added_balls)
        self.bonuses.extend(self._added_bonuses)
        self._added_balls.clear()
        self._added_bonuses.clear()