"""Base classes for every physical object in the game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple, Protocol

from brickbreaker.vector import Vector2


class Rect(NamedTuple):
    """An integer rectangle: top-left corner, width and height."""

    x: int
    y: int
    w: int
    h: int


class _Renderer(Protocol):
    def render(self, rect: Rect, texture_path: str) -> None: ...


class GameObject:
    """A textured rectangle with a position and an active flag."""

    def __init__(self, texture_source: str, x: int, y: int, width: int, height: int) -> None:
        self.texture_source = texture_source
        self.pos = Vector2(float(x), float(y))
        self.width = width
        self.height = height
        self.active = True

    @property
    def rect(self) -> Rect:
        """The object's bounds, with the position truncated to integers."""
        return Rect(int(self.pos.x), int(self.pos.y), self.width, self.height)

    @property
    def x(self) -> int:
        return self.rect.x

    @x.setter
    def x(self, value: float) -> None:
        self.pos.x = float(int(value))

    @property
    def y(self) -> int:
        return self.rect.y

    @y.setter
    def y(self, value: float) -> None:
        self.pos.y = float(int(value))

    def render(self, graphics: _Renderer, x: int, y: int) -> None:
        """Draw the object's texture with its top-left corner at (x, y)."""
        graphics.render(Rect(x, y, self.width, self.height), self.texture_source)

    def intersects(self, other: GameObject) -> bool:
        """Whether the two rectangles overlap (touching edges do not count)."""
        a, b = self.rect, other.rect
        return (
            a.x + a.w > b.x
            and b.x + b.w > a.x
            and a.y + a.h > b.y
            and b.y + b.h > a.y
        )

    def overlap(self, other: GameObject) -> float:
        """The area shared by the two rectangles."""
        a, b = self.rect, other.rect
        left = max(a.x, b.x)
        top = max(a.y, b.y)
        right = min(a.x + a.w, b.x + b.w)
        bottom = min(a.y + a.h, b.y + b.h)
        return float(max(0, right - left) * max(0, bottom - top))

    def deactivate(self) -> None:
        """Mark the object for removal from play."""
        self.active = False


class MovableObject(GameObject, ABC):
    """A game object with a velocity scaled by a speed."""

    def __init__(
        self,
        texture_source: str,
        x: int,
        y: int,
        width: int,
        height: int,
        speed: float,
        x_velocity: float = 0.0,
        y_velocity: float = 0.0,
    ) -> None:
        super().__init__(texture_source, x, y, width, height)
        self.velocity = Vector2(x_velocity, y_velocity)
        self.speed = speed

    @abstractmethod
    def move(self) -> None:
        """Advance the object by one game tick."""