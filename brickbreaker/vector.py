"""A small two-dimensional vector used for positions and velocities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """A mutable (x, y) pair supporting addition and scaling."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__