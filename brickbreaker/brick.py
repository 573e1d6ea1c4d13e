"""Destroyable bricks placed around the map."""

from __future__ import annotations

from brickbreaker.objects import GameObject


class Brick(GameObject):
    """A brick that takes one or more hits to destroy."""

    DEFAULT_TEXTURE_PATH = "assets/sprites/brick-gray.bmp"
    TEXTURES = {
        1: "assets/sprites/brick-blue.bmp",
        2: "assets/sprites/brick-green.bmp",
        3: "assets/sprites/brick-gold.bmp",
    }
    TEXTURE_WIDTH = 32
    TEXTURE_HEIGHT = 16
    DEFAULT_SCORE_VALUE = 250
    DEFAULT_HEALTH = 1
    MAX_HEALTH = 3

    def __init__(self, x: int, y: int, health: int = DEFAULT_HEALTH) -> None:
        super().__init__(self.DEFAULT_TEXTURE_PATH, x, y, self.TEXTURE_WIDTH, self.TEXTURE_HEIGHT)
        self.value = self.DEFAULT_SCORE_VALUE
        self.health = min(health, self.MAX_HEALTH)
        self.texture_source = self.TEXTURES.get(self.health, self.DEFAULT_TEXTURE_PATH)

    def decrease_health(self) -> None:
        """Take one hit; deactivate when health runs out."""
        self.health -= 1
        if self.health <= 0:
            self.deactivate()