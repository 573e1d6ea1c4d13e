"""Loading levels from text files."""

from __future__ import annotations

import logging
from enum import IntEnum
from os import PathLike

from brickbreaker.brick import Brick

log = logging.getLogger(__name__)

ROWS = 18
COLS = 13


class LevelError(Exception):
    """Raised when a level cannot be read or is invalid."""


class _Tile(IntEnum):
    BACKGROUND = 0
    BRICK_1 = 1
    BRICK_2 = 2
    BRICK_3 = 3


def parse_level(text: str, source: str = "<string>") -> list[list[int]]:
    """Turn level text into a ROWS x COLS grid of tile numbers.

    Each whitespace separated word is one row of digits. Extra rows and
    columns are ignored with a warning; any other character is an error.
    """
    grid = [[int(_Tile.BACKGROUND)] * COLS for _ in range(ROWS)]
    for y, line in enumerate(text.split()):
        if y >= ROWS:
            log.warning('Invalid map format from "%s" source. Ignoring extra rows...', source)
            break
        for x, char in enumerate(line):
            if x >= COLS:
                log.warning('Invalid map format from "%s" source. Ignoring extra columns...', source)
                break
            if char not in "0123456789":
                raise LevelError(f'Error loading level - invalid character in "{source}" level source.')
            grid[y][x] = int(char)
    return grid


def build_bricks(grid: list[list[int]]) -> list[Brick]:
    """Place a brick for every brick tile in the grid."""
    tiles = {int(_Tile.BRICK_1): 1, int(_Tile.BRICK_2): 2, int(_Tile.BRICK_3): 3}
    bricks = [
        Brick(col * Brick.TEXTURE_WIDTH, row * Brick.TEXTURE_HEIGHT, tiles[tile])
        for row, line in enumerate(grid)
        for col, tile in enumerate(line)
        if tile in tiles
    ]
    if not bricks:
        raise LevelError("Invalid level - zero bricks.")
    return bricks


class Level:
    """A level loaded from a file: the bricks laid out on the map."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        self.source = str(filename)
        try:
            with open(filename, encoding="utf-8") as file:
                text = file.read()
        except OSError as error:
            raise LevelError(f'Error opening "{self.source}".') from error
        except UnicodeDecodeError as error:
            raise LevelError(f'Error reading from "{self.source}".') from error
        self._bricks = build_bricks(parse_level(text, self.source))

    def bricks(self) -> list[Brick]:
        """The level's bricks, in a new list."""
        return list(self._bricks)