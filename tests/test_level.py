import pytest

from brickbreaker.brick import Brick
from brickbreaker.level import COLS, ROWS, Level, LevelError, build_bricks, parse_level


def test_grid_dimensions():
    grid = parse_level("1")
    assert len(grid) == ROWS
    assert all(len(row) == COLS for row in grid)


def test_digits_placed():
    grid = parse_level("123\n0001")
    assert grid[0][:4] == [1, 2, 3, 0]
    assert grid[1][:4] == [0, 0, 0, 1]
    assert all(value == 0 for row in grid[2:] for value in row)


def test_extra_rows_ignored():
    text = "\n".join(["1"] * (ROWS + 5))
    grid = parse_level(text)
    assert len(grid) == ROWS
    assert all(row[0] == 1 for row in grid)


def test_extra_columns_ignored_even_if_invalid():
    grid = parse_level("2" * COLS + "x9")
    assert grid[0] == [2] * COLS


def test_invalid_character_raises():
    with pytest.raises(LevelError):
        parse_level("12a", "map")


def test_build_bricks_positions_and_health():
    grid = parse_level("0100\n0003")
    bricks = build_bricks(grid)
    assert [(b.rect.x, b.rect.y) for b in bricks] == [
        (Brick.TEXTURE_WIDTH, 0),
        (3 * Brick.TEXTURE_WIDTH, Brick.TEXTURE_HEIGHT),
    ]
    assert [b.health for b in bricks] == [1, 3]


def test_unknown_digits_are_background():
    bricks = build_bricks(parse_level("4591"))
    assert len(bricks) == 1
    assert bricks[0].rect.x == 3 * Brick.TEXTURE_WIDTH


def test_zero_bricks_raises():
    with pytest.raises(LevelError):
        build_bricks(parse_level("000\n000"))


def test_level_from_file(tmp_path):
    path = tmp_path / "level"
    path.write_text("111\n020\n")
    level = Level(path)
    bricks = level.bricks()
    assert len(bricks) == 4
    assert level.bricks() is not bricks
    assert level.bricks() == bricks


def test_missing_file_raises(tmp_path):
    with pytest.raises(LevelError):
        Level(tmp_path / "missing")