import pytest

from brickbreaker.brick import Brick


def test_default_brick():
    brick = Brick(0, 0)
    assert brick.health == Brick.DEFAULT_HEALTH
    assert brick.value == 250
    assert brick.texture_source == "assets/sprites/brick-blue.bmp"


def test_size_matches_texture():
    brick = Brick(64, 32)
    assert (brick.rect.w, brick.rect.h) == (Brick.TEXTURE_WIDTH, Brick.TEXTURE_HEIGHT)
    assert (brick.rect.x, brick.rect.y) == (64, 32)


def test_health_is_capped():
    assert Brick(0, 0, 9).health == Brick.MAX_HEALTH


@pytest.mark.parametrize(
    "health, texture",
    [
        (1, "assets/sprites/brick-blue.bmp"),
        (2, "assets/sprites/brick-green.bmp"),
        (3, "assets/sprites/brick-gold.bmp"),
        (7, "assets/sprites/brick-gold.bmp"),
        (0, "assets/sprites/brick-gray.bmp"),
    ],
)
def test_texture_follows_health(health, texture):
    assert Brick(0, 0, health).texture_source == texture


def test_single_hit_destroys_default_brick():
    brick = Brick(0, 0)
    brick.decrease_health()
    assert not brick.active


def test_stronger_brick_survives_until_last_hit():
    brick = Brick(0, 0, 3)
    brick.decrease_health()
    brick.decrease_health()
    assert brick.active
    brick.decrease_health()
    assert not brick.active