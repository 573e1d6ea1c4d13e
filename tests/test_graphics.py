import pygame
import pytest

from brickbreaker.graphics import (
    SCALE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Graphics,
    GraphicsError,
    compute_scale,
)


def test_large_display_uses_full_scale():
    assert compute_scale(WINDOW_WIDTH * SCALE, WINDOW_HEIGHT * SCALE) == SCALE


def test_display_just_too_small_for_full_scale_drops_to_one():
    assert compute_scale(WINDOW_WIDTH * SCALE - 1, WINDOW_HEIGHT * SCALE) == 1


def test_scale_never_exceeds_maximum():
    assert compute_scale(10 * WINDOW_WIDTH, 10 * WINDOW_HEIGHT) == SCALE


@pytest.mark.parametrize(
    "width, height",
    [(WINDOW_WIDTH - 1, WINDOW_HEIGHT), (WINDOW_WIDTH, WINDOW_HEIGHT - 1), (0, 0)],
)
def test_too_small_display_is_rejected(width, height):
    with pytest.raises(GraphicsError, match=f"{width}x{height}"):
        compute_scale(width, height)


def test_window_fits_display_at_computed_scale():
    for width, height in [(640, 480), (1920, 1080), (3840, 2160)]:
        scale = compute_scale(width, height)
        assert scale * WINDOW_WIDTH <= width
        assert scale * WINDOW_HEIGHT <= height


def test_missing_font_raises_and_cleans_up(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with pytest.raises(GraphicsError, match="font"):
        Graphics(font_path=tmp_path / "missing.ttf")
    assert pygame.display.get_init() is False