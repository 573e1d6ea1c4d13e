"""Window, texture and text output."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from brickbreaker.objects import Rect  # noqa: E402

WINDOW_WIDTH = 416
WINDOW_HEIGHT = 480
SCALE = 2
FONT_PATH = "assets/sprites/slkscr.ttf"
FONT_SIZE = 16

Color = tuple[int, int, int]
WHITE: Color = (255, 255, 255)


class GraphicsError(Exception):
    """Raised when the window, font or a texture cannot be set up."""


def compute_scale(display_width: int, display_height: int) -> int:
    """The largest whole scale, up to SCALE, at which the window fits the display."""
    scale = SCALE
    while scale and (display_width < scale * WINDOW_WIDTH or display_height < scale * WINDOW_HEIGHT):
        scale -= 1
    if scale < 1:
        raise GraphicsError(f"Display resolution: {display_width}x{display_height} not supported.")
    return scale


class Graphics:
    """An application window that draws scaled textures and text."""

    WINDOW_WIDTH = WINDOW_WIDTH
    WINDOW_HEIGHT = WINDOW_HEIGHT
    SCALE = SCALE
    FONT_PATH = FONT_PATH

    def __init__(
        self,
        window_width: int = WINDOW_WIDTH,
        window_height: int = WINDOW_HEIGHT,
        font_path: str | os.PathLike[str] = FONT_PATH,
    ) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._open = False
        try:
            try:
                pygame.display.init()
            except pygame.error as error:
                raise GraphicsError("Unable to initialize the display.") from error
            try:
                pygame.font.init()
            except pygame.error as error:
                raise GraphicsError("Unable to initialize fonts.") from error
            try:
                self._font = pygame.font.Font(os.fspath(font_path), FONT_SIZE)
            except (OSError, pygame.error) as error:
                raise GraphicsError(f"Unable to load font from {os.fspath(font_path)}") from error

            info = pygame.display.Info()
            self.scale = compute_scale(info.current_w, info.current_h)
            try:
                self._screen = pygame.display.set_mode(
                    (window_width * self.scale, window_height * self.scale)
                )
            except pygame.error as error:
                raise GraphicsError("Unable to create window.") from error
            pygame.display.set_caption("")
        except GraphicsError:
            pygame.font.quit()
            pygame.quit()
            raise
        self._open = True

    def render(self, rect: Rect, texture_path: str) -> None:
        """Draw the top-left rect.w x rect.h part of a texture at (rect.x, rect.y)."""
        texture = self._textures.get(texture_path)
        if texture is None:
            try:
                texture = pygame.image.load(texture_path)
            except (OSError, pygame.error) as error:
                raise GraphicsError(f'Unable to load texture "{texture_path}".') from error
            self._textures[texture_path] = texture

        area = pygame.Rect(0, 0, rect.w, rect.h).clip(texture.get_rect())
        part = texture.subsurface(area)
        scaled = pygame.transform.scale(part, (area.w * self.scale, area.h * self.scale))
        self._screen.blit(scaled, (rect.x * self.scale, rect.y * self.scale))

    def render_text(self, text: str, x: float, y: float, color: Color = WHITE) -> None:
        """Draw text with its top-left corner at (x, y)."""
        surface = self._font.render(text, False, color)
        width, height = surface.get_size()
        scaled = pygame.transform.scale(surface, (width * self.scale, height * self.scale))
        self._screen.blit(scaled, (int(x) * self.scale, int(y) * self.scale))

    def clear(self) -> None:
        """Blank the window."""
        self._screen.fill((0, 0, 0))

    def present(self) -> None:
        """Show what has been drawn since the last clear."""
        pygame.display.flip()

    def close(self) -> None:
        """Release textures, font and window."""
        if not self._open:
            return
        self._textures.clear()
        self._font = None
        pygame.font.quit()
        pygame.quit()
        self._open = False

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()