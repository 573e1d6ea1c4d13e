"""Application screens: the main menu, the game, the scoreboard and game over."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Protocol

from brickbreaker.game import Game
from brickbreaker.graphics import WINDOW_HEIGHT, Color
from brickbreaker.keyboard import Key, Keyboard
from brickbreaker.objects import Rect
from brickbreaker.scoreboard import Scoreboard


class _Renderer(Protocol):
    def render(self, rect: Rect, texture_path: str) -> None: ...

    def render_text(self, text: str, x: float, y: float, color: Color) -> None: ...


class Screen(ABC):
    """One state of the application with its own input handling, logic and drawing.

    After an update, ``quit`` asks for the screen to be removed from the screen
    stack and ``next_screen`` names a screen to be pushed on top of it.
    """

    LINE_HEIGHT = 32
    HORIZONTAL_PADDING = 32
    DEFAULT_TEXT_COLOR: Color = (255, 255, 255)
    SELECTED_TEXT_COLOR: Color = (224, 215, 90)

    BACK_BUTTON_KEYBIND_TEXT = "ESCAPE"
    BACK_BUTTON_TEXT = "BACK TO MENU"

    def __init__(self) -> None:
        self.quit = False
        self.next_screen: Screen | None = None

    @abstractmethod
    def update(self, keyboard: Keyboard) -> None:
        """Handle input and advance the screen's logic by one frame."""

    @abstractmethod
    def render(self, graphics: _Renderer) -> None:
        """Draw the whole screen."""

    def reset(self) -> None:
        """Clear the quit flag and the pending next screen."""
        self.quit = False
        self.next_screen = None

    def _back_button(self) -> str:
        return f"[ {self.BACK_BUTTON_KEYBIND_TEXT} ]  {self.BACK_BUTTON_TEXT}"

    def _render_scores(
        self, graphics: _Renderer, scores: Sequence[int], lines: int, x: int, y: int
    ) -> int:
        """Draw up to ``lines`` scores one per line; return the y below the block."""
        for score in scores[:lines]:
            graphics.render_text(str(score), x, y, self.DEFAULT_TEXT_COLOR)
        return y + lines * self.LINE_HEIGHT if False else self._advance(scores, lines, x, y)

    def _advance(self, scores: Sequence[int], lines: int, x: int, y: int) -> int:
        return y + lines * self.LINE_HEIGHT


class MainMenuScreen(Screen):
    """The menu shown when the application starts."""

    NEW_GAME_BUTTON_TEXT = "NEW GAME"
    SCOREBOARD_BUTTON_TEXT = "SCOREBOARD"
    QUIT_BUTTON_TEXT = "QUIT"
    QUIT_BUTTON_KEYBIND_TEXT = "ESCAPE"

    def __init__(self, scoreboard: Scoreboard, game_factory: Callable[[], Game] = Game) -> None:
        super().__init__()
        self.scoreboard = scoreboard
        self._game_factory = game_factory
        self.items: tuple[str, ...] = (
            self.NEW_GAME_BUTTON_TEXT,
            self.SCOREBOARD_BUTTON_TEXT,
            self.QUIT_BUTTON_TEXT,
        )
        self.selected = 0

    def update(self, keyboard: Keyboard) -> None:
        if keyboard.key_pressed(Key.S):
            self.selected = (self.selected + 1) % len(self.items)
        if keyboard.key_pressed(Key.W):
            self.selected = (self.selected - 1) % len(self.items)
        if keyboard.key_pressed(Key.ESCAPE):
            self.quit = True
        if keyboard.key_pressed(Key.RETURN):
            self._confirm(self.items[self.selected])

    def _confirm(self, item: str) -> None:
        if item == self.NEW_GAME_BUTTON_TEXT:
            self.next_screen = GameScreen(self.scoreboard, self._game_factory())
        elif item == self.SCOREBOARD_BUTTON_TEXT:
            self.next_screen = ScoreboardScreen(self.scoreboard)
        elif item == self.QUIT_BUTTON_TEXT:
            self.quit = True

    def render(self, graphics: _Renderer) -> None:
        x = 3 * self.HORIZONTAL_PADDING
        y = self.LINE_HEIGHT
        for index, item in enumerate(self.items):
            y += self.LINE_HEIGHT
            color = self.SELECTED_TEXT_COLOR if index == self.selected else self.DEFAULT_TEXT_COLOR
            if item == self.QUIT_BUTTON_TEXT:
                text = f"{item}  [ {self.QUIT_BUTTON_KEYBIND_TEXT} ]"
            else:
                text = item
            graphics.render_text(text, x, y, color)


class GameScreen(Screen):
    """The screen shown while playing."""

    SCORE_TEXT = "SCORE"
    LIVES_TEXT = "LIVES"

    def __init__(self, scoreboard: Scoreboard, game: Game | None = None) -> None:
        super().__init__()
        self.scoreboard = scoreboard
        self.game = game if game is not None else Game()
        self.scoreboard.reset_current_score()

    def update(self, keyboard: Keyboard) -> None:
        if keyboard.key_pressed(Key.ESCAPE):
            self.quit = True

        self.game.update(self.scoreboard, keyboard)

        if self.game.game_over():
            self.scoreboard.save_current_score()
            # A lost or finished game is replaced, never returned to.
            self.quit = True
            self.next_screen = GameOverScreen(self.scoreboard)
        elif self.game.level_over():
            self.game.next_level()

    def render(self, graphics: _Renderer) -> None:
        self.game.render(graphics)
        x = self.HORIZONTAL_PADDING // 2
        margin = self.LINE_HEIGHT / 1.5
        graphics.render_text(
            f"{self.SCORE_TEXT}: {self.scoreboard.current_score}",
            x,
            int(margin),
            self.DEFAULT_TEXT_COLOR,
        )
        graphics.render_text(
            f"{self.LIVES_TEXT}: {self.game.lives}",
            x,
            int(WINDOW_HEIGHT - margin),
            self.DEFAULT_TEXT_COLOR,
        )


class GameOverScreen(Screen):
    """The screen shown after a game ends."""

    PAGE_HEADER_TEXT = "SCOREBOARD"
    YOUR_SCORE_TEXT = "YOUR SCORE"
    HIGHSCORE_ALERT_TEXT = "NEW HIGHSCORE"
    RESERVED_LINES = 8

    def __init__(self, scoreboard: Scoreboard) -> None:
        super().__init__()
        self.scoreboard = scoreboard

    def update(self, keyboard: Keyboard) -> None:
        if keyboard.key_pressed(Key.ESCAPE) or keyboard.key_pressed(Key.RETURN):
            self.quit = True

    def render(self, graphics: _Renderer) -> None:
        x = self.HORIZONTAL_PADDING
        y = self.LINE_HEIGHT
        graphics.render_text(self.PAGE_HEADER_TEXT, x, y, self.DEFAULT_TEXT_COLOR)

        lines = WINDOW_HEIGHT // self.LINE_HEIGHT - self.RESERVED_LINES
        y = self._render_scores(
            graphics, self.scoreboard.data, lines, 2 * self.HORIZONTAL_PADDING, y + self.LINE_HEIGHT
        )

        y += self.LINE_HEIGHT
        if self.scoreboard.current_score == self.scoreboard.highscore:
            graphics.render_text(f"! {self.HIGHSCORE_ALERT_TEXT} !", x, y, self.DEFAULT_TEXT_COLOR)

        y += self.LINE_HEIGHT
        graphics.render_text(
            f"{self.YOUR_SCORE_TEXT}: {self.scoreboard.current_score}",
            x,
            y,
            self.DEFAULT_TEXT_COLOR,
        )
        y += 2 * self.LINE_HEIGHT
        graphics.render_text(self._back_button(), x, y, self.SELECTED_TEXT_COLOR)


class ScoreboardScreen(Screen):
    """The screen listing the stored scores."""

    PAGE_HEADER_TEXT = "SCOREBOARD"
    RESERVED_LINES = 5

    def __init__(self, scoreboard: Scoreboard) -> None:
        super().__init__()
        self.scoreboard = scoreboard

    def update(self, keyboard: Keyboard) -> None:
        if keyboard.key_pressed(Key.ESCAPE) or keyboard.key_pressed(Key.RETURN):
            self.quit = True

    def render(self, graphics: _Renderer) -> None:
        x = self.HORIZONTAL_PADDING
        y = self.LINE_HEIGHT
        graphics.render_text(self.PAGE_HEADER_TEXT, x, y, self.DEFAULT_TEXT_COLOR)

        lines = WINDOW_HEIGHT // self.LINE_HEIGHT - self.RESERVED_LINES
        y = self._render_scores(
            graphics, self.scoreboard.data, lines, 2 * self.HORIZONTAL_PADDING, y + self.LINE_HEIGHT
        )

        y += self.LINE_HEIGHT
        graphics.render_text(self._back_button(), x, y, self.SELECTED_TEXT_COLOR)