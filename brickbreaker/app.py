"""The application: a stack of screens driven by a frame loop."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from collections.abc import Callable
from os import PathLike
from types import FrameType
from typing import Protocol

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from brickbreaker.game import Game  # noqa: E402
from brickbreaker.graphics import Graphics  # noqa: E402
from brickbreaker.keyboard import Key, Keyboard  # noqa: E402
from brickbreaker.objects import Rect  # noqa: E402
from brickbreaker.scoreboard import Scoreboard  # noqa: E402
from brickbreaker.screens import MainMenuScreen, Screen  # noqa: E402

DEFAULT_FRAME_TIME = 16
DEFAULT_SCOREBOARD = "assets/scoreboard"

_PYGAME_KEYS = {
    Key.A: pygame.K_a,
    Key.D: pygame.K_d,
    Key.S: pygame.K_s,
    Key.W: pygame.K_w,
    Key.RETURN: pygame.K_RETURN,
    Key.ESCAPE: pygame.K_ESCAPE,
    Key.SPACE: pygame.K_SPACE,
}


class _Display(Protocol):
    def render(self, rect: Rect, texture_path: str) -> None: ...

    def render_text(self, text: str, x: float, y: float, color: tuple[int, int, int]) -> None: ...

    def clear(self) -> None: ...

    def present(self) -> None: ...


def _stop(signum: int, frame: FrameType | None) -> None:
    raise RuntimeError("Application stopped by force. (CTRL+C)")


class Application:
    """Keeps a stack of screens and runs the game loop over the top one."""

    def __init__(
        self,
        frame_time: int = DEFAULT_FRAME_TIME,
        scoreboard_source: str | PathLike[str] = DEFAULT_SCOREBOARD,
        game_factory: Callable[[], Game] = Game,
    ) -> None:
        self.frame_time = frame_time
        self.scoreboard = Scoreboard(scoreboard_source)
        self._screens: list[Screen] = [MainMenuScreen(self.scoreboard, game_factory)]

    @property
    def screens(self) -> tuple[Screen, ...]:
        """The screen stack, bottom first."""
        return tuple(self._screens)

    @property
    def running(self) -> bool:
        return bool(self._screens)

    def step(self, keyboard: Keyboard, graphics: _Display) -> bool:
        """Update and draw the top screen for one frame; return whether screens remain."""
        screen = self._screens[-1]
        screen.update(keyboard)
        # A screen may both quit and name a successor in one frame: it is replaced.
        if screen.quit:
            self._screens.pop()
        if screen.next_screen is not None:
            self._screens.append(screen.next_screen)
            screen.reset()

        graphics.clear()
        screen.render(graphics)
        graphics.present()
        return self.running

    def run(self) -> int:
        """Open the window and loop until the screens run out or the window closes."""
        keyboard = Keyboard()
        previous = {sig: signal.signal(sig, _stop) for sig in (signal.SIGINT, signal.SIGTERM)}
        try:
            with self.scoreboard, Graphics() as graphics:
                while self._screens:
                    frame_start = pygame.time.get_ticks()

                    quit_requested = any(event.type == pygame.QUIT for event in pygame.event.get())
                    state = pygame.key.get_pressed()
                    keyboard.update(
                        (key for key, code in _PYGAME_KEYS.items() if state[code]),
                        quit_requested,
                    )
                    if keyboard.quit:
                        break

                    self.step(keyboard, graphics)

                    delay = frame_start + self.frame_time - pygame.time.get_ticks()
                    if delay > 0:
                        pygame.time.delay(delay)
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Start the game; print the error and return 1 if it fails."""
    parser = argparse.ArgumentParser(prog="brickbreaker", description="A brick breaking arcade game.")
    parser.parse_args(argv)
    try:
        return Application(DEFAULT_FRAME_TIME, DEFAULT_SCOREBOARD).run()
    except Exception as error:
        print(error)
        return 1


if __name__ == "__main__":
    sys.exit(main())