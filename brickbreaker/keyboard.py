"""Keyboard state tracking across frames."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Key(IntEnum):
    """The keys the game reacts to, numbered by keyboard scancode."""

    A = 4
    D = 7
    S = 22
    W = 26
    RETURN = 40
    ESCAPE = 41
    SPACE = 44


class Keyboard:
    """Remembers which keys are down this frame and which were down last frame."""

    def __init__(self) -> None:
        self._pressed: frozenset[Key] = frozenset()
        self._held: frozenset[Key] = frozenset()
        self.quit = False

    def update(self, pressed: Iterable[Key], quit_requested: bool = False) -> None:
        """Advance one frame with the given set of pressed keys."""
        if quit_requested:
            self.quit = True
        self._held = self._pressed
        self._pressed = frozenset(pressed)

    def key_down(self, key: Key) -> bool:
        """Whether the key is down this frame."""
        return key in self._pressed

    def key_held(self, key: Key) -> bool:
        """Whether the key was down the previous frame."""
        return key in self._held

    def key_pressed(self, key: Key) -> bool:
        """Whether the key went down this frame."""
        return self.key_down(key) and not self.key_held(key)