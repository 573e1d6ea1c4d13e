"""The game-wide scoreboard, kept in a text file."""

from __future__ import annotations

import bisect
import logging
import re
from os import PathLike

log = logging.getLogger(__name__)

_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[+-]?\d+")


def _parse_score(token: str) -> int | None:
    match = _LEADING_INT.match(token)
    if match is None:
        return None
    value = int(match.group())
    if value < 0 or value > _INT_MAX:
        return None
    return value


class Scoreboard:
    """Stored scores, highest first, plus the score of the game in progress.

    Used as a context manager, the scores are written back on exit.
    """

    def __init__(self, filename: str | PathLike[str]) -> None:
        self.filename = str(filename)
        self.current_score = 0
        self._scores: list[int] = []
        try:
            self.load()
        except OSError as error:
            log.error("%s", error)

    @property
    def data(self) -> list[int]:
        """The stored scores, highest first."""
        return list(self._scores)

    @property
    def highscore(self) -> int:
        return self._scores[0] if self._scores else 0

    def load(self) -> None:
        """Read the scores from the file; a missing file gives no scores."""
        try:
            with open(self.filename, encoding="utf-8") as file:
                text = file.read()
        except FileNotFoundError:
            log.info('File "%s" does not exist. Creating "%s".', self.filename, self.filename)
            text = ""
        scores = []
        for token in text.split():
            score = _parse_score(token)
            if score is None:
                log.warning("Skipping invalid entry in %s", self.filename)
            else:
                scores.append(score)
        self._scores = sorted(scores, reverse=True)

    def save(self) -> None:
        """Write the scores to the file, one per line, highest first."""
        self._scores.sort(reverse=True)
        with open(self.filename, "w", encoding="utf-8") as file:
            file.writelines(f"{score}\n" for score in self._scores)

    def save_current_score(self) -> None:
        """Insert the current score among the stored ones, unless it is zero."""
        if self.current_score:
            negated = [-score for score in self._scores]
            index = bisect.bisect_left(negated, -self.current_score)
            self._scores.insert(index, self.current_score)

    def increase_current_score(self, amount: int) -> None:
        self.current_score += amount

    def reset_current_score(self) -> None:
        self.current_score = 0

    def __enter__(self) -> Scoreboard:
        return self

    def __exit__(self, *args: object) -> None:
        try:
            self.save()
        except OSError as error:
            log.error("%s", error)