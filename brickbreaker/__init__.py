"""A brick-breaking arcade game with levels, power-ups and a scoreboard."""

__version__ = "1.0.0"