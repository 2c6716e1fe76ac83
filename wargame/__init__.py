"""Top-level package for the War card game engine."""

from . import cards, deck, errors, game, parser, scoreboard

__all__ = [
    "cards",
    "deck",
    "errors",
    "game",
    "parser",
    "scoreboard",
]
