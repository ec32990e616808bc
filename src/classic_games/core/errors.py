"""
Exception types raised by the board model and the search engine.
"""


class GameError(Exception):
    """Base class for errors raised by classic_games."""


class InvalidMoveError(GameError, ValueError):
    """A move or cell address that the board cannot accept."""


class NoLegalMovesError(GameError, RuntimeError):
    """Search was asked for a move on a board with no legal columns."""
