"""
Core module - fundamental types, constants and errors.

This module provides the building blocks used throughout the package.
"""

from classic_games.core.types import (
    Seed,
    State,
    Stats,
    PLAYER_SEEDS,
    WIN_SCORE,
    CONNECT,
    SCORE_3_IN_LINE,
    SCORE_2_IN_LINE,
    BLOCK_PENALTY,
    CENTER_WEIGHT,
)
from classic_games.core.errors import GameError, InvalidMoveError, NoLegalMovesError

__all__ = [
    # Types
    "Seed",
    "State",
    "Stats",
    # Constants
    "PLAYER_SEEDS",
    "WIN_SCORE",
    "CONNECT",
    "SCORE_3_IN_LINE",
    "SCORE_2_IN_LINE",
    "BLOCK_PENALTY",
    "CENTER_WEIGHT",
    # Errors
    "GameError",
    "InvalidMoveError",
    "NoLegalMovesError",
]
