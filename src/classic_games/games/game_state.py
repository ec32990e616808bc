"""
GameState - board plus side to move.
"""

from __future__ import annotations

from classic_games.core.types import Seed
from classic_games.games.board import Board


class GameState:
    """
    Lightweight game state container.

    The board is owned by the state; copy() duplicates the grid so the
    copy can be searched or mutated independently.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: Board, current_player: Seed):
        self.board = board
        self.current_player = current_player

    def copy(self) -> "GameState":
        return GameState(self.board.copy(), self.current_player)
