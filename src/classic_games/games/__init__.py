"""
Games module - board game implementations.
"""

from classic_games.games.board import Board
from classic_games.games.game_state import GameState
from classic_games.games.game_base import GameBase
from classic_games.games.game_rules import in_bounds, center_order, window_lines, DIRECTIONS
from classic_games.games.connect_four import ConnectFour

__all__ = [
    "Board",
    "GameState",
    "GameBase",
    "ConnectFour",
    "in_bounds",
    "center_order",
    "window_lines",
    "DIRECTIONS",
]
