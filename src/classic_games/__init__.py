"""
Classic Games - two-player board games with a minimax AI.

The substance of the package is the Connect Four search engine: minimax
with alpha-beta pruning over a place/undo board, a window-based static
evaluator, and an optional root-split parallel search.

Quick Start:
    from classic_games import Board, Seed, choose_move

    board = Board()
    board.drop(3, Seed.CROSS)
    column = choose_move(board, Seed.NOUGHT, max_depth=6)

Modules:
    core       - Seeds, outcomes, scoring constants, errors
    games      - Board model, game wrapper, shared geometry
    engine     - Minimax search, evaluator, parallel search
    agent      - Player strategies (minimax, random, parallel)
    simulation - Parallel arena for AI-vs-AI matches
"""

from classic_games.api import play_game
from classic_games.agent import Player, MinimaxPlayer, RandomPlayer, ParallelMinimaxPlayer
from classic_games.core import Seed, State, Stats, WIN_SCORE, InvalidMoveError, NoLegalMovesError
from classic_games.engine import MinimaxSearch, ParallelSearch, SearchResult, choose_move, evaluate
from classic_games.games import Board, ConnectFour
from classic_games.simulation import ArenaRunner

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_game",
    "choose_move",
    "evaluate",
    "MinimaxSearch",
    "ParallelSearch",
    "SearchResult",
    "ArenaRunner",
    # Games
    "Board",
    "ConnectFour",
    # Players
    "Player",
    "MinimaxPlayer",
    "RandomPlayer",
    "ParallelMinimaxPlayer",
    # Types
    "Seed",
    "State",
    "Stats",
    "WIN_SCORE",
    "InvalidMoveError",
    "NoLegalMovesError",
]
