"""
Configuration and game registry.
"""

from typing import Optional

from classic_games.core.types import CONNECT, WIN_SCORE
from classic_games.engine.evaluator import heuristic_bound
from classic_games.engine.minimax import DEFAULT_DEPTH
from classic_games.engine.parallel import DEFAULT_WORKER_COUNT
from classic_games.games import ConnectFour
from classic_games.games.board import DEFAULT_COLS, DEFAULT_ROWS


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "connect_four": ConnectFour,
}

# ---------------------------------------------------------------------------
# Player Registry
# ---------------------------------------------------------------------------

PLAYER_TYPES = ("minimax", "random", "parallel")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_ARENA_GAMES = 10


class Config:
    """Play/arena configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "connect_four",
        depth: int = DEFAULT_DEPTH,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        num_workers: int = DEFAULT_WORKER_COUNT,
        seed: Optional[int] = None,
        games: int = DEFAULT_ARENA_GAMES,
    ):
        # Unknown names raise KeyError
        self.game_class = GAMES[game_name]
        self.game_name = game_name

        if depth < 1:
            raise ValueError(f"depth must be >= 1, got {depth}")
        if min(rows, cols) < 1 or max(rows, cols) < CONNECT:
            raise ValueError(f"{rows}x{cols} board cannot hold a line of {CONNECT}")
        if heuristic_bound(rows, cols) >= WIN_SCORE:
            raise ValueError(f"{rows}x{cols} board is too large to search")
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        if games < 0:
            raise ValueError(f"games must be >= 0, got {games}")

        self.depth = depth
        self.rows = rows
        self.cols = cols
        self.num_workers = num_workers
        self.seed = seed
        self.games = games
