"""
Search engine for column-drop games.

- Minimax with alpha-beta pruning over a place/undo board
- Static window evaluator for search leaves
- Root-split parallel search over a process pool
"""

from classic_games.engine.evaluator import evaluate, score_window, heuristic_bound
from classic_games.engine.minimax import (
    DEFAULT_DEPTH,
    MinimaxSearch,
    SearchResult,
    choose_move,
)
from classic_games.engine.parallel import DEFAULT_WORKER_COUNT, ParallelSearch

__all__ = [
    "evaluate",
    "score_window",
    "heuristic_bound",
    "DEFAULT_DEPTH",
    "MinimaxSearch",
    "SearchResult",
    "choose_move",
    "DEFAULT_WORKER_COUNT",
    "ParallelSearch",
]
