"""
Depth-limited minimax search with alpha-beta pruning.

Algorithm overview:

    def minimax(board, depth, seed, alpha, beta):
        moves = shuffle(center_first(legal_moves))
        if no moves or depth == 0:
            return evaluate(board)

        for move in moves:
            with board.simulate(move, seed):       # undone on every exit
                if move wins:
                    return +/-WIN_SCORE, move      # decisive, stop here
                score = minimax(board, depth-1, other seed, alpha, beta)
            keep best (max on AI turns, min on opponent turns)
            tighten alpha (max) or beta (min)
            if alpha >= beta:
                break                              # cutoff

The search mutates the caller's board in place and relies on
Board.simulate() to restore it, so the board is identical before and
after every call. Move order is shuffled with an injectable random source:
equal-scored moves are picked in a random but seedable way.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from classic_games.core.errors import NoLegalMovesError
from classic_games.core.types import WIN_SCORE, Seed
from classic_games.engine.evaluator import evaluate, heuristic_bound
from classic_games.games.board import Board

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 6


@dataclass(frozen=True)
class SearchResult:
    """Result of a root search."""
    move: int
    score: int
    depth: int
    nodes: int


def validate_search(board: Board, ai_seed: Seed, depth: int) -> None:
    """
    Check search preconditions.

    Raises:
        ValueError: depth < 1, ai_seed is not a player seed, or the board
                    is so large that heuristic scores could reach WIN_SCORE.
        NoLegalMovesError: the board has no legal column.
    """
    if depth < 1:
        raise ValueError(f"Search depth must be >= 1, got {depth}")
    if ai_seed not in (Seed.CROSS, Seed.NOUGHT):
        raise ValueError(f"ai_seed must be CROSS or NOUGHT, got {ai_seed!r}")
    if heuristic_bound(board.rows, board.cols) >= WIN_SCORE:
        raise ValueError(f"{board.rows}x{board.cols} board is too large to search")
    if board.is_full():
        raise NoLegalMovesError("Board is full, no legal moves")


class MinimaxSearch:
    """
    Minimax + alpha-beta over a shared, mutated-and-restored board.

    One instance may be reused across moves and games. It is not safe to
    share across threads: per-search counters live on the instance.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH, rng: Optional[random.Random] = None):
        if depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {depth}")
        self.depth = depth
        self.rng = rng if rng is not None else random.Random()
        self._ai = Seed.CROSS
        self._opp = Seed.NOUGHT
        self._nodes = 0

    def choose_move(self, board: Board, ai_seed: Seed, max_depth: Optional[int] = None) -> int:
        """Best column for `ai_seed`."""
        return self.search(board, ai_seed, max_depth).move

    def search(self, board: Board, ai_seed: Seed, max_depth: Optional[int] = None) -> SearchResult:
        depth = self.depth if max_depth is None else max_depth
        validate_search(board, ai_seed, depth)
        self._start(ai_seed)

        score, move = self._minimax(board, depth, self._ai, -math.inf, math.inf)

        result = SearchResult(move=move, score=int(score), depth=depth, nodes=self._nodes)
        logger.debug(
            "%s depth=%d chose column %d (score=%d, nodes=%d)",
            self._ai.name, depth, result.move, result.score, result.nodes,
        )
        return result

    def score_move(
        self,
        board: Board,
        ai_seed: Seed,
        column: int,
        max_depth: Optional[int] = None,
    ) -> int:
        """
        Exact minimax value of playing `column` now, searched with a full
        alpha-beta window so sibling moves do not influence it.
        """
        depth = self.depth if max_depth is None else max_depth
        validate_search(board, ai_seed, depth)
        self._start(ai_seed)
        self._nodes += 1

        with board.simulate(column, self._ai) as row:
            if board.is_winning_move(row, column, self._ai):
                return WIN_SCORE
            score, _ = self._minimax(board, depth - 1, self._opp, -math.inf, math.inf)
        return int(score)

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent search."""
        return self._nodes

    def _start(self, ai_seed: Seed) -> None:
        self._ai = Seed(ai_seed)
        self._opp = self._ai.opponent
        self._nodes = 0

    def _minimax(
        self,
        board: Board,
        depth: int,
        seed: Seed,
        alpha: float,
        beta: float,
    ) -> Tuple[float, Optional[int]]:
        self._nodes += 1

        moves = board.legal_moves()
        self.rng.shuffle(moves)

        if not moves or depth == 0:
            return evaluate(board, self._ai, self._opp), None

        maximizing = seed == self._ai
        best_score = -math.inf if maximizing else math.inf
        best_move: Optional[int] = None

        for column in moves:
            with board.simulate(column, seed) as row:
                if board.is_winning_move(row, column, seed):
                    return (WIN_SCORE if maximizing else -WIN_SCORE), column
                score, _ = self._minimax(board, depth - 1, seed.opponent, alpha, beta)

            if maximizing:
                if score > best_score:
                    best_score, best_move = score, column
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score, best_move = score, column
                beta = min(beta, best_score)

            if alpha >= beta:
                break

        return best_score, best_move


def choose_move(
    board: Board,
    ai_seed: Seed,
    max_depth: int = DEFAULT_DEPTH,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick a column for `ai_seed` by depth-limited minimax with alpha-beta.

    The board is left exactly as it was passed in.

    Raises:
        NoLegalMovesError: the board is full.
        ValueError: max_depth < 1 or ai_seed is EMPTY.
    """
    return MinimaxSearch(max_depth, rng).choose_move(board, ai_seed)
