"""
Static position evaluator used at search leaves.

Scores a board from the AI's point of view as a sum of independent terms:

    center column      +CENTER_WEIGHT per own seed, -CENTER_WEIGHT per opponent seed
    each 4-cell window +SCORE_3_IN_LINE  for 3 own + 1 empty
                       +SCORE_2_IN_LINE  for 2 own + 2 empty
                       -BLOCK_PENALTY    for 3 opponent + 1 empty

Windows run horizontally, vertically and along both diagonals; overlapping
windows are each scored. Completed lines score nothing here - the search
detects wins itself and assigns WIN_SCORE.
"""

from __future__ import annotations

import numpy as np

from classic_games.core.types import (
    BLOCK_PENALTY,
    CENTER_WEIGHT,
    CONNECT,
    SCORE_2_IN_LINE,
    SCORE_3_IN_LINE,
    Seed,
)
from classic_games.games.board import Board
from classic_games.games.game_rules import window_lines


def score_window(ai_count: int, opp_count: int, empty_count: int) -> int:
    """Score a single window from its cell counts."""
    score = 0
    if ai_count == 3 and empty_count == 1:
        score += SCORE_3_IN_LINE
    elif ai_count == 2 and empty_count == 2:
        score += SCORE_2_IN_LINE
    if opp_count == 3 and empty_count == 1:
        score -= BLOCK_PENALTY
    return score


def heuristic_bound(rows: int, cols: int) -> int:
    """Largest |evaluate()| possible on a rows x cols board."""
    windows = len(window_lines(rows, cols, CONNECT))
    per_window = max(SCORE_3_IN_LINE, SCORE_2_IN_LINE, BLOCK_PENALTY)
    return windows * per_window + rows * CENTER_WEIGHT


def evaluate(board: Board, ai_seed: Seed, opp_seed: Seed) -> int:
    """
    Heuristic score of `board` for `ai_seed`.

    Vectorized over all windows: counts are taken per row of the
    (N, CONNECT) window matrix and the per-window rule is applied with
    boolean masks, matching score_window() window by window.
    """
    grid = board.grid
    score = 0

    center = grid[:, board.center_column]
    score += CENTER_WEIGHT * int(np.count_nonzero(center == int(ai_seed)))
    score -= CENTER_WEIGHT * int(np.count_nonzero(center == int(opp_seed)))

    lines = window_lines(board.rows, board.cols, CONNECT)
    if len(lines) == 0:
        return score

    cells = grid.ravel()[lines]
    ai = np.count_nonzero(cells == int(ai_seed), axis=1)
    opp = np.count_nonzero(cells == int(opp_seed), axis=1)
    empty = np.count_nonzero(cells == int(Seed.EMPTY), axis=1)

    score += SCORE_3_IN_LINE * int(np.count_nonzero((ai == 3) & (empty == 1)))
    score += SCORE_2_IN_LINE * int(np.count_nonzero((ai == 2) & (empty == 2)))
    score -= BLOCK_PENALTY * int(np.count_nonzero((opp == 3) & (empty == 1)))
    return score
