"""
Shared geometry for grid games.

Line directions, move ordering and precomputed scoring windows. Window
index arrays are cached per board shape so the evaluator can score every
window with a single fancy-index into the flattened grid.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

import numpy as np

# (d_row, d_col) for horizontal, vertical, "\" diagonal and "/" diagonal
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


def in_bounds(rows: int, cols: int, r: int, c: int) -> bool:
    """Return True if (r, c) is inside a rows x cols board."""
    return 0 <= r < rows and 0 <= c < cols


def center_order(cols: int) -> List[int]:
    """
    Columns sorted center-first, left before right on equal distance.

    For 7 columns: [3, 2, 4, 1, 5, 0, 6].
    """
    center = cols // 2
    return sorted(range(cols), key=lambda c: (abs(c - center), c))


@lru_cache(maxsize=None)
def window_lines(rows: int, cols: int, length: int) -> np.ndarray:
    """
    Flat indices of every straight window of `length` cells.

    Returns an int array of shape (N, length); empty (0, length) when the
    board is too small to hold a single window.
    """
    lines = []
    for dr, dc in DIRECTIONS:
        for r in range(rows):
            for c in range(cols):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not in_bounds(rows, cols, end_r, end_c):
                    continue
                lines.append([(r + dr * k) * cols + (c + dc * k) for k in range(length)])

    result = np.array(lines, dtype=np.intp).reshape(-1, length)
    result.setflags(write=False)
    return result
