"""
Board - column-drop grid used by Connect Four and the search engine.

Uses an int8 grid (row 0 = top):
    0 = empty
    1 = CROSS
    2 = NOUGHT

Gravity invariant: within a column, occupied cells are contiguous from
the bottom row upward. place() only accepts a column's drop row and
clear() only accepts its topmost piece, so no sequence of calls can
break it.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from classic_games.core.errors import InvalidMoveError
from classic_games.core.types import CONNECT, Seed
from classic_games.games.game_rules import DIRECTIONS, center_order, in_bounds

DEFAULT_ROWS = 6
DEFAULT_COLS = 7

# Text symbols for from_strings() / __str__
SYMBOLS: Dict[str, Seed] = {".": Seed.EMPTY, "X": Seed.CROSS, "O": Seed.NOUGHT}
CELL_STRINGS: Dict[int, str] = {int(seed): symbol for symbol, seed in SYMBOLS.items()}


class Board:
    """Fixed-size grid of seeds with column-drop semantics."""

    __slots__ = ("grid",)

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board needs at least one row and column, got {rows}x{cols}")
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_array(cls, grid: np.ndarray) -> "Board":
        """Build a board from a 2D array of seed values, validating gravity."""
        arr = np.asarray(grid)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D grid, got shape {arr.shape}")

        valid = {int(s) for s in Seed}
        bad = set(np.unique(arr).tolist()) - valid
        if bad:
            raise ValueError(f"Invalid cell values: {sorted(bad)}")

        board = cls(*arr.shape)
        board.grid[:] = arr
        for c in range(board.cols):
            column = board.grid[:, c]
            occupied = np.flatnonzero(column != Seed.EMPTY)
            if occupied.size and occupied[0] + occupied.size != board.rows:
                raise ValueError(f"Column {c} violates gravity")
        return board

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Board":
        """
        Build a board from text rows, top row first.

        Example:
            Board.from_strings([
                ".......",
                "...X...",
                "..OXO..",
            ])
        """
        rows = [line.replace(" ", "") for line in lines]
        try:
            values = [[int(SYMBOLS[ch]) for ch in row] for row in rows]
        except KeyError as e:
            raise ValueError(f"Unknown board symbol: {e.args[0]!r}") from e
        if not values or len({len(row) for row in values}) != 1:
            raise ValueError("Board rows must be non-empty and of equal length")
        return cls.from_array(np.array(values, dtype=np.int8))

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.grid = self.grid.copy()
        return b

    def snapshot(self) -> np.ndarray:
        """Independent copy of the grid, for before/after comparisons."""
        return self.grid.copy()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    @property
    def center_column(self) -> int:
        return self.cols // 2

    def cell(self, row: int, column: int) -> Seed:
        self._check_cell(row, column)
        return Seed(int(self.grid[row, column]))

    def drop_row(self, column: int) -> Optional[int]:
        """Lowest empty row in `column`, or None if the column is full."""
        self._check_column(column)
        grid = self.grid
        for row in range(self.rows - 1, -1, -1):
            if grid[row, column] == Seed.EMPTY:
                return row
        return None

    def top_row(self, column: int) -> Optional[int]:
        """Row of the topmost piece in `column`, or None if it is empty."""
        drop = self.drop_row(column)
        if drop is None:
            return 0
        return drop + 1 if drop + 1 < self.rows else None

    def legal_moves(self, ordering: Optional[Sequence[int]] = None) -> List[int]:
        """
        Columns whose top cell is empty.

        Args:
            ordering: Priority order to return columns in. Defaults to
                      center-first, which helps alpha-beta cut earlier.
        """
        order = center_order(self.cols) if ordering is None else ordering
        top = self.grid[0]
        moves = []
        for column in order:
            self._check_column(column)
            if top[column] == Seed.EMPTY and column not in moves:
                moves.append(column)
        return moves

    def is_full(self) -> bool:
        return not np.any(self.grid[0] == Seed.EMPTY)

    def is_winning_move(self, row: int, column: int, seed: Seed) -> bool:
        """
        Whether the seed at (row, column) completes a line of CONNECT.

        Only the four lines through the given cell are scanned, up to
        CONNECT - 1 cells each way, so cost does not grow with board size.
        """
        self._check_cell(row, column)
        if seed not in (Seed.CROSS, Seed.NOUGHT):
            raise InvalidMoveError(f"Cannot check a line for seed {seed!r}")
        grid = self.grid
        rows, cols = grid.shape
        reach = CONNECT - 1

        for dr, dc in DIRECTIONS:
            count = 0
            for k in range(-reach, reach + 1):
                r, c = row + k * dr, column + k * dc
                if not in_bounds(rows, cols, r, c):
                    continue
                if grid[r, c] == seed:
                    count += 1
                    if count >= CONNECT:
                        return True
                else:
                    count = 0
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, row: int, column: int, seed: Seed) -> None:
        """Put `seed` at (row, column). The cell must be the column's drop row."""
        self._check_cell(row, column)
        if seed not in (Seed.CROSS, Seed.NOUGHT):
            raise InvalidMoveError(f"Cannot place seed {seed!r}")
        if self.grid[row, column] != Seed.EMPTY:
            raise InvalidMoveError(f"Cell ({row},{column}) is occupied")
        if row != self.drop_row(column):
            raise InvalidMoveError(f"Cell ({row},{column}) is not the drop row of column {column}")
        self.grid[row, column] = seed

    def clear(self, row: int, column: int) -> None:
        """Empty (row, column). The cell must hold the column's topmost piece."""
        self._check_cell(row, column)
        if self.grid[row, column] == Seed.EMPTY:
            raise InvalidMoveError(f"Cell ({row},{column}) is already empty")
        if row != self.top_row(column):
            raise InvalidMoveError(f"Cell ({row},{column}) is not the top of column {column}")
        self.grid[row, column] = Seed.EMPTY

    def drop(self, column: int, seed: Seed) -> int:
        """Drop `seed` into `column`; returns the row it landed on."""
        row = self.drop_row(column)
        if row is None:
            raise InvalidMoveError(f"Column {column} is full")
        self.place(row, column, seed)
        return row

    @contextmanager
    def simulate(self, column: int, seed: Seed) -> Iterator[int]:
        """
        Drop `seed` into `column` for the duration of the block.

        The piece is removed again on every exit path, including early
        returns and exceptions raised inside the block.
        """
        row = self.drop(column, seed)
        try:
            yield row
        finally:
            self.clear(row, column)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_column(self, column: int) -> None:
        if not isinstance(column, (int, np.integer)) or isinstance(column, bool):
            raise InvalidMoveError(f"Column must be an integer, got {column!r}")
        if not 0 <= column < self.cols:
            raise InvalidMoveError(f"Column {column} out of range [0, {self.cols})")

    def _check_cell(self, row: int, column: int) -> None:
        for index in (row, column):
            if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
                raise InvalidMoveError(f"Cell indices must be integers, got ({row!r}, {column!r})")
        if not in_bounds(self.rows, self.cols, row, column):
            raise InvalidMoveError(f"Cell ({row},{column}) is off the {self.rows}x{self.cols} board")

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols})"

    def __str__(self) -> str:
        return "\n".join("".join(CELL_STRINGS[int(v)] for v in row) for row in self.grid)
