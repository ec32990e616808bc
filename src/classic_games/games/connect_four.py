"""
Connect Four game implementation.

Moves are column indices; a move drops the current player's seed to the
lowest empty row of that column. CROSS moves first.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from classic_games.core.errors import InvalidMoveError
from classic_games.core.types import Seed, State
from classic_games.games.board import Board, CELL_STRINGS, DEFAULT_COLS, DEFAULT_ROWS
from classic_games.games.game_base import GameBase
from classic_games.games.game_state import GameState


class ConnectFour(GameBase):
    """Connect Four on a configurable grid (6x7 by default)."""

    __slots__ = ('state', 'winner', 'history')

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        self.state = GameState(Board(rows, cols), current_player=Seed.CROSS)
        self.winner: Optional[Seed] = None
        self.history: List[Tuple[int, int]] = []  # (row, column) per move

    @property
    def board(self) -> Board:
        return self.state.board

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "connect_four"

    def num_players(self) -> int:
        return 2

    def deep_clone(self) -> "ConnectFour":
        g = ConnectFour.__new__(ConnectFour)
        g.state = self.state.copy()
        g.winner = self.winner
        g.history = list(self.history)
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        """Replace the state. Move history is dropped; the winner is recomputed."""
        self.state = game_state
        self.history = []
        self.winner = self._compute_winner()

    def current_player(self) -> Seed:
        return self.state.current_player

    def valid_moves(self) -> List[int]:
        if self.winner is not None:
            return []
        return self.board.legal_moves()

    def apply_move(self, move: int) -> None:
        if self.winner is not None:
            raise InvalidMoveError(f"Game is over, {self.winner.name} has won")

        column = int(move)
        player = self.state.current_player
        row = self.board.drop(column, player)
        self.history.append((row, column))

        if self.board.is_winning_move(row, column, player):
            self.winner = player

        self.state.current_player = player.opponent

    def undo_move(self) -> int:
        if not self.history:
            raise InvalidMoveError("No move to undo")

        row, column = self.history.pop()
        player = self.board.cell(row, column)
        self.board.clear(row, column)
        self.state.current_player = player
        self.winner = None
        return column

    def is_over(self) -> bool:
        return self.winner is not None or self.board.is_full()

    def get_result(self, player: Seed) -> State:
        if self.winner == player:
            return State.WIN
        if self.winner is not None:
            return State.LOSS
        if self.board.is_full():
            return State.TIE
        return State.NEUTRAL

    def _compute_winner(self) -> Optional[Seed]:
        """Recompute winner from the current board."""
        board = self.board
        for row in range(board.rows):
            for column in range(board.cols):
                seed = board.cell(row, column)
                if seed != Seed.EMPTY and board.is_winning_move(row, column, seed):
                    return seed
        return None

    def state_string(self) -> str:
        grid = self.board.grid
        cols = self.board.cols
        lines = ["╭" + "┬".join(["───"] * cols) + "╮"]
        for i, row in enumerate(grid):
            lines.append("│ " + " │ ".join(CELL_STRINGS[int(v)] for v in row) + " │")
            if i < len(grid) - 1:
                lines.append("├" + "┼".join(["───"] * cols) + "┤")
        lines.append("╰" + "┴".join(["───"] * cols) + "╯")
        lines.append("  " + "   ".join(str(c) for c in range(cols)))
        return "\n".join(lines)
