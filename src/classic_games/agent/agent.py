"""
Players - strategies that pick a column given a board and a seed.

Any object with a choose_move(board, seed) -> int method is a Player; the
turn loop and the arena depend on nothing else.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from classic_games.core.errors import NoLegalMovesError
from classic_games.core.types import Seed
from classic_games.engine.minimax import DEFAULT_DEPTH, MinimaxSearch
from classic_games.engine.parallel import DEFAULT_WORKER_COUNT, ParallelSearch
from classic_games.games.board import Board


@runtime_checkable
class Player(Protocol):
    def choose_move(self, board: Board, seed: Seed) -> int:
        """Return a legal column for `seed`. Must leave `board` unchanged."""
        ...


@dataclass
class RandomPlayer:
    """Uniformly random legal column."""

    rng: random.Random = field(default_factory=random.Random)

    @property
    def name(self) -> str:
        return "random"

    def choose_move(self, board: Board, seed: Seed) -> int:
        moves = board.legal_moves()
        if not moves:
            raise NoLegalMovesError("Board is full, no legal moves")
        return self.rng.choice(moves)


@dataclass
class MinimaxPlayer:
    """Depth-limited minimax with alpha-beta pruning."""

    depth: int = DEFAULT_DEPTH
    rng: random.Random = field(default_factory=random.Random)
    _search: MinimaxSearch = field(init=False, repr=False)

    def __post_init__(self):
        self._search = MinimaxSearch(self.depth, self.rng)

    @property
    def name(self) -> str:
        return f"minimax(depth={self.depth})"

    def choose_move(self, board: Board, seed: Seed) -> int:
        return self._search.choose_move(board, seed)


@dataclass
class ParallelMinimaxPlayer:
    """
    Minimax with root moves scored in worker processes.

    Owns a process pool; call close() when done. Cannot itself be sent to
    a worker process.
    """

    depth: int = DEFAULT_DEPTH
    num_workers: int = DEFAULT_WORKER_COUNT
    rng: random.Random = field(default_factory=random.Random)
    _search: ParallelSearch = field(init=False, repr=False)

    def __post_init__(self):
        self._search = ParallelSearch(self.depth, self.num_workers, self.rng)

    @property
    def name(self) -> str:
        return f"parallel-minimax(depth={self.depth}, workers={self.num_workers})"

    def choose_move(self, board: Board, seed: Seed) -> int:
        return self._search.choose_move(board, seed)

    def close(self) -> None:
        self._search.shutdown()


def player_name(player: Player) -> str:
    return getattr(player, "name", type(player).__name__)


def close_player(player: Player) -> None:
    """Release resources held by a player, if it holds any."""
    close = getattr(player, "close", None)
    if close is not None:
        close()
