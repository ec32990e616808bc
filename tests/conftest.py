"""
Shared test fixtures for classic_games tests.

Design principles:
- Boards are written as text, top row first ('.' empty, 'X' CROSS, 'O' NOUGHT)
- Every random source is seeded
- Minimal, focused fixtures
"""

import random
from typing import List

import pytest

from classic_games.games.board import Board
from classic_games.games.connect_four import ConnectFour


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Standard empty 6x7 board."""
    return Board()


@pytest.fixture
def cross_can_win_board() -> Board:
    """CROSS to move, completes the bottom row at column 3."""
    return Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        "OO.....",
        "XXX.O..",
    ])


@pytest.fixture
def must_block_board() -> Board:
    """CROSS to move, no win available, NOUGHT threatens column 3."""
    return Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        "XX.....",
        "OOO.X..",
    ])


@pytest.fixture
def full_board() -> Board:
    """Tiny board with no legal moves."""
    return Board.from_strings(["XOXO"])


@pytest.fixture
def midgame_boards() -> List[Board]:
    """Positions reached by seeded random play, none of them decided."""
    rng = random.Random(2024)
    boards = []
    for plies in (4, 7, 10, 13):
        game = ConnectFour()
        while len(game.history) < plies and not game.is_over():
            game.apply_move(rng.choice(game.valid_moves()))
        if not game.is_over():
            boards.append(game.board.copy())
    return boards


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> ConnectFour:
    """Fresh Connect Four game."""
    return ConnectFour()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
