"""
Tests for classic_games.simulation.jobs

Tests job data structures for parallel matches.
"""

import pytest

from classic_games.agent.agent import RandomPlayer
from classic_games.core.types import Seed, State
from classic_games.games.connect_four import ConnectFour
from classic_games.simulation.jobs import MatchJob, MatchResult, MoveRecord


class TestMoveRecord:
    """MoveRecord dataclass tests."""

    def test_creation(self):
        record = MoveRecord(move=3, player=Seed.CROSS)
        assert record.move == 3
        assert record.player == Seed.CROSS


class TestMatchJob:
    """MatchJob dataclass tests."""

    def test_frozen(self, game: ConnectFour):
        """MatchJob is immutable."""
        job = MatchJob(
            game=game,
            players=(RandomPlayer(), RandomPlayer()),
            seat_map={Seed.CROSS: 0, Seed.NOUGHT: 1},
            rng_seed=0,
        )
        with pytest.raises(AttributeError):
            job.rng_seed = 1


class TestMatchResult:
    """MatchResult dataclass tests."""

    def test_creation(self):
        result = MatchResult(
            moves=[MoveRecord(0, Seed.CROSS)],
            outcomes={Seed.CROSS: State.WIN, Seed.NOUGHT: State.LOSS},
            seat_map={Seed.CROSS: 1, Seed.NOUGHT: 0},
            winner=Seed.CROSS,
        )
        assert result.winner == Seed.CROSS
        assert result.seat_map[Seed.CROSS] == 1
