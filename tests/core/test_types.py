"""
Tests for classic_games.core.types and classic_games.core.errors

Seeds, outcomes, scoring constants and Stats tallies.
"""

import pytest

from classic_games.core.errors import GameError, InvalidMoveError, NoLegalMovesError
from classic_games.core.types import (
    BLOCK_PENALTY,
    CENTER_WEIGHT,
    PLAYER_SEEDS,
    SCORE_2_IN_LINE,
    SCORE_3_IN_LINE,
    WIN_SCORE,
    Seed,
    State,
    Stats,
)


class TestSeed:
    """Seed enum tests."""

    def test_values(self):
        assert (Seed.EMPTY, Seed.CROSS, Seed.NOUGHT) == (0, 1, 2)

    def test_opponent(self):
        assert Seed.CROSS.opponent == Seed.NOUGHT
        assert Seed.NOUGHT.opponent == Seed.CROSS

    def test_empty_has_no_opponent(self):
        with pytest.raises(ValueError):
            Seed.EMPTY.opponent

    def test_player_seeds(self):
        assert PLAYER_SEEDS == (Seed.CROSS, Seed.NOUGHT)


class TestState:

    def test_states_are_distinct(self):
        values = [State.WIN.value, State.TIE.value, State.LOSS.value, State.NEUTRAL.value]
        assert len(values) == len(set(values))


class TestConstants:
    """Scoring constants."""

    def test_block_outweighs_three(self):
        assert BLOCK_PENALTY == 2 * SCORE_3_IN_LINE

    def test_ordering(self):
        assert CENTER_WEIGHT < SCORE_2_IN_LINE < SCORE_3_IN_LINE < WIN_SCORE


class TestStats:
    """Stats tally tests."""

    def test_defaults(self):
        s = Stats()
        assert s == (0, 0, 0)
        assert s.total == 0
        assert s.distribution == (0.0, 0.0, 0.0)
        assert s.utility == 0.0

    def test_immutable(self):
        s = Stats(1, 2, 3)
        with pytest.raises(AttributeError):
            s.wins = 99

    def test_record(self):
        s = Stats().record(State.WIN).record(State.WIN).record(State.TIE).record(State.LOSS)
        assert s == Stats(wins=2, ties=1, losses=1)

    def test_record_neutral_ignored(self):
        assert Stats(1, 0, 0).record(State.NEUTRAL) == Stats(1, 0, 0)

    def test_distribution(self):
        assert Stats(2, 1, 1).distribution == (0.5, 0.25, 0.25)

    def test_utility(self):
        assert Stats(3, 0, 1).utility == pytest.approx(0.5)
        assert Stats(0, 4, 0).utility == 0.0


class TestErrors:
    """Error hierarchy tests."""

    def test_invalid_move_is_value_error(self):
        assert issubclass(InvalidMoveError, GameError)
        assert issubclass(InvalidMoveError, ValueError)

    def test_no_legal_moves_is_runtime_error(self):
        assert issubclass(NoLegalMovesError, GameError)
        assert issubclass(NoLegalMovesError, RuntimeError)
