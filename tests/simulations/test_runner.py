"""
Tests for classic_games.simulation.runner

Tests ArenaRunner for parallel AI-vs-AI matches.
"""

import random
import signal

import pytest

from classic_games.agent.agent import MinimaxPlayer, RandomPlayer
from classic_games.core.types import Seed, Stats
from classic_games.games.connect_four import ConnectFour
from classic_games.simulation.runner import ArenaRunner, _active_runners


@pytest.fixture(autouse=True)
def cleanup_globals():
    """Ensure the runner registry is clean before and after each test."""
    _active_runners.clear()
    yield
    for runner in _active_runners[:]:
        runner.shutdown(force=True)
    _active_runners.clear()


@pytest.fixture
def runner():
    with ArenaRunner(num_workers=1, rng=random.Random(17)) as r:
        yield r


class TestGlobalRegistry:
    """Tests for cleanup infrastructure."""

    def test_runner_registers_on_init(self):
        runner = ArenaRunner(num_workers=1)
        assert runner in _active_runners
        runner.shutdown()

    def test_runner_unregisters_on_shutdown(self):
        runner = ArenaRunner(num_workers=1)
        runner.shutdown()
        assert runner not in _active_runners


class TestWorkerInit:

    def test_pool_workers_ignore_sigint(self, runner: ArenaRunner):
        """Only the main process handles Ctrl+C."""
        handler = runner._ensure_pool().apply(signal.getsignal, (signal.SIGINT,))
        assert handler == signal.SIG_IGN


class TestMakeJobs:
    """Job construction, no pool involved."""

    def test_alternates_first_player(self, game: ConnectFour):
        runner = ArenaRunner(num_workers=1, rng=random.Random(0))
        jobs = runner._make_jobs([RandomPlayer(), RandomPlayer()], game, 4)

        assert [job.seat_map[Seed.CROSS] for job in jobs] == [0, 1, 0, 1]
        assert [job.seat_map[Seed.NOUGHT] for job in jobs] == [1, 0, 1, 0]
        runner.shutdown()

    def test_games_are_clones(self, game: ConnectFour):
        runner = ArenaRunner(num_workers=1)
        jobs = runner._make_jobs([RandomPlayer(), RandomPlayer()], game, 2)

        assert jobs[0].game is not game
        assert jobs[0].game is not jobs[1].game
        runner.shutdown()


class TestRunBatch:
    """Pool-backed batches."""

    def test_random_vs_random_totals(self, runner: ArenaRunner, game: ConnectFour):
        """Every game is counted once per player, from opposite sides."""
        stats = runner.run_batch([RandomPlayer(), RandomPlayer()], game, 6)

        assert stats[0].total == 6
        assert stats[1].total == 6
        assert stats[0].wins == stats[1].losses
        assert stats[0].losses == stats[1].wins
        assert stats[0].ties == stats[1].ties

    def test_minimax_beats_random(self, runner: ArenaRunner, game: ConnectFour):
        players = [MinimaxPlayer(depth=3), RandomPlayer()]
        stats = runner.run_batch(players, game, 4)

        assert stats[0].wins > stats[0].losses
        assert stats[0].utility > 0

    def test_does_not_touch_source_game(self, runner: ArenaRunner, game: ConnectFour):
        runner.run_batch([RandomPlayer(), RandomPlayer()], game, 2)
        assert game.history == []
        assert not game.is_over()

    def test_zero_games(self, runner: ArenaRunner, game: ConnectFour):
        stats = runner.run_batch([RandomPlayer(), RandomPlayer()], game, 0)
        assert stats == {0: Stats(), 1: Stats()}

    @pytest.mark.parametrize("count", [1, 3])
    def test_requires_two_players(self, runner: ArenaRunner, game: ConnectFour, count):
        with pytest.raises(ValueError):
            runner.run_batch([RandomPlayer()] * count, game, 2)

    def test_seeded_batches_repeat(self, game: ConnectFour):
        """Same runner seed, same outcomes."""
        results = []
        for _ in range(2):
            with ArenaRunner(num_workers=1, rng=random.Random(3)) as runner:
                results.append(runner.run_batch([RandomPlayer(), RandomPlayer()], game, 4))
        assert results[0] == results[1]
