"""
Parallel arena runner.

Plays batches of games between two players across a process pool,
alternating which player moves first, and tallies outcomes per player.
"""

from __future__ import annotations

import atexit
import logging
import random
from multiprocessing.pool import Pool
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

from classic_games.core.types import Seed, Stats
from classic_games.engine.parallel import DEFAULT_WORKER_COUNT, worker_init
from classic_games.simulation.jobs import MatchJob, MatchResult
from classic_games.simulation.worker import run_match

if TYPE_CHECKING:
    from classic_games.agent.agent import Player
    from classic_games.games.game_base import GameBase

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["ArenaRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class ArenaRunner:
    """
    Manages parallel matches between two players.

    Game i seats players[i % 2] as CROSS (first to move), so over an even
    number of games each player opens equally often.
    """

    def __init__(
        self,
        num_workers: int = DEFAULT_WORKER_COUNT,
        rng: Optional[random.Random] = None,
    ):
        self.num_workers = num_workers
        self.rng = rng if rng is not None else random.Random()
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=worker_init)
            if self not in _active_runners:
                _active_runners.append(self)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(
        self,
        players: Sequence["Player"],
        game: "GameBase",
        num_games: int,
    ) -> Dict[int, Stats]:
        """
        Play `num_games` games from `game`'s current state.

        Returns:
            Player index (0 or 1) -> Stats from that player's point of view
        """
        if len(players) != 2:
            raise ValueError(f"Arena needs exactly 2 players, got {len(players)}")

        stats = {0: Stats(), 1: Stats()}
        if num_games <= 0:
            return stats

        jobs = self._make_jobs(players, game, num_games)
        try:
            results = self._ensure_pool().map(run_match, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted - terminating arena workers")
            self.shutdown(force=True)
            raise

        return self._tally(stats, results)

    def _make_jobs(
        self,
        players: Sequence["Player"],
        game: "GameBase",
        count: int,
    ) -> List[MatchJob]:
        return [
            MatchJob(
                game=game.deep_clone(),
                players=tuple(players),
                seat_map={Seed.CROSS: i % 2, Seed.NOUGHT: 1 - i % 2},
                rng_seed=self.rng.getrandbits(32),
            )
            for i in range(count)
        ]

    def _tally(self, stats: Dict[int, Stats], results: List[MatchResult]) -> Dict[int, Stats]:
        for result in results:
            for seed, index in result.seat_map.items():
                stats[index] = stats[index].record(result.outcomes[seed])

        logger.info(
            "Arena: %d games, player 0 %s, player 1 %s",
            len(results), tuple(stats[0]), tuple(stats[1]),
        )
        return stats
