"""
Root-split parallel search.

Each legal root column becomes one job scored by a worker process with a
full alpha-beta window. Jobs carry their own board copy, so workers never
touch the caller's board or each other's.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import random
import signal
from dataclasses import dataclass
from multiprocessing.pool import Pool
from typing import List, Optional, Tuple

from classic_games.core.types import Seed
from classic_games.engine.minimax import DEFAULT_DEPTH, MinimaxSearch, SearchResult, validate_search
from classic_games.games.board import Board

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_searches: List["ParallelSearch"] = []


def _shutdown_all():
    for search in _active_searches[:]:
        search.shutdown(force=True)


atexit.register(_shutdown_all)


def worker_init() -> None:
    """Workers ignore SIGINT, only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RootJob:
    """One root column to score, with a private board copy."""
    board: Board
    ai_seed: Seed
    column: int
    depth: int
    rng_seed: int


def score_root_move(job: RootJob) -> Tuple[int, int, int]:
    """Worker entry point. Returns (column, score, nodes)."""
    search = MinimaxSearch(job.depth, random.Random(job.rng_seed))
    score = search.score_move(job.board, job.ai_seed, job.column)
    return job.column, score, search.nodes


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class ParallelSearch:
    """
    Minimax with the root move list spread over a process pool.

    Returns the same best score as MinimaxSearch at the same depth; among
    equally scored columns one is picked with the injected random source.
    """

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        num_workers: int = DEFAULT_WORKER_COUNT,
        rng: Optional[random.Random] = None,
    ):
        if depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {depth}")
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.depth = depth
        self.num_workers = num_workers
        self.rng = rng if rng is not None else random.Random()
        self._pool: Optional[Pool] = None

        _active_searches.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=worker_init)
            if self not in _active_searches:
                _active_searches.append(self)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_searches:
            _active_searches.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def choose_move(self, board: Board, ai_seed: Seed, max_depth: Optional[int] = None) -> int:
        return self.search(board, ai_seed, max_depth).move

    def search(self, board: Board, ai_seed: Seed, max_depth: Optional[int] = None) -> SearchResult:
        depth = self.depth if max_depth is None else max_depth
        validate_search(board, ai_seed, depth)

        jobs = [
            RootJob(
                board=board.copy(),
                ai_seed=Seed(ai_seed),
                column=column,
                depth=depth,
                rng_seed=self.rng.getrandbits(32),
            )
            for column in board.legal_moves()
        ]

        try:
            results = self._ensure_pool().map(score_root_move, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted - terminating search workers")
            self.shutdown(force=True)
            raise

        best_score = max(score for _, score, _ in results)
        candidates = [column for column, score, _ in results if score == best_score]
        result = SearchResult(
            move=self.rng.choice(candidates),
            score=best_score,
            depth=depth,
            nodes=sum(nodes for _, _, nodes in results),
        )
        logger.debug(
            "%s parallel depth=%d chose column %d (score=%d, nodes=%d, jobs=%d)",
            Seed(ai_seed).name, depth, result.move, result.score, result.nodes, len(jobs),
        )
        return result
