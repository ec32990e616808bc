"""
Worker process logic for parallel matches.

Workers receive MatchJob objects and return MatchResult objects. Each job
arrives pickled, so players and the game are private copies.
"""

from __future__ import annotations

import random
from typing import List, Optional

from classic_games.core.types import PLAYER_SEEDS, Seed, State
from classic_games.simulation.jobs import MatchJob, MatchResult, MoveRecord


def _reseed(job: MatchJob) -> None:
    """Give every player a job-specific random stream."""
    base = random.Random(job.rng_seed)
    for player in job.players:
        rng = getattr(player, "rng", None)
        if isinstance(rng, random.Random):
            rng.seed(base.getrandbits(32))


def run_match(job: MatchJob) -> MatchResult:
    """Play a single game to the end."""
    _reseed(job)

    game = job.game
    moves: List[MoveRecord] = []

    while not game.is_over():
        seed = game.current_player()
        player = job.players[job.seat_map[seed]]
        move = player.choose_move(game.get_state().board, seed)
        game.apply_move(move)
        moves.append(MoveRecord(move, seed))

    outcomes = {seed: game.get_result(seed) for seed in PLAYER_SEEDS}
    winner: Optional[Seed] = next(
        (seed for seed, outcome in outcomes.items() if outcome == State.WIN), None
    )

    return MatchResult(
        moves=moves,
        outcomes=outcomes,
        seat_map=dict(job.seat_map),
        winner=winner,
    )
