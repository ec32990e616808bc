"""
Job data structures for parallel matches.

Defines the input (MatchJob) and output (MatchResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from classic_games.agent.agent import Player
    from classic_games.core.types import Seed, State
    from classic_games.games.game_base import GameBase


@dataclass
class MoveRecord:
    """A single move with its context."""
    move: int
    player: "Seed"


@dataclass(frozen=True)
class MatchJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to play one game without shared state.
    """
    game: "GameBase"
    players: Tuple["Player", ...]
    seat_map: Dict["Seed", int]  # seed -> index into players
    rng_seed: int


@dataclass
class MatchResult:
    """
    Result from a completed game.

    Contains all moves made and the outcome for each seed.
    """
    moves: List[MoveRecord]
    outcomes: Dict["Seed", "State"]
    seat_map: Dict["Seed", int]
    winner: Optional["Seed"]
