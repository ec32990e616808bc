"""
Simulation module - parallel matches between players.

Provides the infrastructure for running many games in parallel and
collecting win/tie/loss tallies.
"""

from classic_games.simulation.jobs import MatchJob, MatchResult, MoveRecord
from classic_games.simulation.runner import ArenaRunner
from classic_games.simulation.worker import run_match

__all__ = [
    "MatchJob",
    "MatchResult",
    "MoveRecord",
    "ArenaRunner",
    "run_match",
]
