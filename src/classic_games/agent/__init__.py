"""
Agent module - move-choosing strategies.
"""

from classic_games.agent.agent import (
    Player,
    RandomPlayer,
    MinimaxPlayer,
    ParallelMinimaxPlayer,
    player_name,
    close_player,
)

__all__ = [
    "Player",
    "RandomPlayer",
    "MinimaxPlayer",
    "ParallelMinimaxPlayer",
    "player_name",
    "close_player",
]
