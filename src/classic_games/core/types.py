"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the game package:
- Seed: cell contents / player identity
- State: game outcome from one player's point of view
- Stats: outcome counts with scoring properties
- Search scoring constants
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Tuple


class Seed(IntEnum):
    """Contents of a board cell. Non-empty seeds double as player IDs."""

    EMPTY = 0
    CROSS = 1
    NOUGHT = 2

    @property
    def opponent(self) -> "Seed":
        if self is Seed.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Seed.NOUGHT if self is Seed.CROSS else Seed.CROSS


PLAYER_SEEDS = (Seed.CROSS, Seed.NOUGHT)


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                         SEARCH SCORING CONSTANTS                            ║
# ║                                                                             ║
# ║  WIN_SCORE is reserved for decided positions. Every heuristic total must    ║
# ║  stay strictly inside (-WIN_SCORE, WIN_SCORE).                              ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

WIN_SCORE = 1_000_000

CONNECT = 4              # Seeds in a line needed to win; also the window length
SCORE_3_IN_LINE = 100    # 3 own + 1 empty
SCORE_2_IN_LINE = 10     # 2 own + 2 empty
BLOCK_PENALTY = 2 * SCORE_3_IN_LINE  # 3 opponent + 1 empty
CENTER_WEIGHT = 3        # Per seed in the middle column

# Utility of each outcome, used by Stats.utility
W_WEIGHT = 1.0
T_WEIGHT = 0.0
L_WEIGHT = -1.0


class Stats(NamedTuple):
    """Outcome counts with derived scoring properties."""

    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    @property
    def distribution(self) -> Tuple[float, float, float]:
        t = self.total
        if t == 0:
            return (0.0, 0.0, 0.0)
        return (self.wins / t, self.ties / t, self.losses / t)

    @property
    def utility(self) -> float:
        """Raw expected value (not normalized)."""
        if self.total == 0:
            return 0.0
        return (self.wins * W_WEIGHT + self.ties * T_WEIGHT + self.losses * L_WEIGHT) / self.total

    def record(self, outcome: State) -> "Stats":
        """Return a copy with one more game of the given outcome."""
        if outcome == State.WIN:
            return self._replace(wins=self.wins + 1)
        if outcome == State.TIE:
            return self._replace(ties=self.ties + 1)
        if outcome == State.LOSS:
            return self._replace(losses=self.losses + 1)
        return self
