"""
GameBase - abstract base class for all board games.
"""

from abc import ABC, abstractmethod
from typing import List

from classic_games.core.types import Seed, State
from classic_games.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for all board games in the collection.

    Games own the turn order and the outcome bookkeeping. Players never
    mutate a game directly: the turn loop hands them the board, receives
    a move, and applies it through apply_move().
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'connect_four')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """Deep copy of game + state."""
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> Seed:
        """Return the seed of the player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[int]:
        """Return all legal moves from the current state."""
        pass

    @abstractmethod
    def apply_move(self, move: int) -> None:
        """
        Apply a move for the current player. Mutates internal state.

        Raises:
            InvalidMoveError: The move is illegal or the game is over.
        """
        pass

    @abstractmethod
    def undo_move(self) -> int:
        """Take back the last move and return it."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self, player: Seed) -> State:
        """
        Return the outcome for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: ".", 1: "X", 2: "O"})
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
