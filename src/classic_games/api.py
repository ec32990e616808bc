"""
Public API for playing games.

Usage:
    from classic_games import ConnectFour, MinimaxPlayer, play_game, Seed

    game = ConnectFour()
    players = {Seed.CROSS: None, Seed.NOUGHT: MinimaxPlayer(depth=6)}
    play_game(game, players)
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, TYPE_CHECKING

from classic_games.agent.agent import player_name
from classic_games.core.errors import InvalidMoveError
from classic_games.core.types import Seed, State

if TYPE_CHECKING:
    from classic_games.agent.agent import Player
    from classic_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


def _ai_turn(game: "GameBase", player: "Player") -> int:
    """AI selects and applies move."""
    seed = game.current_player()
    move = player.choose_move(game.get_state().board, seed)
    game.apply_move(move)
    return move


def _human_turn(
    game: "GameBase",
    read: Callable[[str], str],
    out: Callable[[str], None],
) -> int:
    """Prompt human for a column, apply it, return it."""
    out(f"\nYour turn ({game.current_player().name}), columns: "
        f"{','.join(map(str, sorted(game.valid_moves())))}")

    while True:
        raw = read("Column: ").strip()
        try:
            move = int(raw)
        except ValueError:
            out(f"Invalid input: {raw!r} is not a column number")
            continue
        try:
            game.apply_move(move)
        except InvalidMoveError as e:
            out(f"Illegal move: {e}")
            continue
        return move


def play_game(
    game: "GameBase",
    players: Dict[Seed, Optional["Player"]],
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> Optional[Seed]:
    """
    Main entry point: run the turn loop until the game ends.

    Parameters
    ----------
    game : GameBase
        The game instance to play. Mutated in place.
    players : Dict[Seed, Optional[Player]]
        Seed -> AI player, or None for a human-controlled seed.
    read : Callable
        Reads one line of human input (default: input).
    out : Callable
        Writes one block of output (default: print).

    Returns
    -------
    The winning seed, or None for a draw.
    """
    out(f"Starting {game.game_id()}")
    out(game.state_string())

    try:
        while not game.is_over():
            current = game.current_player()
            player = players.get(current)
            if player is None:
                move = _human_turn(game, read, out)
                out(f"\nYou played: {move}")
            else:
                move = _ai_turn(game, player)
                out(f"\n{player_name(player)} ({current.name}) played: {move}")
            logger.info("%s -> column %d", current.name, move)

            out(game.state_string())

    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    winner = next((s for s in players if game.get_result(s) == State.WIN), None)

    out("\n" + "=" * 40)
    out("GAME OVER - " + (f"{winner.name} wins" if winner is not None else "draw"))
    out("=" * 40)
    return winner


__all__ = [
    "play_game",
]
