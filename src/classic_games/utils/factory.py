"""
Factory functions for creating games and players.
"""

import random
from typing import Dict, Iterable, Optional

from classic_games.agent.agent import MinimaxPlayer, ParallelMinimaxPlayer, Player, RandomPlayer
from classic_games.core.types import PLAYER_SEEDS, Seed
from classic_games.engine.minimax import DEFAULT_DEPTH
from classic_games.engine.parallel import DEFAULT_WORKER_COUNT
from classic_games.games.board import DEFAULT_COLS, DEFAULT_ROWS
from classic_games.games.game_base import GameBase
from classic_games.utils.config import GAMES, PLAYER_TYPES


def create_game(
    game_name: str,
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
) -> GameBase:
    """
    Create a game instance in its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "connect_four")
        rows, cols: Board dimensions

    Returns:
        Fresh game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]
    return game_class(rows, cols)


def create_player(
    kind: str,
    depth: int = DEFAULT_DEPTH,
    rng: Optional[random.Random] = None,
    num_workers: int = DEFAULT_WORKER_COUNT,
) -> Player:
    """
    Create an AI player.

    Args:
        kind: One of PLAYER_TYPES
        depth: Search depth for minimax-based players
        rng: Random source for move-order shuffling / random play
        num_workers: Worker processes for the parallel player

    Returns:
        Player instance
    """
    rng = rng if rng is not None else random.Random()

    if kind == "minimax":
        return MinimaxPlayer(depth=depth, rng=rng)
    if kind == "random":
        return RandomPlayer(rng=rng)
    if kind == "parallel":
        return ParallelMinimaxPlayer(depth=depth, num_workers=num_workers, rng=rng)

    available = ", ".join(PLAYER_TYPES)
    raise ValueError(f"Unknown player type: {kind}. Available: {available}")


def create_players(
    kind: str,
    human_players: Iterable[int] = (),
    depth: int = DEFAULT_DEPTH,
    seed: Optional[int] = None,
    num_workers: int = DEFAULT_WORKER_COUNT,
) -> Dict[Seed, Optional[Player]]:
    """
    Map each seed to an AI player, or None for human-controlled seeds.

    With a seed, every AI player gets its own deterministic random stream.
    """
    humans = {Seed(p) for p in human_players}
    base = random.Random(seed)

    players: Dict[Seed, Optional[Player]] = {}
    for s in PLAYER_SEEDS:
        if s in humans:
            players[s] = None
        else:
            rng = random.Random(base.getrandbits(32))
            players[s] = create_player(kind, depth=depth, rng=rng, num_workers=num_workers)
    return players
