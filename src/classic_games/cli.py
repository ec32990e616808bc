"""
Command-line interface for playing and benchmarking the game AIs.
"""

import argparse
import logging
import random
from typing import List, Optional, Sequence

from classic_games.agent.agent import close_player, player_name
from classic_games.api import play_game
from classic_games.simulation import ArenaRunner
from classic_games.utils.config import Config, GAMES, PLAYER_TYPES
from classic_games.utils.factory import create_game, create_player, create_players

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="connect_four",
        help="Game to play (default: connect_four)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="Search depth for minimax players (default: 6)",
    )
    parser.add_argument("--rows", type=int, default=None, help="Board rows (default: 6)")
    parser.add_argument("--cols", type=int, default=None, help="Board columns (default: 7)")
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible tie-breaking",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Worker processes for parallel search / arena (default: CPU count - 1)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Classic board games against a minimax AI"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a game in the terminal")
    _add_common_args(play)
    play.add_argument(
        "--ai",
        choices=PLAYER_TYPES,
        default="minimax",
        help="AI player type (default: minimax)",
    )
    play.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays for all players (no human players)",
    )
    play.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )

    arena = sub.add_parser("arena", help="Pit two AI players against each other")
    _add_common_args(arena)
    arena.add_argument(
        "--first",
        choices=("minimax", "random"),
        default="minimax",
        help="Player 0 type (default: minimax)",
    )
    arena.add_argument(
        "--second",
        choices=("minimax", "random"),
        default="random",
        help="Player 1 type (default: random)",
    )
    arena.add_argument(
        "--games", "-n",
        type=int,
        default=None,
        help="Number of games, alternating who moves first (default: 10)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: Optional[str], num_players: int, game_id: str, self_play: bool) -> List[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    invalid = [p for p in human_players if p < 1 or p > num_players]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. {game_id} only supports players 1-{num_players}."
        )

    return sorted(set(human_players))


def build_config(args: argparse.Namespace) -> Config:
    """Config from parsed arguments; unset options keep Config defaults."""
    config_kwargs = {"game_name": args.game, "seed": args.seed}
    for name, value in (
        ("depth", args.depth),
        ("rows", args.rows),
        ("cols", args.cols),
        ("num_workers", args.workers),
        ("games", getattr(args, "games", None)),
    ):
        if value is not None:
            config_kwargs[name] = value
    return Config(**config_kwargs)


def run_play(args: argparse.Namespace, config: Config) -> int:
    game = create_game(config.game_name, config.rows, config.cols)
    human_players = parse_human_players(args.players, game.num_players(), game.game_id(), args.self_play)

    players = create_players(
        args.ai,
        human_players=human_players,
        depth=config.depth,
        seed=config.seed,
        num_workers=config.num_workers,
    )
    try:
        play_game(game, players)
    finally:
        for player in players.values():
            if player is not None:
                close_player(player)
    return 0


def run_arena(args: argparse.Namespace, config: Config) -> int:
    game = create_game(config.game_name, config.rows, config.cols)
    base = random.Random(config.seed)
    contestants = [
        create_player(kind, depth=config.depth, rng=random.Random(base.getrandbits(32)))
        for kind in (args.first, args.second)
    ]

    with ArenaRunner(config.num_workers, rng=random.Random(base.getrandbits(32))) as runner:
        stats = runner.run_batch(contestants, game, config.games)

    for index, player in enumerate(contestants):
        s = stats[index]
        print(f"Player {index} {player_name(player)}: "
              f"{s.wins} wins, {s.ties} ties, {s.losses} losses")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_config(args)

    if args.command == "arena":
        return run_arena(args, config)
    return run_play(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
