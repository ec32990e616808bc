"""
Tests for classic_games.cli
"""

import pytest

from classic_games.cli import build_config, main, parse_args, parse_human_players


class TestParseHumanPlayers:

    def test_self_play_without_players(self):
        assert parse_human_players(None, 2, "connect_four", self_play=True) == []

    def test_default_is_player_one(self):
        assert parse_human_players(None, 2, "connect_four", self_play=False) == [1]

    def test_players_override_self_play(self):
        assert parse_human_players("2", 2, "connect_four", self_play=True) == [2]

    def test_sorted_unique(self):
        assert parse_human_players("2, 1,2", 2, "connect_four", self_play=False) == [1, 2]

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="only supports players 1-2"):
            parse_human_players("3", 2, "connect_four", self_play=False)

    def test_not_integers(self):
        with pytest.raises(ValueError, match="Invalid --players format"):
            parse_human_players("one", 2, "connect_four", self_play=False)


class TestParseArgs:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_play_defaults(self):
        args = parse_args(["play"])
        assert args.command == "play"
        assert args.ai == "minimax"
        assert args.self_play is False
        assert args.log_level == "WARNING"

    def test_arena_options(self):
        args = parse_args(["arena", "--first", "random", "--second", "minimax", "-n", "4"])
        assert (args.first, args.second, args.games) == ("random", "minimax", 4)


class TestBuildConfig:

    def test_unset_options_keep_defaults(self):
        config = build_config(parse_args(["play", "--depth", "3"]))
        assert config.depth == 3
        assert (config.rows, config.cols) == (6, 7)

    def test_arena_games(self):
        config = build_config(parse_args(["arena", "--games", "0", "--seed", "5"]))
        assert config.games == 0
        assert config.seed == 5

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            build_config(parse_args(["play", "--depth", "0"]))

    def test_oversized_board_rejected_before_play(self):
        with pytest.raises(ValueError, match="too large to search"):
            build_config(parse_args(["play", "--rows", "100", "--cols", "100"]))


class TestMain:

    def test_arena(self, capsys):
        code = main([
            "arena", "--games", "2", "--workers", "1", "--depth", "2", "--seed", "1",
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Player 0 minimax(depth=2):" in out
        assert "Player 1 random:" in out

    def test_self_play(self, capsys):
        code = main([
            "play", "--self-play", "--ai", "random", "--seed", "3", "--rows", "4", "--cols", "4",
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Starting connect_four" in out
        assert "GAME OVER" in out
