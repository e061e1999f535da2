"""Tests for the command-line host."""

import pytest

from connect4_engine import create_game
from connect4_engine.debug import DebugLevel, debug
from connect4_engine.interfaces.cli import QUIT, RESTART, SimpleCLI, main
from connect4_engine.utils import GameResult, Player


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers."""
    def _feed(answers):
        answers = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


class TestPlay:
    """Tests for the hot-seat game."""

    def test_vertical_win_is_announced(self, feed_input, capsys):
        feed_input(["0", "1", "0", "1", "0", "1", "0"])
        cli = SimpleCLI()
        cli.play_game(6, 7)

        out = capsys.readouterr().out
        assert "Player 1 (X) wins!" in out
        assert "Winning line: [(2, 0), (3, 0), (4, 0), (5, 0)]" in out
        assert cli.game.get_state().result == GameResult.PLAYER_ONE_WIN

    def test_draw_is_announced(self, feed_input, capsys):
        feed_input([str(c) for c in [2, 0, 0, 2, 2, 0, 0, 2, 3, 1, 1, 3, 3, 1, 1, 3]])
        cli = SimpleCLI()
        cli.play_game(4, 4)

        assert "It's a draw!" in capsys.readouterr().out
        assert cli.game.get_state().result == GameResult.DRAW

    def test_rejections_are_reported_and_keep_the_turn(self, feed_input, capsys):
        feed_input(["9", "abc", "0", "0", "0", "0", "q"])
        cli = SimpleCLI()
        cli.play_game(4, 4)

        out = capsys.readouterr().out
        assert "Column must be between 0 and 3." in out
        assert "Invalid input." in out
        assert "Column 0 is full" not in out
        assert "Quitting game." in out
        assert cli.game.get_current_player() == Player.ONE

    def test_full_column_message(self, feed_input, capsys):
        feed_input(["0", "0", "0", "0", "0", "q"])
        cli = SimpleCLI()
        cli.play_game(4, 4)

        assert "Column 0 is full, pick another one." in capsys.readouterr().out

    def test_restart_starts_a_fresh_game(self, feed_input, capsys):
        feed_input(["3", "r", "q"])
        cli = SimpleCLI()
        cli.play_game(6, 7)

        assert "Game restarted." in capsys.readouterr().out
        assert cli.game.get_cell(5, 3) == Player.EMPTY

    def test_end_of_input_quits(self, feed_input, capsys):
        feed_input([])
        cli = SimpleCLI()
        cli.play_game(6, 7)
        assert "Quitting game." in capsys.readouterr().out


class TestHumanMove:
    """Tests for parsing player input."""

    @pytest.mark.parametrize("answer,expected", [
        ("3", 3), (" 5 ", 5), ("-1", -1), ("Q", QUIT), ("r", RESTART), ("x", None),
    ])
    def test_parses_answers(self, feed_input, answer, expected):
        feed_input([answer])
        cli = SimpleCLI()
        cli.game = create_game()
        assert cli.get_human_move() == expected


class TestCommands:
    """Tests for argument handling and the benchmark."""

    def test_benchmark_checks_agree(self, capsys):
        summary = SimpleCLI().benchmark(iterations=5, seed=11)
        assert summary['games'] == 5
        assert summary['moves'] >= 5 * 7
        assert summary['disagreements'] == 0
        assert "Disagreements: 0" in capsys.readouterr().out

    def test_main_runs_benchmark(self, capsys):
        assert main(['benchmark', '--iterations', '2', '--rows', '4', '--cols', '5', '--seed', '1']) == 0
        assert "random 4x5 games" in capsys.readouterr().out

    def test_invalid_board_size_is_reported(self, feed_input, capsys):
        feed_input([])
        assert main(['--debug_level', 'none', 'play', '--rows', '3']) == 1
        assert "Error: Board dimensions must be integers >= 4" in capsys.readouterr().out

    def test_missing_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out

    def test_debug_level_flag_sets_shared_level(self):
        main(['--debug_level', 'error', 'benchmark', '--iterations', '1', '--seed', '2'])
        assert debug.level == DebugLevel.ERROR
