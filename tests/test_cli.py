"""Tests for the command-line entry point."""

import curses
import itertools

from conftest import FakeWindow

from terminal_snake import cli
from terminal_snake.cli import _build_parser, _play, main
from terminal_snake.config import GameConfig
from terminal_snake.errors import TerminalTooSmallError


class TestCLIParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.seed is None
        assert args.log_file is None
        assert args.log_level == "INFO"

    def test_flags(self):
        args = _build_parser().parse_args(
            ["--seed", "9", "--log-file", "snake.log", "--log-level", "DEBUG"],
        )
        assert args.seed == 9
        assert args.log_file == "snake.log"
        assert args.log_level == "DEBUG"


class TestMain:
    def test_reports_final_score(self, monkeypatch, capsys):
        seen = {}

        def fake_wrapper(func, config):
            seen["config"] = config
            return 7

        monkeypatch.setattr(cli.curses, "wrapper", fake_wrapper)
        assert main(["--seed", "3"]) == 0
        assert "Game Over! Final score: 7" in capsys.readouterr().out
        assert seen["config"] == GameConfig(seed=3)

    def test_small_terminal_exits_with_error(self, monkeypatch, capsys):
        def fake_wrapper(func, config):
            raise TerminalTooSmallError(10, 20, 23, 41)

        monkeypatch.setattr(cli.curses, "wrapper", fake_wrapper)
        assert main([]) == 1
        assert "41x23" in capsys.readouterr().err

    def test_writes_log_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(cli.curses, "wrapper", lambda func, config: 0)
        assert main(["--log-file", str(tmp_path / "snake.log")]) == 0


class TestPlay:
    def test_quit_from_keyboard(self, no_cursor):
        window = FakeWindow(keys=[ord("q")])
        assert _play(window, GameConfig(seed=1)) == 0
        assert window.written[20] == "Score: 0"

    def test_arrow_key_steers_the_snake(self, no_cursor):
        window = FakeWindow(keys=[curses.KEY_DOWN])
        # Every clock reading is a full second later, so each loop ticks.
        _play(window, GameConfig(seed=1), clock=itertools.count().__next__)
        # Head came to rest on the last row above the bottom wall.
        assert window.written[18][20] == "O"
        assert "O" not in window.written[10]

    def test_ignored_key_keeps_heading(self, no_cursor):
        window = FakeWindow(keys=[ord("x")])
        _play(window, GameConfig(seed=1), clock=itertools.count().__next__)
        assert window.written[10][38] == "O"

    def test_ctrl_c_still_reports_score(self, no_cursor):
        window = FakeWindow(keys=[KeyboardInterrupt()])
        assert _play(window, GameConfig(seed=1)) == 0
        assert window.written[20] == "Score: 0"
