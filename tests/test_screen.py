"""Tests for the curses screen wrapper."""

import curses

import pytest
from conftest import FakeWindow

from terminal_snake.controls import Key
from terminal_snake.errors import TerminalTooSmallError
from terminal_snake.screen import CursesScreen


class TestCursesScreenSetup:
    def test_setup(self, no_cursor):
        window = FakeWindow()
        CursesScreen(window, 40, 20)
        assert window.keypad_enabled
        assert no_cursor == [0]

    def test_too_small(self, no_cursor):
        window = FakeWindow(rows=22, cols=80)
        with pytest.raises(TerminalTooSmallError) as excinfo:
            CursesScreen(window, 40, 20)
        assert excinfo.value.need_rows == 23
        assert excinfo.value.need_cols == 41
        assert "41x23" in str(excinfo.value)

    def test_cursor_not_supported(self, monkeypatch):
        def fail(visibility):
            raise curses.error("no cursor control")

        monkeypatch.setattr(curses, "curs_set", fail)
        CursesScreen(FakeWindow(), 40, 20)


class TestCursesScreenIO:
    def test_poll_without_key(self, no_cursor):
        window = FakeWindow()
        screen = CursesScreen(window, 40, 20)
        assert screen.poll(50) is None
        assert window.timeouts == [50]

    def test_poll_classifies(self, no_cursor):
        window = FakeWindow(keys=[curses.KEY_LEFT, ord("q"), ord("z")])
        screen = CursesScreen(window, 40, 20)
        assert screen.poll(50) is Key.LEFT
        assert screen.poll(50) is Key.QUIT
        assert screen.poll(50) is Key.OTHER

    def test_draw(self, no_cursor):
        window = FakeWindow()
        screen = CursesScreen(window, 40, 20)
        screen.draw(["###", "Score: 1"])
        assert window.written == {0: "###", 1: "Score: 1"}
        assert window.refreshes == 1
