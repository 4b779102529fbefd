"""Shared fakes for tests that touch curses."""

import curses

import pytest


class FakeWindow:
    """Stands in for a curses window returned by ``curses.wrapper``."""

    def __init__(self, rows=30, cols=80, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.timeouts = []
        self.keypad_enabled = False
        self.written = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def keypad(self, flag):
        self.keypad_enabled = flag

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        if not self.keys:
            return -1
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def erase(self):
        self.written.clear()

    def addstr(self, row, col, text):
        self.written[row] = text

    def refresh(self):
        self.refreshes += 1


@pytest.fixture
def no_cursor(monkeypatch):
    """Make ``curses.curs_set`` usable without an initialised terminal."""
    calls = []
    monkeypatch.setattr(curses, "curs_set", lambda visibility: calls.append(visibility))
    return calls
