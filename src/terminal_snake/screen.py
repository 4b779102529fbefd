"""curses-backed render sink and input source."""

from __future__ import annotations

import curses
import logging

from terminal_snake.controls import Key, classify_key
from terminal_snake.errors import TerminalTooSmallError

logger = logging.getLogger(__name__)

# Score and control hint below the board.
_STATUS_LINES = 2


class CursesScreen:
    """Draws frames and reads keys on a curses window.

    The window is expected to come from :func:`curses.wrapper`, which
    restores the terminal when the session ends or fails.
    """

    def __init__(self, stdscr: curses.window, width: int, height: int) -> None:
        rows, cols = stdscr.getmaxyx()
        # curses refuses to write the bottom-right cell, keep one spare
        # row and column.
        need_rows = height + _STATUS_LINES + 1
        need_cols = width + 1
        if rows < need_rows or cols < need_cols:
            raise TerminalTooSmallError(rows, cols, need_rows, need_cols)

        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor.")
        stdscr.keypad(True)

    def poll(self, timeout_ms: int) -> Key | None:
        """Wait up to *timeout_ms* for a key; ``None`` if none arrived."""
        self.stdscr.timeout(timeout_ms)
        code = self.stdscr.getch()
        if code == -1:
            return None
        return classify_key(code)

    def draw(self, lines: list[str]) -> None:
        """Replace the screen contents with *lines*."""
        self.stdscr.erase()
        for row, line in enumerate(lines):
            self.stdscr.addstr(row, 0, line)
        self.stdscr.refresh()
