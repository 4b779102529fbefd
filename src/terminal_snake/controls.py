"""Classification of raw key codes into game inputs."""

from __future__ import annotations

import curses
import enum

from terminal_snake.snake import Direction


class Key(enum.Enum):
    """Key events the session loop reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    OTHER = "other"


KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

_KEYMAP: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
}


def classify_key(code: int) -> Key:
    """Map a curses key code to a :class:`Key`."""
    return _KEYMAP.get(code, Key.OTHER)
