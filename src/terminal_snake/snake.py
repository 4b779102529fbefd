"""Positions, directions and the snake body."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Position(NamedTuple):
    """A board cell, ``x`` grows rightwards and ``y`` downwards."""

    x: int
    y: int

    def offset(self, direction: Direction) -> Position:
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Extra segments
    requested at construction trail behind the head, opposite to
    *heading*.
    """

    def __init__(
        self,
        start: Position,
        length: int = 1,
        heading: Direction = Direction.RIGHT,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = heading.value
        self.body: deque[Position] = deque(
            Position(start[0] - dx * i, start[1] - dy * i) for i in range(length)
        )

    @classmethod
    def from_cells(cls, cells: Iterable[tuple[int, int]]) -> Snake:
        """Build a snake from explicit cells, head first."""
        positions = [Position(*cell) for cell in cells]
        if not positions:
            raise ValueError("Snake length must be at least 1.")
        snake = cls(positions[0])
        snake.body.extend(positions[1:])
        return snake

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def occupies(self, pos: tuple[int, int]) -> bool:
        """Check whether any segment sits on *pos*."""
        return pos in self.body

    def push_head(self, pos: Position) -> None:
        self.body.appendleft(pos)

    def pop_tail(self) -> Position:
        """Remove and return the tail segment."""
        return self.body.pop()

    def cells(self) -> tuple[Position, ...]:
        """Return all segments, head first."""
        return tuple(self.body)
