"""Board geometry for the snake game."""

from __future__ import annotations

import enum

import numpy as np

from terminal_snake.config import BOARD_HEIGHT, BOARD_WIDTH
from terminal_snake.snake import Position


class CellType(enum.IntEnum):
    """Integer codes stored in a painted cell map."""

    EMPTY = 0
    WALL = 1
    BODY = 2
    HEAD = 3
    FOOD = 4


class Grid:
    """Fixed-size board surrounded by a one-cell wall ring.

    Coordinates are ``(x, y)`` with the origin in the top-left corner.
    Cell maps returned by :meth:`blank` are indexed ``[y, x]`` to match
    NumPy row-major layout.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        self.width = width
        self.height = height

    @property
    def center(self) -> Position:
        """Return the starting cell for a new snake."""
        return Position(self.width // 2, self.height // 2)

    @property
    def interior_cells(self) -> int:
        """Number of playable cells inside the wall ring."""
        return (self.width - 2) * (self.height - 2)

    def is_wall(self, pos: Position) -> bool:
        """Check whether a coordinate lies on or beyond the border."""
        x, y = pos
        return x <= 0 or y <= 0 or x >= self.width - 1 or y >= self.height - 1

    def blank(self) -> np.ndarray:
        """Return an ``(height, width)`` cell map holding only the walls."""
        cells = np.full((self.height, self.width), CellType.EMPTY, dtype=np.int8)
        cells[0, :] = CellType.WALL
        cells[-1, :] = CellType.WALL
        cells[:, 0] = CellType.WALL
        cells[:, -1] = CellType.WALL
        return cells
