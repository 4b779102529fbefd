"""Turn a snapshot into the lines of text shown on screen."""

from __future__ import annotations

import numpy as np

from terminal_snake.grid import CellType, Grid
from terminal_snake.state import Snapshot

CONTROL_HINT = "Use arrow keys to move, 'q' to quit"

# Indexed by CellType.
_GLYPHS = np.array([" ", "#", "o", "O", "*"])


def paint(snapshot: Snapshot) -> np.ndarray:
    """Return the ``(height, width)`` cell map for *snapshot*.

    Later layers win: food, then body, then head.
    """
    cells = Grid(snapshot.width, snapshot.height).blank()
    fx, fy = snapshot.food
    cells[fy, fx] = CellType.FOOD
    for x, y in snapshot.snake[1:]:
        cells[y, x] = CellType.BODY
    hx, hy = snapshot.head
    cells[hy, hx] = CellType.HEAD
    return cells


def render_lines(snapshot: Snapshot) -> list[str]:
    """Render the board followed by the score and control hint lines."""
    lines = ["".join(row) for row in _GLYPHS[paint(snapshot)]]
    lines.append(f"Score: {snapshot.score}")
    lines.append(CONTROL_HINT)
    return lines
