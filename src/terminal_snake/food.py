"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from terminal_snake.errors import BoardFullError
from terminal_snake.snake import Position

if TYPE_CHECKING:
    from terminal_snake.grid import Grid
    from terminal_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a uniformly random interior cell.

    Candidates are redrawn until one misses the snake. The random source
    is a NumPy generator so games can be replayed from a seed.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, snake: Snake) -> Position:
        """Return a free interior cell for the next piece of food.

        Raises :class:`BoardFullError` if the snake covers the whole
        interior, since no draw could ever succeed.
        """
        if len(snake) >= self.grid.interior_cells:
            raise BoardFullError("No free interior cell left for food.")

        attempts = 1
        candidate = self._draw()
        while snake.occupies(candidate):
            attempts += 1
            candidate = self._draw()

        logger.debug("Food placed at %s after %d draw(s).", candidate, attempts)
        return candidate

    def _draw(self) -> Position:
        # integers() excludes the high bound, so this stays off the walls.
        x = self.rng.integers(1, self.grid.width - 1)
        y = self.rng.integers(1, self.grid.height - 1)
        return Position(int(x), int(y))
