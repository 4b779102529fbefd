"""Aggregate game state and player-facing requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from terminal_snake.food import FoodSpawner
from terminal_snake.grid import Grid
from terminal_snake.snake import Direction, Position, Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game, enough to draw one frame."""

    snake: tuple[Position, ...]
    food: Position
    score: int
    width: int
    height: int
    game_over: bool = False
    tick: int = 0

    @property
    def head(self) -> Position:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "score": self.score,
            "width": self.width,
            "height": self.height,
            "game_over": self.game_over,
            "tick": self.tick,
        }


class GameState:
    """Everything that changes during a session.

    The state is mutated from two places only: the input handler calls
    :meth:`request_direction` and :meth:`request_quit`, and the update
    engine advances it with :func:`terminal_snake.engine.step`.
    """

    def __init__(
        self,
        grid: Grid,
        snake: Snake,
        spawner: FoodSpawner,
        direction: Direction = Direction.RIGHT,
        food: Position | None = None,
        now: float = 0.0,
    ) -> None:
        self.grid = grid
        self.snake = snake
        self.spawner = spawner
        self.direction = direction
        self.next_direction = direction
        self.food = food if food is not None else spawner.spawn(snake)
        self.score = 0
        self.tick = 0
        self.game_over = False
        self.last_update = now

    @classmethod
    def new(
        cls,
        grid: Grid | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        now: float = 0.0,
    ) -> GameState:
        """Start a session: one segment in the centre, heading right."""
        grid = grid if grid is not None else Grid()
        if rng is None:
            rng = np.random.default_rng(seed)
        snake = Snake(grid.center)
        return cls(grid, snake, FoodSpawner(grid, rng=rng), now=now)

    def request_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next tick, ignoring 180° reversals.

        Reversal is judged against the direction of the last tick, not the
        buffered one, so a later request replaces an earlier one.
        """
        if self.game_over or direction is self.direction.opposite:
            return
        self.next_direction = direction

    def request_quit(self) -> None:
        """End the session immediately."""
        if not self.game_over:
            logger.info("Player quit at tick %d with score %d.", self.tick, self.score)
        self.game_over = True

    def is_terminal(self) -> bool:
        return self.game_over

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the drawable state."""
        return Snapshot(
            snake=self.snake.cells(),
            food=self.food,
            score=self.score,
            width=self.grid.width,
            height=self.grid.height,
            game_over=self.game_over,
            tick=self.tick,
        )
