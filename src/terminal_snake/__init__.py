"""Single-player snake game for the terminal."""

from terminal_snake.config import GameConfig
from terminal_snake.engine import step
from terminal_snake.errors import (
    BoardFullError,
    TerminalSnakeError,
    TerminalTooSmallError,
)
from terminal_snake.food import FoodSpawner
from terminal_snake.grid import CellType, Grid
from terminal_snake.snake import Direction, Position, Snake
from terminal_snake.state import GameState, Snapshot

__all__ = [
    "BoardFullError",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameState",
    "Grid",
    "Position",
    "Snake",
    "Snapshot",
    "TerminalSnakeError",
    "TerminalTooSmallError",
    "step",
]
