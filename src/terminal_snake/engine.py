"""Per-tick transition function for a game state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from terminal_snake.errors import BoardFullError

if TYPE_CHECKING:
    from terminal_snake.state import GameState, Snapshot

logger = logging.getLogger(__name__)


def step(state: GameState, now: float | None = None) -> Snapshot:
    """Advance the game by one tick.

    Collisions are tested against the body as it was before the move,
    tail included, so steering into the cell the tail is about to leave
    still ends the game. A colliding move leaves snake, food and score
    untouched.

    Returns the snapshot after the tick.
    """
    if state.game_over:
        return state.snapshot()

    state.tick += 1
    if now is not None:
        state.last_update = now

    state.direction = state.next_direction
    new_head = state.snake.head.offset(state.direction)

    # --- wall check ---
    if state.grid.is_wall(new_head):
        _end_game(state, f"hit the wall at {tuple(new_head)}")
        return state.snapshot()

    # --- self-collision check ---
    if state.snake.occupies(new_head):
        _end_game(state, f"ran into itself at {tuple(new_head)}")
        return state.snapshot()

    # --- move ---
    state.snake.push_head(new_head)
    if new_head == state.food:
        state.score += 1
        try:
            state.food = state.spawner.spawn(state.snake)
        except BoardFullError:
            # No cell left to move the food to; it stays under the head.
            _end_game(state, "filled the board")
    else:
        state.snake.pop_tail()

    return state.snapshot()


def _end_game(state: GameState, reason: str) -> None:
    """Mark the session as over."""
    state.game_over = True
    logger.info(
        "Snake %s; game over at tick %d with score %d.",
        reason, state.tick, state.score,
    )
