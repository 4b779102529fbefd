"""Real-time loop driving a game state from a screen."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

from terminal_snake.config import GameConfig
from terminal_snake.controls import KEY_DIRECTIONS, Key
from terminal_snake.engine import step
from terminal_snake.render import render_lines
from terminal_snake.state import GameState

logger = logging.getLogger(__name__)


class Screen(Protocol):
    """Render sink and input source used by :class:`Session`."""

    def poll(self, timeout_ms: int) -> Key | None: ...

    def draw(self, lines: list[str]) -> None: ...


class Session:
    """Interleaves key polling and fixed-interval ticks on one thread.

    :class:`terminal_snake.screen.CursesScreen` is the real *screen*.
    *clock* must be the same clock the state's ``last_update`` was taken
    from. Ctrl-C ends the game like the quit key.
    """

    def __init__(
        self,
        state: GameState,
        screen: Screen,
        config: GameConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.state = state
        self.screen = screen
        self.config = config if config is not None else GameConfig()
        self.clock = clock

    def handle_key(self, key: Key) -> None:
        """Forward a key event to the game state."""
        if key is Key.QUIT:
            self.state.request_quit()
        elif key in KEY_DIRECTIONS:
            self.state.request_direction(KEY_DIRECTIONS[key])

    def tick_due(self, now: float) -> bool:
        return now - self.state.last_update >= self.config.tick_interval

    def render(self) -> None:
        self.screen.draw(render_lines(self.state.snapshot()))

    def run(self) -> int:
        """Play until the game ends and return the final score."""
        logger.info("Session started with config %s.", self.config.to_dict())
        self.render()

        while not self.state.is_terminal():
            try:
                self._poll_and_tick()
            except KeyboardInterrupt:
                logger.info("Interrupted at tick %d.", self.state.tick)
                self.state.request_quit()

        self.render()
        logger.info(
            "Session finished after %d ticks with score %d.",
            self.state.tick, self.state.score,
        )
        return self.state.score

    def _poll_and_tick(self) -> None:
        key = self.screen.poll(self.config.poll_interval_ms)
        if key is not None:
            self.handle_key(key)

        now = self.clock()
        if self.tick_due(now):
            step(self.state, now)
            self.render()
