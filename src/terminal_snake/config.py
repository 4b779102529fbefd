"""Startup configuration for a game session."""

from __future__ import annotations

from dataclasses import asdict, dataclass

BOARD_WIDTH = 40
BOARD_HEIGHT = 20
TICK_INTERVAL_MS = 100
POLL_INTERVAL_MS = 50


@dataclass(frozen=True)
class GameConfig:
    """Fixed constants for one session.

    Board size and pacing are not exposed to the player; only the seed can
    be chosen from the command line.
    """

    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    tick_interval_ms: int = TICK_INTERVAL_MS
    poll_interval_ms: int = POLL_INTERVAL_MS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive.")

    @property
    def tick_interval(self) -> float:
        """Seconds between two engine steps."""
        return self.tick_interval_ms / 1000.0

    @property
    def poll_interval(self) -> float:
        """Seconds to wait for a key before checking the clock."""
        return self.poll_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)
