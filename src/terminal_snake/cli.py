"""Command-line entry point for the terminal snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import sys
import time
from collections.abc import Callable

from terminal_snake.config import GameConfig
from terminal_snake.errors import TerminalSnakeError
from terminal_snake.grid import Grid
from terminal_snake.screen import CursesScreen
from terminal_snake.session import Session
from terminal_snake.state import GameState

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-snake",
        description="Play Snake in the terminal.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement, for reproducible games.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write log records to this file.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file.",
    )
    return parser


def _configure_logging(log_file: str | None, log_level: str) -> None:
    level = getattr(logging, log_level)
    if log_file is None:
        # The board owns the terminal; only let serious records through.
        level = max(level, logging.WARNING)
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _play(
    stdscr: curses.window,
    config: GameConfig,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    screen = CursesScreen(stdscr, config.board_width, config.board_height)
    grid = Grid(config.board_width, config.board_height)
    state = GameState.new(grid=grid, seed=config.seed, now=clock())
    return Session(state, screen, config, clock=clock).run()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``terminal-snake`` command."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_file, args.log_level)
    config = GameConfig(seed=args.seed)

    try:
        score = curses.wrapper(_play, config)
    except TerminalSnakeError as exc:
        logger.info("Could not start the game: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    print(f"\nGame Over! Final score: {score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
