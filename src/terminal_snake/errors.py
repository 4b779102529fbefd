"""Exceptions raised by the terminal snake game."""


class TerminalSnakeError(Exception):
    """Base class for all game errors."""


class BoardFullError(TerminalSnakeError):
    """No free interior cell is left to place food on."""


class TerminalTooSmallError(TerminalSnakeError):
    """The terminal cannot display the whole board."""

    def __init__(self, rows: int, cols: int, need_rows: int, need_cols: int) -> None:
        super().__init__(
            f"Terminal is {cols}x{rows}; at least {need_cols}x{need_rows} "
            "is required.",
        )
        self.rows = rows
        self.cols = cols
        self.need_rows = need_rows
        self.need_cols = need_cols
