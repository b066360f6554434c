"""Exception types raised while loading, ticking, and saving boards."""

from __future__ import annotations


class SnakeSimError(Exception):
    """Base class for all snake-sim errors."""


class DecodeError(SnakeSimError, ValueError):
    """A character outside the board alphabet was encountered."""

    def __init__(
        self,
        char: str,
        row: int | None = None,
        col: int | None = None,
    ) -> None:
        self.char = char
        self.row = row
        self.col = col
        where = f" at ({row}, {col})" if row is not None else ""
        super().__init__(f"Unknown board character {char!r}{where}.")


class ParseError(SnakeSimError, ValueError):
    """A board could not be loaded."""


class BrokenPathError(ParseError):
    """Head tracing from a tail did not reach a head."""

    def __init__(self, tail_row: int, tail_col: int, reason: str) -> None:
        self.tail_row = tail_row
        self.tail_col = tail_col
        super().__init__(
            f"Snake with tail at ({tail_row}, {tail_col}) is broken: {reason}."
        )


class IoUnavailableError(SnakeSimError, OSError):
    """An input or output file could not be opened."""
