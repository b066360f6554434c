"""Character board representation for the snake simulation."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snake_sim.cells import EMPTY, Cell, decode
from snake_sim.errors import DecodeError
from snake_sim.snake import Snake, SnakeRegistry

_EMPTY_BYTE = ord(EMPTY)

DEFAULT_ROWS: tuple[str, ...] = (
    "####################",
    "#                  #",
    "# d>D    *         #",
    *("#                  #",) * 14,
    "####################",
)


class Board:
    """Rows of board characters stored as per-row NumPy byte arrays.

    Each row keeps the length it was created with; rows need not be the
    same length, so every access is bounds-checked against its own row.
    Coordinates use (row, col) ordering.
    """

    def __init__(self, rows: Iterable[str] = ()) -> None:
        self.rows: list[np.ndarray] = []
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                try:
                    decode(ch)
                except DecodeError:
                    raise DecodeError(ch, r, c) from None
            self.rows.append(
                np.frombuffer(line.encode("ascii"), dtype=np.uint8).copy()
            )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def max_row_length(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def row_length(self, row: int) -> int:
        return len(self.rows[row])

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies within its row."""
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])

    def get(self, row: int, col: int) -> str:
        """Return the character at the given coordinate."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside the board.")
        return chr(self.rows[row][col])

    def set(self, row: int, col: int, char: str) -> None:
        """Set the character at the given coordinate."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside the board.")
        decode(char)
        self.rows[row][col] = ord(char)

    def cell(self, row: int, col: int) -> Cell:
        """Return the decoded cell at the given coordinate."""
        return decode(self.get(row, col))

    def line(self, row: int) -> str:
        return self.rows[row].tobytes().decode("ascii")

    def lines(self) -> list[str]:
        return [self.line(r) for r in range(len(self.rows))]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return a list of all empty cell coordinates in row-major order."""
        cells: list[tuple[int, int]] = []
        for r, row in enumerate(self.rows):
            cells.extend((r, c) for c in np.flatnonzero(row == _EMPTY_BYTE).tolist())
        return cells

    def copy(self) -> Board:
        clone = Board()
        clone.rows = [row.copy() for row in self.rows]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.lines() == other.lines()

    def __repr__(self) -> str:
        return f"Board(rows={self.row_count}, cols={self.max_row_length})"

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "row_count": self.row_count,
            "rows": self.lines(),
        }


def default_board() -> Board:
    """Return a fresh copy of the built-in 18x20 starting board."""
    return Board(DEFAULT_ROWS)


def default_state() -> tuple[Board, SnakeRegistry]:
    """Return the starting board with its snake registry built directly."""
    snakes = SnakeRegistry()
    snakes.add(Snake(tail_row=2, tail_col=2, head_row=2, head_col=4, live=True))
    return default_board(), snakes
