"""Board loading and snake discovery.

A board file is plain text, one row per line.  Snake metadata is not
stored anywhere; it is rebuilt by walking each path from its tail
character to its head character.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from snake_sim.board import Board
from snake_sim.cells import CellKind, delta, is_head, is_tail
from snake_sim.errors import BrokenPathError, DecodeError, IoUnavailableError
from snake_sim.snake import Snake, SnakeRegistry

logger = logging.getLogger(__name__)


def parse_lines(lines: Iterable[str]) -> Board:
    """Build a :class:`Board` from text lines.

    A single trailing ``\\n`` is stripped from each line.  A last line
    without a terminator still counts as a row.
    """
    return Board(line[:-1] if line.endswith("\n") else line for line in lines)


def parse_text(text: str) -> Board:
    """Build a :class:`Board` from the full text of a board file."""
    return load_board(io.StringIO(text))


def load_board(stream: TextIO) -> Board:
    """Read a board from an open text stream.

    Bytes the stream cannot decode are reported as :class:`DecodeError`.
    """
    try:
        return parse_lines(stream)
    except UnicodeDecodeError as exc:
        raise DecodeError(exc.object[exc.start:exc.end].decode("latin-1")) from exc


def load_board_file(path: str | Path) -> Board:
    """Read a board from a named file.

    Raises :class:`IoUnavailableError` if the file cannot be opened.
    """
    try:
        fp = open(path, encoding="latin-1")
    except OSError as exc:
        raise IoUnavailableError(f"Cannot open board file {path}: {exc}") from exc
    with fp:
        board = load_board(fp)
    logger.debug("Loaded %r from %s", board, path)
    return board


def trace_path(board: Board, tail_row: int, tail_col: int) -> list[tuple[int, int]]:
    """Return the coordinates of a snake from its tail to its head.

    The walk follows each segment's direction until it reaches a head or
    a dead head.  Raises :class:`BrokenPathError` if it leaves the board,
    lands on a non-snake cell, or visits a cell twice.
    """
    budget = board.row_count * board.max_row_length
    path: list[tuple[int, int]] = []
    seen: set[tuple[int, int]] = set()
    r, c = tail_row, tail_col

    while True:
        if not board.in_bounds(r, c):
            raise BrokenPathError(tail_row, tail_col, f"path leaves the board at ({r}, {c})")
        if (r, c) in seen:
            raise BrokenPathError(tail_row, tail_col, f"path loops back to ({r}, {c})")
        if len(path) >= budget:
            raise BrokenPathError(tail_row, tail_col, "path exceeds the board size")

        cell = board.cell(r, c)
        path.append((r, c))
        seen.add((r, c))

        if cell.kind in (CellKind.HEAD, CellKind.DEAD_HEAD):
            return path
        if cell.kind not in (CellKind.TAIL, CellKind.BODY):
            raise BrokenPathError(
                tail_row, tail_col, f"path runs into {cell.kind.value} at ({r}, {c})",
            )

        dr, dc = delta(cell.direction)
        r, c = r + dr, c + dc


def trace_head(board: Board, snake: Snake) -> None:
    """Fill in the head coordinates and liveness of *snake* from the board."""
    path = trace_path(board, snake.tail_row, snake.tail_col)
    snake.head_row, snake.head_col = path[-1]
    snake.live = is_head(board.get(*path[-1]))


def find_tails(board: Board) -> list[tuple[int, int]]:
    """Return every tail coordinate in row-major order."""
    tails: list[tuple[int, int]] = []
    for r in range(board.row_count):
        for c in range(board.row_length(r)):
            if is_tail(board.get(r, c)):
                tails.append((r, c))
    return tails


def initialize_snakes(board: Board) -> SnakeRegistry:
    """Discover every snake on *board*, in row-major order of their tails."""
    snakes = SnakeRegistry()
    for r, c in find_tails(board):
        snake = Snake(tail_row=r, tail_col=c)
        trace_head(board, snake)
        snakes.add(snake)

    logger.debug(
        "Discovered %d snakes (%d live).", len(snakes), len(snakes.live_indices()),
    )
    return snakes
