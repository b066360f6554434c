"""Rendering boards back to line-oriented text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from snake_sim.board import Board
from snake_sim.errors import IoUnavailableError

logger = logging.getLogger(__name__)


def render(board: Board) -> str:
    """Return the board text, one ``\\n``-terminated line per row."""
    return "".join(line + "\n" for line in board.lines())


def print_board(board: Board, stream: TextIO) -> None:
    """Write the board to an open text stream."""
    stream.write(render(board))


def save_board(board: Board, path: str | Path) -> None:
    """Write the board to a named file.

    Raises :class:`IoUnavailableError` if the file cannot be opened.
    """
    try:
        fp = open(path, "w", encoding="ascii", newline="\n")
    except OSError as exc:
        raise IoUnavailableError(f"Cannot write board file {path}: {exc}") from exc
    with fp:
        print_board(board, fp)
    logger.debug("Saved %r to %s", board, path)
