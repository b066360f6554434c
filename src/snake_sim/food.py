"""Food placement strategies.

The tick engine calls :meth:`FoodPlacer.place` after a snake eats.  A
placer may only turn empty cells into food; it never touches snake cells.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

import numpy as np

from snake_sim.cells import EMPTY, FOOD

if TYPE_CHECKING:
    from snake_sim.board import Board

logger = logging.getLogger(__name__)


class FoodPlacer(Protocol):
    def place(self, board: Board) -> tuple[int, int] | None:
        """Place one food cell; return its coordinate or ``None``."""
        ...


class RandomFoodPlacer:
    """Places food on a uniformly chosen empty cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def place(self, board: Board) -> tuple[int, int] | None:
        empty = board.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food placement.")
            return None

        row, col = empty[int(self.rng.integers(len(empty)))]
        board.set(row, col, FOOD)
        logger.debug("Placed food at (%d, %d).", row, col)
        return row, col


class ScriptedFoodPlacer:
    """Places food at a fixed sequence of coordinates.

    Coordinates that are no longer empty (or off the board) are skipped.
    """

    def __init__(self, positions: Iterable[tuple[int, int]]) -> None:
        self.pending: list[tuple[int, int]] = list(positions)
        self.placed: list[tuple[int, int]] = []

    def place(self, board: Board) -> tuple[int, int] | None:
        while self.pending:
            row, col = self.pending.pop(0)
            if board.in_bounds(row, col) and board.get(row, col) == EMPTY:
                board.set(row, col, FOOD)
                self.placed.append((row, col))
                return row, col
        logger.warning("Scripted food positions exhausted.")
        return None


class NullFoodPlacer:
    """Never places food."""

    def place(self, board: Board) -> tuple[int, int] | None:
        return None


def make_food_placer(name: str, seed: int | None = None) -> FoodPlacer:
    """Build a placer by its config name (``"random"`` or ``"none"``)."""
    if name == "random":
        return RandomFoodPlacer(seed=seed)
    if name == "none":
        return NullFoodPlacer()
    raise ValueError(f"Unknown food placer {name!r}.")
