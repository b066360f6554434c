"""Tick-based engine that advances every live snake on a board."""

from __future__ import annotations

import enum
import logging

from snake_sim.board import Board
from snake_sim.cells import (
    DEAD_HEAD,
    EMPTY,
    CellKind,
    body_to_tail,
    delta,
    head,
    head_to_body,
)
from snake_sim.food import FoodPlacer, NullFoodPlacer
from snake_sim.snake import SnakeRegistry

logger = logging.getLogger(__name__)


class TickOutcome(enum.Enum):
    """What happened to a live snake during one tick."""

    MOVE = "move"
    GROW = "grow"
    COLLIDE = "collide"


class TickEngine:
    """Step-based engine over a board and its snake registry.

    The engine mutates *board* and *snakes* in place.  Snakes are updated
    one after another in registry order, so a snake sees every cell the
    snakes before it wrote during the same tick.
    """

    def __init__(
        self,
        board: Board,
        snakes: SnakeRegistry,
        food_placer: FoodPlacer | None = None,
    ) -> None:
        self.board = board
        self.snakes = snakes
        self.food_placer = food_placer if food_placer is not None else NullFoodPlacer()
        self.tick = 0

    def update_state(self) -> list[TickOutcome | None]:
        """Advance the simulation by one tick.

        Returns one entry per snake in registry order; ``None`` marks a
        snake that was already dead and did not act.
        """
        outcomes: list[TickOutcome | None] = []
        for index in range(len(self.snakes)):
            if not self.snakes[index].live:
                outcomes.append(None)
                continue
            outcomes.append(self._update_snake(index))
        self.tick += 1
        return outcomes

    def run(self, ticks: int) -> list[list[TickOutcome | None]]:
        """Advance *ticks* times and return the outcomes of each tick."""
        return [self.update_state() for _ in range(ticks)]

    def _update_snake(self, index: int) -> TickOutcome:
        snake = self.snakes[index]
        direction = self.board.cell(snake.head_row, snake.head_col).direction
        dr, dc = delta(direction)
        next_r, next_c = snake.head_row + dr, snake.head_col + dc

        if self.board.in_bounds(next_r, next_c):
            next_kind = self.board.cell(next_r, next_c).kind
        else:
            next_kind = CellKind.WALL

        if next_kind == CellKind.EMPTY:
            self._advance_head(index, next_r, next_c)
            self._advance_tail(index)
            return TickOutcome.MOVE

        if next_kind == CellKind.FOOD:
            self._advance_head(index, next_r, next_c)
            self.food_placer.place(self.board)
            return TickOutcome.GROW

        self.board.set(snake.head_row, snake.head_col, DEAD_HEAD)
        snake.live = False
        logger.info(
            "Snake %d died at (%d, %d) on tick %d.",
            index, snake.head_row, snake.head_col, self.tick + 1,
        )
        return TickOutcome.COLLIDE

    def _advance_head(self, index: int, next_r: int, next_c: int) -> None:
        snake = self.snakes[index]
        direction = self.board.cell(snake.head_row, snake.head_col).direction
        self.board.set(snake.head_row, snake.head_col, head_to_body(direction))
        self.board.set(next_r, next_c, head(direction))
        snake.head_row, snake.head_col = next_r, next_c

    def _advance_tail(self, index: int) -> None:
        snake = self.snakes[index]
        direction = self.board.cell(snake.tail_row, snake.tail_col).direction
        self.board.set(snake.tail_row, snake.tail_col, EMPTY)

        dr, dc = delta(direction)
        snake.tail_row += dr
        snake.tail_col += dc

        new_tail = self.board.cell(snake.tail_row, snake.tail_col)
        if new_tail.kind == CellKind.BODY:
            self.board.set(snake.tail_row, snake.tail_col, body_to_tail(new_tail.direction))
        else:
            # Only reachable on a hand-edited board; a well-formed snake
            # always has a body cell here once its head has moved.
            logger.warning(
                "Snake %d tail advanced onto %s at (%d, %d); cell left as is.",
                index, new_tail.kind.value, snake.tail_row, snake.tail_col,
            )

    def get_state(self) -> dict:
        """Return the full, serializable simulation state."""
        return {
            "tick": self.tick,
            "board": self.board.to_dict(),
            "snakes": self.snakes.to_dict(),
        }
