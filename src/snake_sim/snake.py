"""Snake records and the registry that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass


@dataclass
class Snake:
    """Cached tail/head coordinates and liveness of one snake on a board.

    The board is the source of truth; a record is rebuilt from it by
    :func:`snake_sim.parser.initialize_snakes` and kept in sync by the
    tick engine.
    """

    tail_row: int
    tail_col: int
    head_row: int = -1
    head_col: int = -1
    live: bool = False

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.head_row, self.head_col

    @property
    def tail(self) -> tuple[int, int]:
        """Return the tail coordinate."""
        return self.tail_row, self.tail_col

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return asdict(self)


class SnakeRegistry:
    """Ordered, index-addressed collection of :class:`Snake` records.

    Indices are stable for the lifetime of the registry; dead snakes stay
    in place with ``live=False``.
    """

    def __init__(self) -> None:
        self._snakes: list[Snake] = []

    def add(self, snake: Snake) -> int:
        """Append *snake* and return its index."""
        self._snakes.append(snake)
        return len(self._snakes) - 1

    def live_indices(self) -> list[int]:
        return [i for i, s in enumerate(self._snakes) if s.live]

    def __getitem__(self, index: int) -> Snake:
        return self._snakes[index]

    def __len__(self) -> int:
        return len(self._snakes)

    def __iter__(self) -> Iterator[Snake]:
        return iter(self._snakes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SnakeRegistry):
            return NotImplemented
        return self._snakes == other._snakes

    def __repr__(self) -> str:
        return f"SnakeRegistry({self._snakes!r})"

    def to_dict(self) -> list[dict]:
        return [s.to_dict() for s in self._snakes]
