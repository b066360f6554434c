"""Translation between board characters and their meaning."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_sim.errors import DecodeError


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class CellKind(enum.Enum):
    """What a board cell holds."""

    WALL = "wall"
    EMPTY = "empty"
    FOOD = "food"
    HEAD = "head"
    DEAD_HEAD = "dead_head"
    BODY = "body"
    TAIL = "tail"


@dataclass(frozen=True)
class Cell:
    """Decoded cell. ``direction`` is set only for heads, bodies and tails."""

    kind: CellKind
    direction: Direction | None = None

    @property
    def is_snake(self) -> bool:
        return self.kind in _SNAKE_KINDS


_SNAKE_KINDS = frozenset({
    CellKind.HEAD, CellKind.DEAD_HEAD, CellKind.BODY, CellKind.TAIL,
})

WALL = "#"
EMPTY = " "
FOOD = "*"
DEAD_HEAD = "x"

# Per direction: (tail, body, head) characters.
_FAMILIES: dict[Direction, tuple[str, str, str]] = {
    Direction.UP: ("w", "^", "W"),
    Direction.LEFT: ("a", "<", "A"),
    Direction.DOWN: ("s", "v", "S"),
    Direction.RIGHT: ("d", ">", "D"),
}

_DECODE: dict[str, Cell] = {
    WALL: Cell(CellKind.WALL),
    EMPTY: Cell(CellKind.EMPTY),
    FOOD: Cell(CellKind.FOOD),
    DEAD_HEAD: Cell(CellKind.DEAD_HEAD),
}
for _dir, (_tail, _body, _head) in _FAMILIES.items():
    _DECODE[_tail] = Cell(CellKind.TAIL, _dir)
    _DECODE[_body] = Cell(CellKind.BODY, _dir)
    _DECODE[_head] = Cell(CellKind.HEAD, _dir)

_ENCODE: dict[Cell, str] = {cell: ch for ch, cell in _DECODE.items()}

ALPHABET = frozenset(_DECODE)


def decode(char: str | int) -> Cell:
    """Decode one board character (or its byte value) into a :class:`Cell`.

    Raises :class:`DecodeError` for anything outside the board alphabet.
    """
    if isinstance(char, int):
        char = chr(char)
    try:
        return _DECODE[char]
    except KeyError:
        raise DecodeError(char) from None


def encode(cell: Cell) -> str:
    """Return the board character for *cell*."""
    try:
        return _ENCODE[cell]
    except KeyError:
        raise ValueError(f"Cell {cell!r} has no board character.") from None


def head(direction: Direction) -> str:
    """Head character for a snake moving *direction*."""
    return _FAMILIES[direction][2]


def head_to_body(direction: Direction) -> str:
    """Character left behind when a head moving *direction* advances."""
    return _FAMILIES[direction][1]


def body_to_tail(direction: Direction) -> str:
    """Character a body segment becomes when it turns into the tail."""
    return _FAMILIES[direction][0]


def delta(direction: Direction) -> tuple[int, int]:
    return direction.value


def is_tail(char: str) -> bool:
    return char in _DECODE and _DECODE[char].kind == CellKind.TAIL


def is_head(char: str) -> bool:
    return char in _DECODE and _DECODE[char].kind == CellKind.HEAD
