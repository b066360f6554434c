"""Tests for the cell codec."""

import pytest

from snake_sim.cells import (
    ALPHABET,
    Cell,
    CellKind,
    Direction,
    body_to_tail,
    decode,
    delta,
    encode,
    head_to_body,
    is_head,
    is_tail,
)
from snake_sim.errors import DecodeError


class TestDecode:
    def test_scenery(self):
        assert decode("#") == Cell(CellKind.WALL)
        assert decode(" ") == Cell(CellKind.EMPTY)
        assert decode("*") == Cell(CellKind.FOOD)
        assert decode("x") == Cell(CellKind.DEAD_HEAD)

    def test_direction_families(self):
        assert decode("w") == Cell(CellKind.TAIL, Direction.UP)
        assert decode("<") == Cell(CellKind.BODY, Direction.LEFT)
        assert decode("v") == Cell(CellKind.BODY, Direction.DOWN)
        assert decode("D") == Cell(CellKind.HEAD, Direction.RIGHT)

    def test_accepts_byte_values(self):
        assert decode(ord("S")) == Cell(CellKind.HEAD, Direction.DOWN)

    def test_unknown_character(self):
        with pytest.raises(DecodeError, match="Unknown board character"):
            decode("?")

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode("\r")

    def test_is_snake_property(self):
        assert decode("x").is_snake
        assert decode("a").is_snake
        assert not decode("*").is_snake


class TestEncode:
    def test_alphabet_has_sixteen_characters(self):
        assert len(ALPHABET) == 16

    def test_encode_inverts_decode(self):
        for ch in ALPHABET:
            assert encode(decode(ch)) == ch

    def test_encode_rejects_impossible_cell(self):
        with pytest.raises(ValueError, match="no board character"):
            encode(Cell(CellKind.WALL, Direction.UP))


class TestTransitions:
    def test_head_to_body(self):
        assert head_to_body(Direction.UP) == "^"
        assert head_to_body(Direction.LEFT) == "<"
        assert head_to_body(Direction.DOWN) == "v"
        assert head_to_body(Direction.RIGHT) == ">"

    def test_body_to_tail(self):
        assert body_to_tail(Direction.UP) == "w"
        assert body_to_tail(Direction.LEFT) == "a"
        assert body_to_tail(Direction.DOWN) == "s"
        assert body_to_tail(Direction.RIGHT) == "d"

    def test_delta(self):
        assert delta(Direction.UP) == (-1, 0)
        assert delta(Direction.DOWN) == (1, 0)
        assert delta(Direction.LEFT) == (0, -1)
        assert delta(Direction.RIGHT) == (0, 1)


class TestPredicates:
    def test_is_tail(self):
        assert is_tail("w")
        assert not is_tail("W")
        assert not is_tail("^")

    def test_is_head(self):
        assert is_head("A")
        assert not is_head("x")
