"""Snake Sim — character-board snake simulation."""

from snake_sim.board import Board, default_board, default_state
from snake_sim.cells import Cell, CellKind, Direction, decode, encode
from snake_sim.config import SimulationConfig
from snake_sim.engine import TickEngine, TickOutcome
from snake_sim.errors import (
    BrokenPathError,
    DecodeError,
    IoUnavailableError,
    ParseError,
    SnakeSimError,
)
from snake_sim.food import (
    FoodPlacer,
    NullFoodPlacer,
    RandomFoodPlacer,
    ScriptedFoodPlacer,
)
from snake_sim.parser import initialize_snakes, load_board, parse_lines, parse_text
from snake_sim.serializer import print_board, render, save_board
from snake_sim.snake import Snake, SnakeRegistry

__all__ = [
    "Board",
    "BrokenPathError",
    "Cell",
    "CellKind",
    "DecodeError",
    "Direction",
    "FoodPlacer",
    "IoUnavailableError",
    "NullFoodPlacer",
    "ParseError",
    "RandomFoodPlacer",
    "ScriptedFoodPlacer",
    "SimulationConfig",
    "Snake",
    "SnakeRegistry",
    "SnakeSimError",
    "TickEngine",
    "TickOutcome",
    "decode",
    "default_board",
    "default_state",
    "encode",
    "initialize_snakes",
    "load_board",
    "parse_lines",
    "parse_text",
    "print_board",
    "render",
    "save_board",
]
