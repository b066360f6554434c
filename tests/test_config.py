"""Tests for the simulation configuration dataclass."""

import json

import pytest

from snake_sim.config import SimulationConfig


class TestSimulationConfig:
    def test_defaults(self):
        cfg = SimulationConfig()
        assert cfg.ticks == 1
        assert cfg.food == "random"
        assert cfg.seed is None

    def test_invalid_ticks(self):
        with pytest.raises(ValueError, match="ticks"):
            SimulationConfig(ticks=-1)

    def test_invalid_food(self):
        with pytest.raises(ValueError, match="food"):
            SimulationConfig(food="greedy")

    def test_to_dict_serializable(self):
        serialized = json.dumps(SimulationConfig(seed=3).to_dict())
        assert json.loads(serialized) == {"ticks": 1, "food": "random", "seed": 3}

    def test_save_and_load(self, tmp_path):
        cfg = SimulationConfig(ticks=5, food="none", seed=7)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert SimulationConfig.load(path) == cfg
