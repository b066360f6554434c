"""Simulation run configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

FOOD_PLACERS = ("random", "none")


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for one simulation run.

    Supports JSON serialization for reproducibility.
    """

    ticks: int = 1
    food: str = "random"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError("ticks must be at least 0.")
        if self.food not in FOOD_PLACERS:
            raise ValueError(
                f"food must be one of {', '.join(FOOD_PLACERS)}; got {self.food!r}."
            )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
