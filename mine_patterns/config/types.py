"""Configuration dataclass for pattern simulation runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mine_patterns.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MINE_COUNT,
    NUM_SEED_BATCHES,
    NUM_TRIALS,
    OUTPUT_FILE,
    SIM_SEED,
)
from mine_patterns.errors import ConfigurationError

__all__ = [
    "CanonicalMode",
    "SimulationConfig",
]


class CanonicalMode(Enum):
    """How a cluster's offsets are ordered before aggregation."""

    TRAVERSAL = "traversal"
    SORTED = "sorted"


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime parameters for one pattern-frequency run."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    mine_count: int = MINE_COUNT
    n_trials: int = NUM_TRIALS
    out_path: Path = Path(OUTPUT_FILE)
    sim_seed: int = SIM_SEED
    n_seed_batches: int = NUM_SEED_BATCHES
    canonical_mode: CanonicalMode = CanonicalMode.TRAVERSAL
    max_placement_attempts: int | None = None
    """Cap on random draws per board (None = unbounded rejection sampling)."""
    top_n: int | None = None
    """Report only the N most frequent patterns (None = all)."""

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ConfigurationError("grid dimensions must be >= 1")
        if self.mine_count < 0:
            raise ConfigurationError("mine_count must be >= 0")
        if self.mine_count > self.capacity:
            raise ConfigurationError(
                f"mine_count cannot exceed grid cells ({self.mine_count} > {self.capacity})"
            )
        if self.n_trials < 1:
            raise ConfigurationError("n_trials must be >= 1")
        if self.n_seed_batches < 1:
            raise ConfigurationError("n_seed_batches must be >= 1")
        if self.n_seed_batches > self.n_trials:
            raise ConfigurationError("n_seed_batches cannot exceed n_trials")
        if not isinstance(self.canonical_mode, CanonicalMode):
            raise ConfigurationError("canonical_mode must be a CanonicalMode")
        if self.max_placement_attempts is not None and self.max_placement_attempts < 1:
            raise ConfigurationError("max_placement_attempts must be >= 1")
        if self.top_n is not None and self.top_n < 1:
            raise ConfigurationError("top_n must be >= 1")

    @property
    def capacity(self) -> int:
        """Number of cells on one board."""
        return self.grid_width * self.grid_height
