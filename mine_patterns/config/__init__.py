"""Configuration layer: constants and the typed run config."""

from mine_patterns.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MINE_COUNT,
    NUM_SEED_BATCHES,
    NUM_TRIALS,
    OUTPUT_FILE,
    SIM_SEED,
)
from mine_patterns.config.types import CanonicalMode, SimulationConfig

__all__ = [
    "CanonicalMode",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MINE_COUNT",
    "NUM_SEED_BATCHES",
    "NUM_TRIALS",
    "OUTPUT_FILE",
    "SIM_SEED",
    "SimulationConfig",
]
