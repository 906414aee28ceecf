"""Centralized defaults for pattern simulations.

The board defaults match expert Minesweeper (30x16 with 99 mines).
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 30
"""Default board width in cells."""

GRID_HEIGHT = 16
"""Default board height in cells."""

MINE_COUNT = 99
"""Default number of marked cells per board."""

NUM_TRIALS = 1_000_000
"""Default number of boards simulated per run."""

OUTPUT_FILE = "output.txt"
"""Default report path, relative to the working directory."""

SIM_SEED = 0
"""Default base seed; trial ``i`` draws from ``Random(sim_seed + i)``."""

NUM_SEED_BATCHES = 1
"""Default number of independently aggregated trial batches."""

PROGRESS_LOG_INTERVAL = 100_000
"""Log simulation progress every N trials within a batch."""

MARKED_GLYPH = "X"
"""Character rendered for a marked offset in the report grid."""

EMPTY_GLYPH = " "
"""Character rendered for an unmarked offset in the report grid."""
