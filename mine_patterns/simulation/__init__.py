"""Simulation engine: trial loop, seed batches, and table merging."""

from mine_patterns.simulation.engine import (
    BatchResult,
    SimulationResult,
    batch_bounds,
    run_batch,
    run_simulation,
    run_trial,
    simulate_patterns,
)

__all__ = [
    "BatchResult",
    "SimulationResult",
    "batch_bounds",
    "run_batch",
    "run_simulation",
    "run_trial",
    "simulate_patterns",
]
