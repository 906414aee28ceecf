"""Simulation engine: the generate -> extract -> canonicalize -> aggregate loop.

Trial ``i`` draws its board from ``Random(sim_seed + i)``, so a run is
reproducible for a fixed seed and independent of how trials are split into
seed batches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

import numpy as np

from mine_patterns.aggregation import PatternTable, merge_tables
from mine_patterns.config.constants import PROGRESS_LOG_INTERVAL
from mine_patterns.config.types import CanonicalMode, SimulationConfig
from mine_patterns.domain.board import generate_board
from mine_patterns.domain.cluster import extract_clusters
from mine_patterns.domain.shape import canonicalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Pattern table and per-trial cluster counts for one seed batch."""

    batch_index: int
    first_trial: int
    table: PatternTable
    clusters_per_trial: np.ndarray


@dataclass(frozen=True)
class SimulationResult:
    """Merged outcome of a full run."""

    config: SimulationConfig
    table: PatternTable
    clusters_per_trial: np.ndarray

    @property
    def n_trials(self) -> int:
        return int(self.clusters_per_trial.size)


def run_trial(
    config: SimulationConfig,
    rng: Random,
    table: PatternTable,
    trial_index: int | None = None,
) -> int:
    """Run one trial into ``table`` and return the number of clusters observed."""
    board = generate_board(
        config.grid_width,
        config.grid_height,
        config.mine_count,
        rng,
        max_attempts=config.max_placement_attempts,
    )
    clusters = extract_clusters(board)
    for cluster in clusters:
        shape = canonicalize(cluster, cluster.reference, mode=config.canonical_mode)
        table.observe(shape, trial=trial_index)
    return len(clusters)


def batch_bounds(n_trials: int, n_batches: int) -> list[tuple[int, int]]:
    """Split ``range(n_trials)`` into ``n_batches`` contiguous half-open ranges.

    Earlier batches absorb the remainder, so sizes differ by at most one.
    """
    if n_batches < 1:
        raise ValueError("n_batches must be >= 1")
    if n_batches > n_trials:
        raise ValueError("n_batches cannot exceed n_trials")
    base, extra = divmod(n_trials, n_batches)
    bounds: list[tuple[int, int]] = []
    start = 0
    for i in range(n_batches):
        stop = start + base + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def run_batch(
    config: SimulationConfig,
    batch_index: int,
    first_trial: int,
    stop_trial: int,
) -> BatchResult:
    """Run trials ``[first_trial, stop_trial)`` into a batch-local table."""
    table = PatternTable()
    counts = np.zeros(stop_trial - first_trial, dtype=np.int64)
    for offset, trial in enumerate(range(first_trial, stop_trial)):
        rng = Random(config.sim_seed + trial)
        counts[offset] = run_trial(config, rng, table, trial_index=trial)
        done = offset + 1
        if done % PROGRESS_LOG_INTERVAL == 0:
            logger.info(
                "batch %d: %d/%d trials, %d distinct patterns",
                batch_index,
                done,
                counts.size,
                len(table),
            )
    return BatchResult(
        batch_index=batch_index,
        first_trial=first_trial,
        table=table,
        clusters_per_trial=counts,
    )


def run_simulation(config: SimulationConfig) -> SimulationResult:
    """Run every trial of ``config`` and merge the per-batch tables in order."""
    logger.info(
        "simulating %d trials on %dx%d boards with %d mines (%s shapes, %d batch(es))",
        config.n_trials,
        config.grid_width,
        config.grid_height,
        config.mine_count,
        config.canonical_mode.value,
        config.n_seed_batches,
    )
    batches: list[BatchResult] = []
    for batch_index, (start, stop) in enumerate(
        batch_bounds(config.n_trials, config.n_seed_batches)
    ):
        batch = run_batch(config, batch_index, start, stop)
        logger.info(
            "batch %d done: trials [%d, %d), %d clusters, %d distinct patterns",
            batch_index,
            start,
            stop,
            int(batch.clusters_per_trial.sum()),
            len(batch.table),
        )
        batches.append(batch)

    table = merge_tables(batch.table for batch in batches)
    clusters_per_trial = np.concatenate([batch.clusters_per_trial for batch in batches])
    logger.info(
        "merged %d batch(es): %d clusters, %d distinct patterns",
        len(batches),
        table.total_observations,
        len(table),
    )
    return SimulationResult(config=config, table=table, clusters_per_trial=clusters_per_trial)


def simulate_patterns(
    width: int,
    height: int,
    mine_count: int,
    n_trials: int,
    sim_seed: int = 0,
    canonical_mode: CanonicalMode = CanonicalMode.TRAVERSAL,
) -> PatternTable:
    """Convenience wrapper returning only the merged pattern table."""
    config = SimulationConfig(
        grid_width=width,
        grid_height=height,
        mine_count=mine_count,
        n_trials=n_trials,
        sim_seed=sim_seed,
        canonical_mode=canonical_mode,
    )
    return run_simulation(config).table
