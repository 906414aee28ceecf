"""Summary statistics for a finished pattern simulation."""

from __future__ import annotations

from typing import Any

import numpy as np

from mine_patterns.aggregation import PatternTable
from mine_patterns.domain.shape import shape_hash


def size_histogram(table: PatternTable) -> dict[int, int]:
    """Map cluster size to the number of clusters of that size."""
    if len(table) == 0:
        return {}
    sizes = np.fromiter((len(entry.shape) for entry in table), dtype=np.int64)
    counts = np.fromiter((entry.count for entry in table), dtype=np.int64)
    totals = np.bincount(sizes, weights=counts).astype(np.int64)
    return {int(size): int(total) for size, total in enumerate(totals) if total > 0}


def summarize_run(
    table: PatternTable,
    clusters_per_trial: np.ndarray,
) -> dict[str, Any]:
    """Build a JSON-serializable summary of a run.

    ``clusters_per_trial`` holds the number of clusters extracted in each
    trial; its sum must equal ``table.total_observations``.
    """
    n_trials = int(clusters_per_trial.size)
    total_clusters = int(clusters_per_trial.sum())
    if total_clusters != table.total_observations:
        raise ValueError(
            f"cluster counts disagree: {total_clusters} extracted, "
            f"{table.total_observations} aggregated"
        )

    ranked = table.ranked()
    top = ranked[0] if ranked else None
    summary: dict[str, Any] = {
        "trials": n_trials,
        "total_clusters": total_clusters,
        "distinct_patterns": len(table),
        "mean_clusters_per_trial": float(clusters_per_trial.mean()) if n_trials else None,
        "std_clusters_per_trial": float(clusters_per_trial.std()) if n_trials else None,
        "cluster_size_histogram": {
            str(size): count for size, count in size_histogram(table).items()
        },
        "top_pattern_hash": shape_hash(top.shape) if top is not None else None,
        "top_pattern_count": top.count if top is not None else 0,
        "top_pattern_share": (top.count / total_clusters) if top is not None else 0.0,
    }
    return summary
