"""Plain-text pattern report: ranked shapes with count and prevalence."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import numpy as np

from mine_patterns.aggregation import PatternEntry, PatternTable
from mine_patterns.domain.shape import render_shape


def prevalence(count: int, total_trials: int) -> float:
    """Occurrences per trial."""
    if total_trials < 1:
        raise ValueError("total_trials must be >= 1")
    return count / total_trials


def format_prevalence(count: int, total_trials: int) -> str:
    """Positional decimal text of the prevalence, never scientific notation."""
    return np.format_float_positional(prevalence(count, total_trials), trim="0")


def format_entry(entry: PatternEntry, total_trials: int) -> str:
    """Render one entry as grid lines followed by its Count/Prevalence lines."""
    return (
        render_shape(entry.shape)
        + f"Count: {entry.count}\n"
        + f"Prevalence: {format_prevalence(entry.count, total_trials)}\n"
    )


def format_entries(entries: Iterable[PatternEntry], total_trials: int) -> str:
    """Join already-ordered entries, separated by blank lines."""
    if total_trials < 1:
        raise ValueError("total_trials must be >= 1")
    return "".join(format_entry(entry, total_trials) + "\n" for entry in entries)


def format_report(table: PatternTable, total_trials: int, top_n: int | None = None) -> str:
    """Render ``table`` most-frequent first.

    Pure function of its inputs: ``table`` is not mutated. ``top_n`` keeps
    only the first N ranked patterns.
    """
    ranked = table.ranked()
    if top_n is not None:
        ranked = ranked[:top_n]
    return format_entries(ranked, total_trials)


def write_report(text: str, out_path: Path) -> Path:
    """Write ``text`` to ``out_path`` (UTF-8), creating parent directories."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    return out_path.resolve()
