"""Pattern frequency table: distinct shapes and their occurrence counts.

Lookups are keyed by the shape tuple itself, so a shape matches an entry
only when its offsets are identical element-wise in the same order.
Entries keep first-observation order, which breaks ties when ranking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mine_patterns.domain.shape import Shape


@dataclass
class PatternEntry:
    """One distinct shape and how many times it has been observed."""

    shape: Shape
    count: int = 1
    first_seen_trial: int | None = None


def _rank_key(entry: PatternEntry) -> tuple[int, bool, int]:
    trial = entry.first_seen_trial
    return -entry.count, trial is None, trial if trial is not None else 0


class PatternTable:
    """Insertion-ordered, hash-keyed collection of :class:`PatternEntry`."""

    def __init__(self) -> None:
        self._entries: dict[Shape, PatternEntry] = {}
        self._total = 0

    def observe(self, shape: Shape, trial: int | None = None) -> PatternEntry:
        """Count one observation of ``shape`` and return its entry."""
        entry = self._entries.get(shape)
        if entry is None:
            entry = PatternEntry(shape=shape, count=1, first_seen_trial=trial)
            self._entries[shape] = entry
        else:
            entry.count += 1
        self._total += 1
        return entry

    def merge(self, other: PatternTable) -> None:
        """Fold ``other``'s counts into this table.

        Shapes new to this table are appended in ``other``'s order.
        """
        for entry in other:
            existing = self._entries.get(entry.shape)
            if existing is None:
                self._entries[entry.shape] = PatternEntry(
                    shape=entry.shape,
                    count=entry.count,
                    first_seen_trial=entry.first_seen_trial,
                )
            else:
                existing.count += entry.count
                if existing.first_seen_trial is None or (
                    entry.first_seen_trial is not None
                    and entry.first_seen_trial < existing.first_seen_trial
                ):
                    existing.first_seen_trial = entry.first_seen_trial
        self._total += other.total_observations

    def get(self, shape: Shape) -> PatternEntry | None:
        return self._entries.get(shape)

    def ranked(self) -> list[PatternEntry]:
        """Entries by descending count, ties broken by earliest ``first_seen_trial``.

        Entries without a trial index sort after indexed ones of the same
        count; remaining ties keep insertion order.
        """
        return sorted(self._entries.values(), key=_rank_key)

    @property
    def total_observations(self) -> int:
        """Sum of all entry counts (one per observed cluster)."""
        return self._total

    def __contains__(self, shape: object) -> bool:
        return shape in self._entries

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def observe(table: PatternTable, shape: Shape) -> None:
    """Increment ``shape``'s count in ``table``, inserting it with count 1 if new."""
    table.observe(shape)


def merge_tables(tables: Iterable[PatternTable]) -> PatternTable:
    """Merge per-batch tables, in order, into a new table."""
    merged = PatternTable()
    for table in tables:
        merged.merge(table)
    return merged
