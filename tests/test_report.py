"""Tests for mine_patterns.report."""

from __future__ import annotations

from pathlib import Path

import pytest

from mine_patterns.aggregation import PatternEntry, PatternTable
from mine_patterns.report import (
    format_entry,
    format_prevalence,
    format_report,
    prevalence,
    write_report,
)


def _table(*observations: tuple[tuple[tuple[int, int], ...], int]) -> PatternTable:
    table = PatternTable()
    for shape, count in observations:
        for _ in range(count):
            table.observe(shape)
    return table


class TestFormatEntry:
    def test_single_cell_full_prevalence(self) -> None:
        entry = PatternEntry(shape=((0, 0),), count=7)
        assert format_entry(entry, 7) == "X\nCount: 7\nPrevalence: 1.0\n"

    def test_grid_then_count_then_prevalence(self) -> None:
        entry = PatternEntry(shape=((0, 0), (0, 1), (-1, 1)), count=1)
        assert format_entry(entry, 4) == " X\nXX\nCount: 1\nPrevalence: 0.25\n"

    def test_rare_pattern_prevalence_is_positional_decimal(self) -> None:
        entry = PatternEntry(shape=((0, 0),), count=3)
        text = format_entry(entry, 1_000_000)
        assert text == "X\nCount: 3\nPrevalence: 0.000003\n"
        assert "e-" not in text

    def test_format_prevalence_keeps_short_decimals(self) -> None:
        assert format_prevalence(1, 1) == "1.0"
        assert format_prevalence(1, 4) == "0.25"
        assert format_prevalence(1, 10_000_000) == "0.0000001"

    def test_prevalence_can_exceed_one(self) -> None:
        # Several clusters of one shape can appear on a single board.
        assert prevalence(30, 10) == 3.0

    def test_prevalence_requires_trials(self) -> None:
        with pytest.raises(ValueError):
            prevalence(1, 0)


class TestFormatReport:
    def test_most_frequent_first_blank_line_separated(self) -> None:
        table = _table((((0, 0), (1, 0)), 1), (((0, 0),), 3))
        text = format_report(table, 4)
        assert text == (
            "X\nCount: 3\nPrevalence: 0.75\n\n" "XX\nCount: 1\nPrevalence: 0.25\n\n"
        )

    def test_deterministic(self) -> None:
        table = _table((((0, 0),), 2), (((0, 0), (0, 1)), 2), (((0, 0), (1, 0)), 5))
        assert format_report(table, 9) == format_report(table, 9)

    def test_does_not_mutate_table(self) -> None:
        table = _table((((0, 0), (1, 0)), 1), (((0, 0),), 3))
        before = [(e.shape, e.count) for e in table]
        format_report(table, 4)
        assert [(e.shape, e.count) for e in table] == before

    def test_top_n_truncates(self) -> None:
        table = _table((((0, 0),), 3), (((0, 0), (1, 0)), 2), (((0, 0), (0, 1)), 1))
        text = format_report(table, 3, top_n=2)
        assert text.count("Count:") == 2
        assert "Count: 1\n" not in text

    def test_empty_table_renders_empty_report(self) -> None:
        assert format_report(PatternTable(), 5) == ""

    def test_zero_trials_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_report(PatternTable(), 0)


class TestWriteReport:
    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "dir" / "output.txt"
        written = write_report("X\nCount: 1\nPrevalence: 1.0\n\n", target)
        assert written == target.resolve()
        assert target.read_text(encoding="utf-8") == "X\nCount: 1\nPrevalence: 1.0\n\n"
