"""Tests for mine_patterns.domain.shape module."""

from __future__ import annotations

import pytest

from mine_patterns.config.types import CanonicalMode
from mine_patterns.domain.board import Board
from mine_patterns.domain.cluster import Cluster, extract_clusters
from mine_patterns.domain.shape import (
    bounding_box,
    canonicalize,
    render_shape,
    shape_hash,
)


class TestCanonicalize:
    def test_reference_maps_to_origin_first(self) -> None:
        cluster = Cluster(cells=((4, 2), (5, 2), (5, 3)))
        assert canonicalize(cluster, (4, 2)) == ((0, 0), (1, 0), (1, 1))

    def test_reference_defaults_to_first_cell(self) -> None:
        cluster = Cluster(cells=((1, 0), (1, 1), (0, 1)))
        assert canonicalize(cluster) == ((0, 0), (0, 1), (-1, 1))

    def test_translation_invariant(self) -> None:
        a = Cluster(cells=((0, 0), (1, 0), (1, 1)))
        b = Cluster(cells=((7, 5), (8, 5), (8, 6)))
        assert canonicalize(a) == canonicalize(b)

    def test_order_sensitive_by_default(self) -> None:
        a = Cluster(cells=((0, 0), (1, 0), (0, 1)))
        b = Cluster(cells=((0, 0), (0, 1), (1, 0)))
        assert canonicalize(a) != canonicalize(b)

    def test_sorted_mode_ignores_visit_order(self) -> None:
        a = Cluster(cells=((0, 0), (1, 0), (0, 1)))
        b = Cluster(cells=((0, 0), (0, 1), (1, 0)))
        mode = CanonicalMode.SORTED
        assert canonicalize(a, mode=mode) == canonicalize(b, mode=mode)
        assert canonicalize(a, mode=mode) == ((0, 0), (0, 1), (1, 0))

    def test_idempotent_on_canonical_shape(self) -> None:
        board = Board.from_rows([".XX", "XX.", ".X."])
        for cluster in extract_clusters(board):
            shape = canonicalize(cluster)
            assert canonicalize(shape, (0, 0)) == shape
            assert canonicalize(shape) == shape

    def test_empty_input(self) -> None:
        assert canonicalize(()) == ()


class TestRenderShape:
    def test_single_cell(self) -> None:
        assert render_shape(((0, 0),)) == "X\n"

    def test_negative_offsets_shift_into_box(self) -> None:
        assert render_shape(((0, 0), (0, 1), (-1, 1))) == " X\nXX\n"

    def test_gaps_render_as_spaces(self) -> None:
        assert render_shape(((0, 0), (1, 0), (2, 0), (0, 1))) == "XXX\nX  \n"

    def test_bounding_box(self) -> None:
        assert bounding_box(((0, 0), (0, 1), (-1, 1))) == ((-1, 0), (0, 1))

    def test_bounding_box_of_empty_shape_raises(self) -> None:
        with pytest.raises(ValueError):
            bounding_box(())


class TestShapeHash:
    def test_hash_is_64_hex(self) -> None:
        h = shape_hash(((0, 0), (1, 0)))
        assert len(h) == 64
        assert all(c in "0123456789abcdef" for c in h)

    def test_order_changes_hash(self) -> None:
        assert shape_hash(((0, 0), (1, 0), (0, 1))) != shape_hash(((0, 0), (0, 1), (1, 0)))

    def test_equal_shapes_equal_hash(self) -> None:
        assert shape_hash(((0, 0), (-1, 2))) == shape_hash(((0, 0), (-1, 2)))
