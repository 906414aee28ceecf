"""Translation-canonical shapes and their plain-text rendering.

A shape is the tuple of a cluster's offsets from its reference cell. In the
default traversal mode two shapes are the same pattern only if their offsets
match element-wise in visit order, so rotations, reflections and reorderings
of the same cell set count as distinct patterns.
"""

from __future__ import annotations

import hashlib
from typing import TypeAlias

from mine_patterns.config.constants import EMPTY_GLYPH, MARKED_GLYPH
from mine_patterns.config.types import CanonicalMode
from mine_patterns.domain.board import Coordinate
from mine_patterns.domain.cluster import Cluster

Shape: TypeAlias = tuple[Coordinate, ...]
"""Offsets from the reference cell; the first element is (0, 0)."""


def canonicalize(
    cluster: Cluster | Shape,
    reference: Coordinate | None = None,
    mode: CanonicalMode = CanonicalMode.TRAVERSAL,
) -> Shape:
    """Express every cell of ``cluster`` relative to ``reference``.

    ``reference`` defaults to the first cell (the traversal start).
    ``CanonicalMode.SORTED`` additionally sorts the offsets, making the
    result independent of visit order; the reference cell then keeps
    offset (0, 0) but is no longer guaranteed to come first.
    """
    cells = cluster.cells if isinstance(cluster, Cluster) else cluster
    if not cells:
        return ()
    rx, ry = reference if reference is not None else cells[0]
    shape = tuple((x - rx, y - ry) for x, y in cells)
    if mode == CanonicalMode.SORTED:
        return tuple(sorted(shape))
    return shape


def bounding_box(shape: Shape) -> tuple[Coordinate, Coordinate]:
    """Return ``((min_x, min_y), (max_x, max_y))`` over the offsets."""
    if not shape:
        raise ValueError("cannot compute bounding box of an empty shape")
    xs = [x for x, _ in shape]
    ys = [y for _, y in shape]
    return (min(xs), min(ys)), (max(xs), max(ys))


def render_shape(shape: Shape) -> str:
    """Render ``shape`` as a bounding-box grid, one ``\\n``-terminated line per row."""
    (min_x, min_y), (max_x, max_y) = bounding_box(shape)
    occupied = set(shape)
    lines = []
    for y in range(min_y, max_y + 1):
        row = "".join(
            MARKED_GLYPH if (x, y) in occupied else EMPTY_GLYPH for x in range(min_x, max_x + 1)
        )
        lines.append(row + "\n")
    return "".join(lines)


def shape_hash(shape: Shape) -> str:
    """Return SHA-256 hex of the shape's ordered offset sequence.

    Stable across processes (unlike ``hash()``), so it can label patterns
    in logs and summaries.
    """
    canonical_str = ";".join(f"{x},{y}" for x, y in shape)
    return hashlib.sha256(canonical_str.encode()).hexdigest()
