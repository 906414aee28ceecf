"""Cluster extraction: maximal 4-connected groups of marked cells.

Visit order is fixed so that each cluster's reference cell and offset order
are reproducible: boards are scanned row-major, and traversal is depth-first
over neighbors in the order left, right, y+1, y-1.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mine_patterns.domain.board import Board, CellState, Coordinate

NEIGHBOR_DELTAS: tuple[Coordinate, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))
"""Orthogonal neighbor offsets in traversal order."""


@dataclass(frozen=True)
class Cluster:
    """Absolute cell coordinates of one connected group, in visit order."""

    cells: tuple[Coordinate, ...]

    @property
    def reference(self) -> Coordinate:
        """The traversal start cell."""
        return self.cells[0]

    def __len__(self) -> int:
        return len(self.cells)


def _neighbors(x: int, y: int) -> Iterator[Coordinate]:
    for dx, dy in NEIGHBOR_DELTAS:
        yield x + dx, y + dy


def collect_cluster(board: Board, start: Coordinate) -> Cluster:
    """Consume and return the cluster containing ``start``.

    Equivalent to a recursive depth-first visit, but uses an explicit stack
    of neighbor iterators so a cluster spanning the whole board cannot hit
    the interpreter's recursion limit. A neighbor is re-checked when the
    iterator reaches it, so cells consumed by an earlier branch are skipped.
    """
    if board.get(*start) != CellState.MARKED:
        raise ValueError(f"start cell {start} is not marked")

    cells: list[Coordinate] = []

    def visit(cell: Coordinate) -> Iterator[Coordinate]:
        board.set(cell[0], cell[1], CellState.CONSUMED)
        cells.append(cell)
        return _neighbors(*cell)

    stack = [visit(start)]
    while stack:
        for nx_, ny_ in stack[-1]:
            if board.get(nx_, ny_) == CellState.MARKED:
                stack.append(visit((nx_, ny_)))
                break
        else:
            stack.pop()
    return Cluster(cells=tuple(cells))


def extract_clusters(board: Board) -> list[Cluster]:
    """Return every cluster on ``board`` in row-major start order.

    Mutates ``board``: all MARKED cells become CONSUMED.
    """
    clusters: list[Cluster] = []
    for y in range(board.height):
        for x in range(board.width):
            if board.get(x, y) == CellState.MARKED:
                clusters.append(collect_cluster(board, (x, y)))
    return clusters
