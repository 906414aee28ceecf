"""Domain layer: boards, cluster extraction, and shape canonicalization."""

from mine_patterns.domain.board import (
    OUT_OF_BOUNDS,
    Board,
    CellState,
    Coordinate,
    generate_board,
)
from mine_patterns.domain.cluster import Cluster, collect_cluster, extract_clusters
from mine_patterns.domain.shape import (
    Shape,
    bounding_box,
    canonicalize,
    render_shape,
    shape_hash,
)

__all__ = [
    "Board",
    "CellState",
    "Cluster",
    "Coordinate",
    "OUT_OF_BOUNDS",
    "Shape",
    "bounding_box",
    "canonicalize",
    "collect_cluster",
    "extract_clusters",
    "generate_board",
    "render_shape",
    "shape_hash",
]
