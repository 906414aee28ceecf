"""Rectangular mine board with exact-occupancy random generation.

Cells live in one contiguous list indexed by ``y * width + x``. Reads
outside the board return :data:`OUT_OF_BOUNDS` instead of raising, so
neighbor lookups at the edges need no special casing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from random import Random

from mine_patterns.errors import ConfigurationError, PlacementExhaustedError


class CellState(IntEnum):
    """Lifecycle of one board cell during a trial."""

    EMPTY = 0
    MARKED = 1
    CONSUMED = 2
    OUT_OF_BOUNDS = -1


OUT_OF_BOUNDS = CellState.OUT_OF_BOUNDS

Coordinate = tuple[int, int]


@dataclass
class Board:
    """Fixed-size grid of :class:`CellState` values."""

    width: int
    height: int
    cells: list[CellState]

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        """Return a board with every cell EMPTY."""
        if width < 1 or height < 1:
            raise ConfigurationError("grid dimensions must be >= 1")
        return cls(width=width, height=height, cells=[CellState.EMPTY] * (width * height))

    @classmethod
    def from_rows(cls, rows: list[str], marked: str = "X") -> Board:
        """Build a board from text rows; ``marked`` characters become MARKED."""
        if not rows or not rows[0]:
            raise ConfigurationError("rows must describe at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ConfigurationError("rows must all have the same length")
        board = cls.empty(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == marked:
                    board.set(x, y, CellState.MARKED)
        return board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> CellState:
        """Return the state at (x, y), or OUT_OF_BOUNDS outside the board."""
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, state: CellState) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")
        self.cells[y * self.width + x] = state

    def count(self, state: CellState) -> int:
        """Number of cells currently in ``state``."""
        return self.cells.count(state)

    def coordinates(self, state: CellState) -> list[Coordinate]:
        """Row-major list of coordinates currently in ``state``."""
        w = self.width
        return [(i % w, i // w) for i, cell in enumerate(self.cells) if cell == state]


def generate_board(
    width: int,
    height: int,
    mine_count: int,
    rng: Random,
    max_attempts: int | None = None,
) -> Board:
    """Place exactly ``mine_count`` marks by rejection sampling.

    Each draw picks a uniformly random cell; an already-marked cell is
    redrawn. ``rng`` is owned by the caller and scoped to one trial.

    Raises :exc:`ConfigurationError` when ``mine_count`` exceeds the board
    capacity and :exc:`PlacementExhaustedError` when ``max_attempts`` draws
    were not enough to place every mark.
    """
    if mine_count < 0:
        raise ConfigurationError("mine_count must be >= 0")
    if mine_count > width * height:
        raise ConfigurationError(
            f"mine_count cannot exceed grid cells ({mine_count} > {width * height})"
        )
    board = Board.empty(width, height)
    placed = 0
    attempts = 0
    while placed < mine_count:
        if max_attempts is not None and attempts >= max_attempts:
            raise PlacementExhaustedError(attempts, placed, mine_count)
        attempts += 1
        x = rng.randrange(width)
        y = rng.randrange(height)
        if board.get(x, y) == CellState.EMPTY:
            board.set(x, y, CellState.MARKED)
            placed += 1
    return board
