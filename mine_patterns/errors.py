"""Exception types raised by the simulation core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Run parameters that cannot produce a valid simulation.

    Raised before any trial starts; no partial report is produced.
    """


class PlacementExhaustedError(RuntimeError):
    """Board generation exceeded its placement-attempt cap."""

    def __init__(self, attempts: int, placed: int, mine_count: int) -> None:
        super().__init__(
            f"placed {placed}/{mine_count} mines after {attempts} attempts; "
            "raise max_placement_attempts or lower mine_count"
        )
        self.attempts = attempts
        self.placed = placed
        self.mine_count = mine_count
