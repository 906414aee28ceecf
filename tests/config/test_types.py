"""Tests for mine_patterns.config.types."""

from __future__ import annotations

from pathlib import Path

import pytest

from mine_patterns.config.types import CanonicalMode, SimulationConfig
from mine_patterns.errors import ConfigurationError


class TestSimulationConfig:
    def test_defaults_are_valid(self) -> None:
        config = SimulationConfig()
        assert config.capacity == 30 * 16
        assert config.out_path == Path("output.txt")
        assert config.canonical_mode is CanonicalMode.TRAVERSAL
        assert config.max_placement_attempts is None

    def test_full_board_is_allowed(self) -> None:
        config = SimulationConfig(grid_width=3, grid_height=2, mine_count=6, n_trials=1)
        assert config.mine_count == config.capacity

    def test_mine_count_above_capacity_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="cannot exceed grid cells"):
            SimulationConfig(grid_width=3, grid_height=2, mine_count=7)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SimulationConfig(grid_width=1, grid_height=1, mine_count=2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grid_width": 0},
            {"grid_height": -1},
            {"mine_count": -1},
            {"n_trials": 0},
            {"n_seed_batches": 0},
            {"n_trials": 2, "n_seed_batches": 3},
            {"max_placement_attempts": 0},
            {"top_n": 0},
        ],
    )
    def test_invalid_fields_rejected(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ConfigurationError):
            SimulationConfig(**kwargs)

    def test_canonical_mode_must_be_enum(self) -> None:
        with pytest.raises(ConfigurationError):
            SimulationConfig(canonical_mode="sorted")  # type: ignore[arg-type]

    def test_config_is_frozen(self) -> None:
        config = SimulationConfig()
        with pytest.raises(AttributeError):
            config.mine_count = 5  # type: ignore[misc]
