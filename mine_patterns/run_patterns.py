"""CLI entrypoint for pattern-frequency simulation.

This module owns CLI argument parsing, config resolution, and writing the
report. All domain logic lives in the extracted modules:

- ``mine_patterns.config``             – defaults and the run config dataclass
- ``mine_patterns.simulation.engine``  – the trial loop and batch merging
- ``mine_patterns.report``             – ranking and text rendering
- ``mine_patterns.stats``              – run summary statistics
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from mine_patterns.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MINE_COUNT,
    NUM_SEED_BATCHES,
    NUM_TRIALS,
    OUTPUT_FILE,
    SIM_SEED,
)
from mine_patterns.config.types import CanonicalMode, SimulationConfig
from mine_patterns.errors import ConfigurationError, PlacementExhaustedError
from mine_patterns.io.paths import report_path
from mine_patterns.report import format_entries, write_report
from mine_patterns.simulation.engine import run_simulation
from mine_patterns.stats import summarize_run

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_canonical_mode(raw_mode: str) -> CanonicalMode:
    """Parse canonical mode from CLI/config."""
    try:
        return CanonicalMode(raw_mode)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in CanonicalMode)
        raise ConfigurationError(f"canonical-mode must be one of {valid}") from exc


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ConfigurationError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ConfigurationError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ConfigurationError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Accept only str or Path; numbers and booleans are rejected."""
    if isinstance(raw, (str, Path)):
        return str(raw)
    raise ConfigurationError(f"{key} must be a string value, got {raw!r}")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object]
) -> int | None:
    """CLI > file resolution for integers where absence means 'no limit'."""
    raw = _get_val(cli_val, key, file_cfg, None)
    if raw is None:
        return None
    return _coerce_int(raw, key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Tally mine-cluster shapes over randomly generated boards"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None, help=f"default {GRID_WIDTH}")
    parser.add_argument("--height", type=int, default=None, help=f"default {GRID_HEIGHT}")
    parser.add_argument("--mines", type=int, default=None, help=f"default {MINE_COUNT}")
    parser.add_argument("--trials", type=int, default=None, help=f"default {NUM_TRIALS}")
    parser.add_argument("--out", type=Path, default=None, help=f"default {OUTPUT_FILE}")
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Require the report path to stay within this directory",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--seed-batches", type=int, default=None)
    parser.add_argument(
        "--canonical-mode",
        type=str,
        choices=[mode.value for mode in CanonicalMode],
        default=None,
    )
    parser.add_argument(
        "--max-placement-attempts",
        type=int,
        default=None,
        help="Fail a board after this many random draws (default: unbounded)",
    )
    parser.add_argument("--top", type=int, default=None, help="Report only the N most frequent")
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, default="INFO")
    return parser


def build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve CLI args and file values into a validated :class:`SimulationConfig`."""
    return SimulationConfig(
        grid_width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
        grid_height=_get_int(args.height, "height", file_cfg, GRID_HEIGHT),
        mine_count=_get_int(args.mines, "mines", file_cfg, MINE_COUNT),
        n_trials=_get_int(args.trials, "trials", file_cfg, NUM_TRIALS),
        out_path=Path(_get_str(args.out, "out", file_cfg, OUTPUT_FILE)),
        sim_seed=_get_int(args.seed, "seed", file_cfg, SIM_SEED),
        n_seed_batches=_get_int(args.seed_batches, "seed_batches", file_cfg, NUM_SEED_BATCHES),
        canonical_mode=_parse_canonical_mode(
            _get_str(
                args.canonical_mode,
                "canonical_mode",
                file_cfg,
                CanonicalMode.TRAVERSAL.value,
            )
        ),
        max_placement_attempts=_get_optional_int(
            args.max_placement_attempts, "max_placement_attempts", file_cfg
        ),
        top_n=_get_optional_int(args.top, "top", file_cfg),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for pattern simulation.

    Supports ``--config path/to/config.json`` for reproducible runs.
    CLI arguments override config-file values; config-file values override
    built-in defaults. Configuration errors abort before any simulation
    work and no report is written.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = build_config(args, file_cfg)
        out_path = report_path(config.out_path, args.base_dir)
    except ValueError as exc:
        # ConfigurationError, or a report path escaping --base-dir
        parser.error(str(exc))

    logger.info("Getting data...")
    try:
        result = run_simulation(config)
    except PlacementExhaustedError as exc:
        parser.error(str(exc))

    logger.info("Sorting data...")
    ranked = result.table.ranked()
    if config.top_n is not None:
        ranked = ranked[: config.top_n]

    logger.info("Formatting data...")
    text = format_entries(ranked, result.n_trials)

    logger.info("Writing file...")
    written = write_report(text, out_path)
    logger.info("Output successfully written to %s", written)

    summary = summarize_run(result.table, result.clusters_per_trial)
    summary["report_path"] = str(written)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
