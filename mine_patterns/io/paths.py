"""Path helpers for the report artifact."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def report_path(out_path: Path, base_dir: Path | None = None) -> Path:
    """Return the absolute report path.

    Relative paths resolve against *base_dir* (default: the working
    directory). Absolute paths are accepted as given when no *base_dir* is
    passed; with a *base_dir* they must stay inside it.
    """
    if base_dir is None:
        return out_path.resolve()
    return resolve_within_base(out_path, base_dir)
