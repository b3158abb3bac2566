from __future__ import annotations

"""Utilities for resolving default job and script locations."""

from pathlib import Path


def jobs_path(path: str | None) -> str:
    return path or str(Path.cwd() / "jobs")


def resolve_script_argument(value: str, *, as_file: bool) -> str:
    """Return script text, reading it from ``value`` when ``as_file`` is set.

    Raises:
        FileNotFoundError: If ``as_file`` is set and the file does not exist
    """
    if not as_file:
        return value
    p = Path(value)
    if not p.is_file():
        raise FileNotFoundError(f"Script file not found: '{value}'")
    return p.read_text(encoding="utf-8")
