from __future__ import annotations

"""Shared helpers for loading jobs with CLI-friendly errors."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from extensible_choice.core.registries.job_registry import JobRegistry
from extensible_choice.io.loaders import LoaderError, load_jobs


def load_jobs_or_exit(
    path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> JobRegistry:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    registry = JobRegistry()
    try:
        load_jobs(path, registry)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load jobs:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load jobs:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)
    return registry


__all__ = ["load_jobs_or_exit"]
