"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.markup import escape
from rich.table import Table

from extensible_choice.core.parameter import ParameterValue
from extensible_choice.services.build_service import ParameterForm

NO_VALUE = "[dim]-[/dim]"


def format_choices(choices: Sequence[str], limit: int = 8) -> str:
    """Format choices for a table cell, truncating long lists."""
    if not choices:
        return "[dim]<no choices>[/dim]"
    # quote choices whose whitespace would otherwise be invisible
    shown = [escape(choice if choice and choice == choice.strip() else repr(choice)) for choice in choices[:limit]]
    if len(choices) > limit:
        shown.append(f"[dim]... ({len(choices) - limit} more)[/dim]")
    return ", ".join(shown)


def _cell(value: Optional[str]) -> str:
    return NO_VALUE if value is None else escape(value)


def build_parameter_table(job_name: str, forms: Iterable[ParameterForm]) -> Table:
    table = Table(title=f"Parameters of {escape(job_name)}")
    table.add_column("Parameter")
    table.add_column("Editable")
    table.add_column("Default")
    table.add_column("Choices")
    table.add_column("Description")

    for form in forms:
        default = f"[red]{escape(form.error)}[/red]" if form.error else _cell(form.default)
        table.add_row(
            _cell(form.name),
            "yes" if form.editable else "no",
            default,
            format_choices(form.choices),
            _cell(form.description),
        )
    return table


def build_values_table(job_name: str, values: Iterable[ParameterValue]) -> Table:
    table = Table(title=f"Build parameters for {escape(job_name)}")
    table.add_column("Parameter")
    table.add_column("Value")
    for value in values:
        table.add_row(_cell(value.name), escape(repr(value.value)))
    return table


__all__ = ["build_parameter_table", "build_values_table", "format_choices"]
