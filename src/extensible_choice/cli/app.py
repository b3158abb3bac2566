"""
Choice CLI: validate job definitions, inspect parameters, and resolve build values.

- `validate` checks that every job loads and every default resolves
- `show` renders a job's parameters the way a build form would
- `build` validates submitted values exactly as a triggered build does
- `test-script` / `default-items` help authoring script-backed providers
"""

from __future__ import annotations

from typing import Dict

import typer
from rich.console import Console
from rich.markup import escape

from extensible_choice.cli.formatters import build_parameter_table, build_values_table
from extensible_choice.cli.load_helpers import load_jobs_or_exit
from extensible_choice.cli.paths import jobs_path, resolve_script_argument
from extensible_choice.core.errors import ChoiceParameterError
from extensible_choice.core.providers.forms import check_script, fill_default_choice_items
from extensible_choice.core.scripting import PythonScriptEvaluator
from extensible_choice.services.build_service import BuildService, UnknownParameterError
from extensible_choice.utils.logging import configure_logging

app = typer.Typer(help="Choice CLI: validate job definitions and resolve choice parameter values.")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    """Configure logging before running a command."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


def _build_service(jobs: str | None, verbose: bool) -> BuildService:
    registry = load_jobs_or_exit(jobs_path(jobs), console=console, verbose_errors=verbose)
    return BuildService(registry)


def _parse_params(params: list[str]) -> Dict[str, str]:
    param_map: Dict[str, str] = {}
    for item in params:
        if "=" not in item:
            console.print(f"[red]Bad --param[/red] (expected key=value): {escape(item)}")
            raise typer.Exit(code=2)
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            console.print(f"[red]Bad --param[/red] (empty key): {escape(item)}")
            raise typer.Exit(code=2)
        # values are passed through untouched; whitespace is significant
        param_map[key] = value
    return param_map


@app.command()
def validate(
    jobs: str | None = typer.Argument(None, help="Path to jobs folder"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate job definitions and their parameter defaults."""
    service = _build_service(jobs, verbose)

    job_count = len(service.registry)
    param_count = sum(len(job.parameters) for job in service.registry.all())
    console.print(f"[green]OK[/green] Loaded {job_count} job(s)")
    console.print(f"[green]OK[/green] Loaded {param_count} parameter(s)")

    errors = service.validate_all()
    if errors:
        console.print("[red]Validation errors detected:[/red]")
        for error in errors:
            console.print(f" - {escape(error)}")
        raise typer.Exit(code=1)

    console.print("[green]All validations passed[/green]")


@app.command()
def show(
    job_name: str = typer.Argument(..., help="Job name"),
    jobs: str | None = typer.Option(None, "--jobs", help="Path to jobs folder"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Show the parameters of a job, their defaults and current choices."""
    service = _build_service(jobs, verbose)

    try:
        job = service.get_job(job_name)
    except KeyError as exc:
        console.print(f"[red]Job not found[/red]: {escape(str(exc.args[0]))}")
        raise typer.Exit(code=2)

    console.print(f"[bold]{escape(job.name)}[/bold] (Job)")
    if job.description:
        console.print(escape(job.description))
    if not job.parameters:
        console.print("[dim]No parameters defined[/dim]")
        return
    console.print(build_parameter_table(job.name, service.describe_form(job.name)))


@app.command()
def build(
    job_name: str = typer.Argument(..., help="Job name"),
    params: list[str] = typer.Option([], "--param", "-p", help="key=value pairs"),
    jobs: str | None = typer.Option(None, "--jobs", help="Path to jobs folder"),
    as_json: bool = typer.Option(False, "--json", help="Print resolved values as JSON"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Resolve the parameter values a build would be started with."""
    service = _build_service(jobs, verbose)
    param_map = _parse_params(params)

    try:
        service.get_job(job_name)
    except KeyError as exc:
        console.print(f"[red]Job not found[/red]: {escape(str(exc.args[0]))}")
        raise typer.Exit(code=2)

    try:
        values = service.resolve_build_parameters(job_name, param_map)
    except UnknownParameterError as exc:
        console.print(f"[red]Unknown parameter[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)
    except ChoiceParameterError as exc:
        console.print(f"[red]Build rejected[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(data=[value.model_dump() for value in values])
        return
    console.print(build_values_table(job_name, values))


@app.command("test-script")
def test_script(
    script: str = typer.Argument(..., help="Script text, or a path with --file"),
    from_file: bool = typer.Option(False, "--file", "-f", help="Read the script from a file"),
) -> None:
    """Run a choice script strictly and print the choices it produces."""
    try:
        text = resolve_script_argument(script, as_file=from_file)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    result = check_script(text, PythonScriptEvaluator())
    if not result.ok:
        console.print(f"[red]Script check failed[/red]: {escape(result.message)}")
        raise typer.Exit(code=1)

    console.print("[green]OK[/green] Script returned:")
    for line in result.message.splitlines():
        console.print(f"  {escape(line)}")


@app.command("default-items")
def default_items(
    script: str = typer.Argument(..., help="Script text, or a path with --file"),
    from_file: bool = typer.Option(False, "--file", "-f", help="Read the script from a file"),
) -> None:
    """List the items offered when picking a script provider's default choice."""
    try:
        text = resolve_script_argument(script, as_file=from_file)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    for item in fill_default_choice_items(text, PythonScriptEvaluator()):
        typer.echo(f"{item.label}\t{item.value}")


__all__ = ["app"]
