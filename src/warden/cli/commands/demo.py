"""CLI commands for running the resource lifecycle demonstrations."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import List, Optional, Sequence, Union

import typer
from rich.console import Console
from rich.table import Table

from warden.errors import InvalidArgumentError
from warden.models.scenario import ScenarioOutcome
from warden.services.scenarios import ScenarioService, UnknownScenarioError
from warden.utils.arithmetic import divide


class DemoExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1


def register(app: typer.Typer, console: Console, diagnostics: Console) -> None:
    """Register the demonstration commands."""

    @lru_cache(maxsize=1)
    def get_scenario_service() -> ScenarioService:
        return ScenarioService(console=console, diagnostics=diagnostics)

    @app.command("demo")
    def demo(
        scenario: Optional[List[int]] = typer.Option(
            None, "--scenario", "-s", help="Scenario number to run (repeatable). Runs all when omitted."
        ),
        json_output: bool = typer.Option(False, "--json", help="Print recorded outcomes as JSON after the run"),
    ) -> None:
        """Run the demonstration scenarios. Expected failures never change the exit status."""

        service = get_scenario_service()
        try:
            outcomes = service.run(scenario) if scenario else service.run_all()
        except UnknownScenarioError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=DemoExitCode.INVALID_INPUT) from exc

        if json_output:
            typer.echo(json.dumps(_outcomes_payload(outcomes), ensure_ascii=False, indent=2))

    @app.command("scenarios")
    def scenarios() -> None:
        """List the available scenarios."""

        table = Table(title="Scenarios")
        table.add_column("#", justify="right")
        table.add_column("Title")
        for entry in ScenarioService.catalogue():
            table.add_row(str(entry.number), entry.title)
        console.print(table)

    @app.command("divide")
    def divide_command(
        dividend: str = typer.Argument(..., help="Number to divide"),
        divisor: str = typer.Argument(..., help="Number to divide by"),
    ) -> None:
        """Divide two numbers, reporting a zero divisor as an error."""

        try:
            result = divide(_parse_number(dividend), _parse_number(divisor))
        except InvalidArgumentError as exc:
            console.print(f"[red]Division error:[/red] {exc}")
            raise typer.Exit(code=DemoExitCode.INVALID_INPUT) from exc

        console.print(str(result), highlight=False)


def _parse_number(raw: str) -> Union[int, float]:
    stripped = raw.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        raise InvalidArgumentError(f"Not a number: {raw!r}") from None


def _outcomes_payload(outcomes: Sequence[ScenarioOutcome]) -> list[dict[str, object]]:
    return [outcome.model_dump(mode="json") for outcome in outcomes]


__all__ = ["DemoExitCode", "register"]
