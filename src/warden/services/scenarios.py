"""Catalogue of demonstration scenarios exercising resources and error chains."""

from __future__ import annotations

from contextlib import ExitStack
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from warden.config.settings import Settings, get_settings
from warden.errors import InvalidArgumentError, ResourceError, error_kind, iter_chain
from warden.models.scenario import ReportedError, ScenarioOutcome
from warden.resources.managed import ManagedResource
from warden.utils.arithmetic import divide


ScenarioRunner = Callable[["ScenarioService", ExitStack, ScenarioOutcome], None]


@dataclass(slots=True, frozen=True)
class Scenario:
    """A numbered demonstration step."""

    number: int
    title: str
    runner: ScenarioRunner


class UnknownScenarioError(LookupError):
    """Raised when a scenario number is not part of the catalogue."""


def demonstrate_nested_errors() -> None:
    """Raise a wrapped error whose cause is the original failure."""

    try:
        raise RuntimeError("Original error")
    except RuntimeError as exc:
        raise ResourceError.wrap("Wrapper error", exc)


class ScenarioService:
    """Run the scenario catalogue against managed resources."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        diagnostics: Optional[Console] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._console = console or Console()
        self._diagnostics = diagnostics or Console(stderr=True)

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    @staticmethod
    def catalogue() -> Sequence[Scenario]:
        return SCENARIOS

    def run_all(self) -> List[ScenarioOutcome]:
        """Run every scenario in order.

        Resources parked on the shared stack by a scenario stay open until the
        whole run finishes.
        """

        return self.run(scenario.number for scenario in SCENARIOS)

    def run(self, numbers: Iterable[int]) -> List[ScenarioOutcome]:
        selected = [self.get(number) for number in numbers]
        outcomes: List[ScenarioOutcome] = []
        with ExitStack() as stack:
            for scenario in selected:
                outcomes.append(self._run_one(scenario, stack))
        return outcomes

    def get(self, number: int) -> Scenario:
        try:
            return _SCENARIOS_BY_NUMBER[number]
        except KeyError:
            raise UnknownScenarioError(f"No scenario numbered {number}") from None

    # ------------------------------------------------------------------ #
    # Helpers used by scenario runners                                   #
    # ------------------------------------------------------------------ #
    def acquire(self, name: str, outcome: ScenarioOutcome) -> ManagedResource:
        return ManagedResource(
            name,
            console=self._console,
            diagnostics=self._diagnostics,
            settings=self._settings,
            on_event=outcome.events.append,
        )

    def report(self, outcome: ScenarioOutcome, handler: str, label: str, error: BaseException) -> None:
        """Print a handled error and record it on the outcome."""

        self._console.print(f"{label}: {escape(str(error))}", highlight=False)
        outcome.errors.append(
            ReportedError(
                handler=handler,
                kind=error_kind(error),
                message=str(error),
                causes=[str(cause) for cause in list(iter_chain(error))[1:]],
            )
        )

    def note(self, message: str) -> None:
        self._console.print(escape(message), highlight=False)

    def _run_one(self, scenario: Scenario, stack: ExitStack) -> ScenarioOutcome:
        outcome = ScenarioOutcome(number=scenario.number, title=scenario.title)
        self._console.print()
        self._console.print(f"[bold]{scenario.number}. {escape(scenario.title)}:[/bold]")
        try:
            scenario.runner(self, stack, outcome)
        except Exception as exc:
            self.report(outcome, "top-level", "Top-level catch", exc)
        return outcome


def _managed_pointer(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    owner = service.acquire("basic", outcome).transfer()
    stack.enter_context(owner)
    owner.perform_operation()


def _multiple_handlers(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    try:
        raise RuntimeError("Runtime error")
    except InvalidArgumentError as exc:
        service.report(outcome, "invalid-argument", "Caught invalid argument", exc)
    except Exception as exc:
        service.report(outcome, "generic", "Caught exception", exc)


def _scope_release(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    with service.acquire("r1", outcome) as resource:
        resource.perform_operation()


def _checked_division(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    try:
        divide(10, 0)
    except InvalidArgumentError as exc:
        service.report(outcome, "division", "Division error", exc)


def _nested_errors(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    try:
        demonstrate_nested_errors()
    except ResourceError as exc:
        service.report(outcome, "nested", "Main error", exc)
        for cause in list(iter_chain(exc))[1:]:
            service.note(f"Nested error: {cause}")


def _multiple_resources(service: ScenarioService, stack: ExitStack, outcome: ScenarioOutcome) -> None:
    try:
        with service.acquire("faulty", outcome) as faulty, service.acquire("failing", outcome) as failing:
            faulty.perform_operation()
            failing.perform_operation()
    except ResourceError as exc:
        service.report(outcome, "resource", "Resource error", exc)


SCENARIOS: Sequence[Scenario] = (
    Scenario(1, "Managed Ownership", _managed_pointer),
    Scenario(2, "Multiple Handlers", _multiple_handlers),
    Scenario(3, "Scope-Based Release", _scope_release),
    Scenario(4, "Checked Division", _checked_division),
    Scenario(5, "Nested Errors", _nested_errors),
    Scenario(6, "Multiple Resources", _multiple_resources),
)

_SCENARIOS_BY_NUMBER: Dict[int, Scenario] = {scenario.number: scenario for scenario in SCENARIOS}


__all__ = [
    "SCENARIOS",
    "Scenario",
    "ScenarioService",
    "UnknownScenarioError",
    "demonstrate_nested_errors",
]
