"""Tests for the demonstration scenario catalogue."""

import pytest

from warden.errors import ErrorKind, ResourceError
from warden.services import scenarios as scenarios_module
from warden.services.scenarios import (
    SCENARIOS,
    Scenario,
    ScenarioService,
    UnknownScenarioError,
    demonstrate_nested_errors,
)
from warden.utils.events import LifecycleEventKind


@pytest.fixture
def service(output, diagnostics, settings):
    return ScenarioService(settings=settings, console=output.console, diagnostics=diagnostics.console)


def _content(lines):
    return [line for line in lines if line]


class TestCatalogue:
    def test_six_scenarios_in_order(self):
        assert [scenario.number for scenario in SCENARIOS] == [1, 2, 3, 4, 5, 6]
        assert ScenarioService.catalogue() is SCENARIOS

    def test_unknown_scenario(self, service):
        with pytest.raises(UnknownScenarioError):
            service.get(7)

    def test_unknown_scenario_runs_nothing(self, service, output):
        with pytest.raises(UnknownScenarioError):
            service.run([3, 42])
        assert output.text == ""


class TestNestedErrors:
    def test_wrapped_cause_is_original(self):
        with pytest.raises(ResourceError) as excinfo:
            demonstrate_nested_errors()
        error = excinfo.value
        assert error.message == "Wrapper error"
        assert error.kind is ErrorKind.WRAPPED
        assert isinstance(error.cause, RuntimeError)
        assert str(error.cause) == "Original error"
        assert error.__cause__ is error.cause


class TestScenarioRuns:
    def test_full_run_output(self, service, output, diagnostics):
        outcomes = service.run_all()

        assert len(outcomes) == 6
        assert all(outcome.succeeded for outcome in outcomes)
        assert _content(output.lines) == [
            "1. Managed Ownership:",
            "Resource basic opened",
            "Operation performed on resource basic",
            "2. Multiple Handlers:",
            "Caught exception: Runtime error",
            "3. Scope-Based Release:",
            "Resource r1 opened",
            "Operation performed on resource r1",
            "Resource r1 closed",
            "4. Checked Division:",
            "Division error: Division by zero",
            "5. Nested Errors:",
            "Main error: Wrapper error",
            "Nested error: Original error",
            "6. Multiple Resources:",
            "Resource faulty opened",
            "Resource failing opened",
            "Resource failing closed",
            "Resource faulty closed",
            "Resource error: Resource faulty is faulty",
            "Resource basic closed",
        ]
        assert _content(diagnostics.lines) == [
            "Release during scope exit failed: Failed to close resource failing",
        ]

    def test_scope_release_has_no_diagnostic(self, service, diagnostics):
        (outcome,) = service.run([3])
        assert [event.kind for event in outcome.events] == [
            LifecycleEventKind.OPENED,
            LifecycleEventKind.OPERATION,
            LifecycleEventKind.CLOSED,
        ]
        assert outcome.errors == []
        assert diagnostics.text == ""

    def test_managed_ownership_releases_at_end_of_run(self, service):
        (outcome,) = service.run([1])
        assert outcome.events[-1].kind is LifecycleEventKind.CLOSED
        assert outcome.events[-1].resource_name == "basic"

    def test_multiple_resources_fail_before_release(self, service):
        (outcome,) = service.run([6])
        kinds = [(event.resource_name, event.kind) for event in outcome.events]
        assert kinds == [
            ("faulty", LifecycleEventKind.OPENED),
            ("failing", LifecycleEventKind.OPENED),
            ("failing", LifecycleEventKind.CLOSED),
            ("failing", LifecycleEventKind.DIAGNOSTIC),
            ("faulty", LifecycleEventKind.CLOSED),
        ]
        assert len(outcome.errors) == 1
        assert outcome.errors[0].kind is ErrorKind.FAULTY
        assert outcome.errors[0].handler == "resource"

    def test_nested_outcome_records_causes(self, service):
        (outcome,) = service.run([5])
        (reported,) = outcome.errors
        assert reported.kind is ErrorKind.WRAPPED
        assert reported.causes == ["Original error"]

    def test_division_outcome(self, service):
        (outcome,) = service.run([4])
        assert outcome.errors[0].kind is ErrorKind.INVALID_ARGUMENT
        assert outcome.errors[0].message == "Division by zero"

    def test_generic_handler_matches_runtime_error(self, service):
        (outcome,) = service.run([2])
        assert outcome.errors[0].handler == "generic"
        assert outcome.errors[0].kind is None

    def test_unmatched_error_reaches_top_level_catch(self, service, output, monkeypatch):
        def _raise_unexpected(service, stack, outcome):
            raise KeyError("unexpected")

        monkeypatch.setitem(
            scenarios_module._SCENARIOS_BY_NUMBER,
            99,
            Scenario(99, "Unexpected Failure", _raise_unexpected),
        )

        failed, following = service.run([99, 3])

        assert "Top-level catch: 'unexpected'" in output.lines
        assert failed.errors[0].handler == "top-level"
        assert failed.errors[0].kind is None
        assert not failed.succeeded
        assert following.succeeded
        assert "Resource r1 closed" in output.lines
