"""Service layer for the Warden application."""

from warden.services.scenarios import SCENARIOS, Scenario, ScenarioService, UnknownScenarioError

__all__ = ["SCENARIOS", "Scenario", "ScenarioService", "UnknownScenarioError"]
