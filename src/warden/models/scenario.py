"""Models describing demonstration scenario runs."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from warden.errors import ErrorKind
from warden.models.base import WardenBaseModel
from warden.utils.events import LifecycleEvent


class ReportedError(WardenBaseModel):
    """An error intercepted by a scenario handler."""

    handler: str
    kind: Optional[ErrorKind] = None
    message: str
    causes: List[str] = Field(default_factory=list)


class ScenarioOutcome(WardenBaseModel):
    """Result of running one scenario."""

    number: int = Field(ge=1)
    title: str
    events: List[LifecycleEvent] = Field(default_factory=list)
    errors: List[ReportedError] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not any(error.handler == "top-level" for error in self.errors)


__all__ = ["ReportedError", "ScenarioOutcome"]
