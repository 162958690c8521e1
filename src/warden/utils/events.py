"""Lifecycle event types shared by resources, scenarios and the CLI."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LifecycleEventKind(str, Enum):
    """Observable events in a resource's lifetime."""

    OPENED = "opened"
    OPERATION = "operation"
    CLOSED = "closed"
    DIAGNOSTIC = "diagnostic"


class LifecycleEvent(BaseModel):
    """Single ordered log entry emitted by a managed resource."""

    kind: LifecycleEventKind
    resource_name: str
    message: str

    model_config = ConfigDict(extra="forbid", frozen=True)


def format_event(kind: LifecycleEventKind, resource_name: str, *, detail: str = "") -> str:
    """Render the literal log line for an event."""

    if kind is LifecycleEventKind.OPENED:
        return f"Resource {resource_name} opened"
    if kind is LifecycleEventKind.OPERATION:
        return f"Operation performed on resource {resource_name}"
    if kind is LifecycleEventKind.CLOSED:
        return f"Resource {resource_name} closed"
    return detail


__all__ = ["LifecycleEvent", "LifecycleEventKind", "format_event"]
