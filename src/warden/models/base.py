"""Shared base model definitions for Warden domain objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WardenBaseModel(BaseModel):
    """Base model configured for Warden-wide defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


__all__ = ["WardenBaseModel"]
